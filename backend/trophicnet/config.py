"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from trophicnet.engine.config import NetworkConfig


class Settings(BaseSettings):
    trophicnet_env: str = "development"
    trophicnet_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Server-wide drawing defaults, overridable per request
    trophicnet_canvas_width: float = 500.0
    trophicnet_parallel_partition: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def network_config(self) -> NetworkConfig:
        return NetworkConfig(
            canvas_width=self.trophicnet_canvas_width,
            parallel=self.trophicnet_parallel_partition,
        )


settings = Settings()
