"""FastAPI dependency injection."""

from __future__ import annotations

from trophicnet.config import Settings, settings
from trophicnet.engine.config import NetworkConfig


def get_settings() -> Settings:
    return settings


def get_network_config() -> NetworkConfig:
    return settings.network_config()
