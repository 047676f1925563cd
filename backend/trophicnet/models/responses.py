"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class IssueOut(BaseModel):
    kind: str
    message: str
    level: int | None = None
    row: int | None = None


class ValidationResponse(BaseModel):
    valid: bool
    issues: list[IssueOut] = Field(default_factory=list)
    report: str = ""


class RectangleOut(BaseModel):
    x: float
    y: float
    width: float
    height: float


class SpeciesOut(BaseModel):
    rect: RectangleOut
    fill: str
    text_color: str
    label: str


class LevelOut(BaseModel):
    index: int
    y: float
    species: list[SpeciesOut] = Field(default_factory=list)


class FlowOut(BaseModel):
    prey_index: int
    predator_index: int
    points: list[tuple[float, float]]
    width: float
    fill: str


class FlowBandOut(BaseModel):
    prey_level: int
    predator_level: int
    flows: list[FlowOut] = Field(default_factory=list)


class SceneResponse(BaseModel):
    width: float
    height: float
    font: str
    levels: list[LevelOut] = Field(default_factory=list)
    flow_bands: list[FlowBandOut] = Field(default_factory=list)
    processing_time_ms: float = 0.0
