"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from trophicnet.engine.config import NetworkConfig
from trophicnet.engine.levels import ColorPair, Level


class ColorIn(BaseModel):
    fill: str = Field(..., description="Fill color of the species rectangle")
    text: str = Field(..., description="Color of the species label")


class LevelIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    populations: list[float] = Field(..., description="Population share of each species")
    occupation_per_previous_level: list[list[float]] | None = Field(
        default=None,
        alias="occupationPerPreviousLevel",
        description="Row i, column j: share of species i occupied by species j of the previous level",
    )
    colors: list[ColorIn] = Field(default_factory=list)
    labels: list[str] | None = None

    def to_level(self) -> Level:
        return Level(
            populations=tuple(self.populations),
            occupation_per_previous_level=(
                tuple(tuple(row) for row in self.occupation_per_previous_level)
                if self.occupation_per_previous_level is not None
                else None
            ),
            colors=tuple(ColorPair(fill=c.fill, text=c.text) for c in self.colors),
            labels=tuple(self.labels) if self.labels is not None else None,
        )


class NetworkOptions(BaseModel):
    """Drawing options. Unset fields keep the server defaults."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    separator_width: float | None = Field(default=None, alias="separatorWidth", ge=0)
    rectangle_height: float | None = Field(default=None, alias="rectangleHeight", gt=0)
    space_between_levels: float | None = Field(default=None, alias="spaceBetweenLevels", ge=0)
    default_fill_color: str | None = Field(default=None, alias="defaultFillColor")
    default_text_color: str | None = Field(default=None, alias="defaultTextColor")
    canvas_width: float | None = Field(default=None, alias="canvasWidth", gt=0)
    font: str | None = None
    sum_decimals: int | None = Field(default=None, alias="sumDecimals", ge=0)
    sum_tolerance: float | None = Field(default=None, alias="sumTolerance", ge=0)
    predators_above: bool | None = Field(default=None, alias="predatorsAbove")

    def to_config(self, base: NetworkConfig) -> NetworkConfig:
        return base.merged(self.model_dump(exclude_none=True))


class NetworkRequest(BaseModel):
    levels: list[LevelIn] = Field(..., description="Trophic levels, top predators first")
    options: NetworkOptions = Field(default_factory=NetworkOptions)

    def to_levels(self) -> list[Level]:
        return [level.to_level() for level in self.levels]
