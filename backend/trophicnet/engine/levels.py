"""Network data model — input levels and the derived scene.

Input  → Level (populations, occupation matrix, colors, labels)
Output → NetworkScene (per-level SpeciesBox rows + per-pair FlowBand)

Everything derived is frozen; a scene is rebuilt on every assemble() call.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass(frozen=True)
class ColorPair:
    """Fill color of a species and the color of its label."""

    fill: str
    text: str


@dataclass(frozen=True)
class Level:
    """One trophic level of the network.

    ``occupation_per_previous_level[i][j]`` is the share of species i of this
    level occupied by species j of the previous level. The first level has
    no previous level and no matrix.
    """

    populations: Sequence[float]
    occupation_per_previous_level: Sequence[Sequence[float]] | None = None
    colors: Sequence[ColorPair] = ()
    labels: Sequence[str] | None = None

    @property
    def species_count(self) -> int:
        return len(self.populations)


@dataclass(frozen=True)
class RectangleGeometry:
    top_left: Point
    bottom_left: Point
    width: float

    @property
    def left(self) -> float:
        return self.top_left[0]

    @property
    def top(self) -> float:
        return self.top_left[1]

    @property
    def bottom(self) -> float:
        return self.bottom_left[1]

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def top_mid(self) -> Point:
        return (self.center_x, self.top)

    @property
    def bottom_mid(self) -> Point:
        return (self.center_x, self.bottom)


@dataclass(frozen=True)
class FlowPolygon:
    """Triangle from a slice of a prey rectangle to a predator's origin point."""

    prey_index: int
    predator_index: int
    left: Point
    right: Point
    apex: Point
    fill: str

    @property
    def width(self) -> float:
        return self.right[0] - self.left[0]

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        # Drawing order: left edge vertex, apex, right edge vertex
        return (self.left, self.apex, self.right)


@dataclass(frozen=True)
class SpeciesBox:
    rect: RectangleGeometry
    fill: str
    text_color: str
    label: str


@dataclass(frozen=True)
class LevelScene:
    index: int
    y: float
    species: tuple[SpeciesBox, ...]

    @property
    def rectangles(self) -> tuple[RectangleGeometry, ...]:
        return tuple(box.rect for box in self.species)


@dataclass(frozen=True)
class FlowBand:
    """All flows between a prey level and the predator level before it."""

    prey_level: int
    predator_level: int
    polygons: tuple[FlowPolygon, ...]

    def row(self, prey_index: int) -> tuple[FlowPolygon, ...]:
        return tuple(p for p in self.polygons if p.prey_index == prey_index)


@dataclass(frozen=True)
class NetworkScene:
    """Everything an external renderer needs to draw the network."""

    width: float
    height: float
    font: str
    levels: tuple[LevelScene, ...] = field(default_factory=tuple)
    flows: tuple[FlowBand, ...] = field(default_factory=tuple)

    @property
    def species_count(self) -> int:
        return sum(len(level.species) for level in self.levels)

    @property
    def flow_count(self) -> int:
        return sum(len(band.polygons) for band in self.flows)
