"""Partition a level's width into per-species rectangles.

Each species gets ``population * total_width``; every species after the first
is shifted right and narrowed by one separator, so the gaps come out of the
species' own share and the level still spans [0, total_width].
"""

from __future__ import annotations

import enum
from collections.abc import Sequence

import numpy as np

from trophicnet.engine.config import NetworkConfig
from trophicnet.engine.levels import Point, RectangleGeometry


class Facing(enum.Enum):
    """Which edge of a predator rectangle faces its preys."""

    DOWN = "down"  # predator drawn above its preys: flows leave the bottom edge
    UP = "up"  # predator drawn below its preys: flows leave the top edge


def partition(
    populations: Sequence[float],
    total_width: float,
    separator_width: float,
    y: float = 0.0,
    height: float = 30.0,
) -> tuple[RectangleGeometry, ...]:
    """Rectangles for one level, left to right, one per population entry.

    Widths may come out zero or negative when ``population * total_width`` is
    not larger than the separator; that is left to the caller.
    """
    pops = np.asarray(populations, dtype=np.float64)
    if pops.size == 0:
        return ()

    # Cumulative share of the species to the left of each one
    starts = np.concatenate(([0.0], np.cumsum(pops)[:-1]))
    lefts = starts * total_width
    widths = pops * total_width
    lefts[1:] += separator_width
    widths[1:] -= separator_width

    return tuple(
        RectangleGeometry(
            top_left=(float(left), float(y)),
            bottom_left=(float(left), float(y + height)),
            width=float(width),
        )
        for left, width in zip(lefts, widths)
    )


def flow_origins(
    rectangles: Sequence[RectangleGeometry],
    facing: Facing,
) -> tuple[Point, ...]:
    """Point each predator's flows converge to: midpoint of the edge facing the preys."""
    if facing is Facing.DOWN:
        return tuple(r.bottom_mid for r in rectangles)
    return tuple(r.top_mid for r in rectangles)


def level_y(index: int, level_count: int, config: NetworkConfig) -> float:
    """Top coordinate of level ``index`` in a stack of ``level_count`` levels."""
    slot = index if config.predators_above else level_count - 1 - index
    return slot * (config.rectangle_height + config.space_between_levels)


def partition_level(
    populations: Sequence[float],
    index: int,
    level_count: int,
    config: NetworkConfig,
) -> tuple[RectangleGeometry, ...]:
    """Partition a level at its place in the stack."""
    return partition(
        populations,
        total_width=config.canvas_width,
        separator_width=config.separator_width,
        y=level_y(index, level_count, config),
        height=config.rectangle_height,
    )
