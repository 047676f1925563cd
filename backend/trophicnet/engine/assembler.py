"""Network assembler — validate, partition every level, then flow every adjacent pair."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from trophicnet.engine.colors import resolve_color
from trophicnet.engine.config import NetworkConfig
from trophicnet.engine.errors import InvalidNetworkError
from trophicnet.engine.flows import compute_flows, tiling_error
from trophicnet.engine.levels import (
    FlowBand,
    Level,
    LevelScene,
    NetworkScene,
    RectangleGeometry,
    SpeciesBox,
)
from trophicnet.engine.partition import Facing, flow_origins, partition_level
from trophicnet.engine.validator import validate_levels

logger = logging.getLogger(__name__)

# Flows drifting further than this from their prey width get a warning
_TILING_WARN_PX = 0.5


class NetworkAssembler:
    """Builds the renderable scene of a trophic network."""

    def __init__(self, config: NetworkConfig | None = None) -> None:
        self.config = config or NetworkConfig()

    def assemble(self, levels: Sequence[Level]) -> NetworkScene:
        """Validate ``levels`` and compute every rectangle, label and flow.

        Raises InvalidNetworkError with the full defect list before any
        geometry is computed.
        """
        start = time.perf_counter()

        defects = validate_levels(levels, self.config)
        if defects:
            logger.warning("Network rejected: %d defect(s)", len(defects))
            raise InvalidNetworkError(defects)

        rectangles = self.partition_all(levels)
        level_scenes = self._dress_levels(levels, rectangles)

        bands = [
            self._flow_band(levels, rectangles, k)
            for k in range(1, len(levels))
        ]

        scene = NetworkScene(
            width=self.config.canvas_width,
            height=self.config.canvas_height(len(levels)),
            font=self.config.font,
            levels=tuple(level_scenes),
            flows=tuple(bands),
        )

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Network assembled: %d levels, %d species, %d flows in %.1fms",
            len(levels),
            scene.species_count,
            scene.flow_count,
            elapsed,
        )
        return scene

    def partition_all(self, levels: Sequence[Level]) -> list[tuple[RectangleGeometry, ...]]:
        """Rectangles of every level, in level order."""
        n = len(levels)

        def _one(k: int) -> tuple[RectangleGeometry, ...]:
            return partition_level(levels[k].populations, k, n, self.config)

        if self.config.parallel and n > 1:
            with ThreadPoolExecutor(max_workers=min(n, 8)) as pool:
                # map keeps level order; leaving the block is the barrier
                return list(pool.map(_one, range(n)))
        return [_one(k) for k in range(n)]

    def _dress_levels(
        self,
        levels: Sequence[Level],
        rectangles: Sequence[tuple[RectangleGeometry, ...]],
    ) -> list[LevelScene]:
        default = self.config.default_color
        # Numbering runs across the whole network, not per level
        counter = 1
        scenes: list[LevelScene] = []

        for k, (level, rects) in enumerate(zip(levels, rectangles)):
            boxes: list[SpeciesBox] = []
            for i, rect in enumerate(rects):
                color = resolve_color(level.colors, i, default)
                label = _explicit_label(level, i) or str(counter)
                counter += 1
                boxes.append(SpeciesBox(
                    rect=rect,
                    fill=color.fill,
                    text_color=color.text,
                    label=label,
                ))
            y = rects[0].top if rects else 0.0
            scenes.append(LevelScene(index=k, y=y, species=tuple(boxes)))
        return scenes

    def _flow_band(
        self,
        levels: Sequence[Level],
        rectangles: Sequence[tuple[RectangleGeometry, ...]],
        k: int,
    ) -> FlowBand:
        prey_level = levels[k]
        predator_level = levels[k - 1]
        prey_rects = rectangles[k]
        predator_rects = rectangles[k - 1]

        facing = _facing(predator_rects, prey_rects)
        polygons = compute_flows(
            prey_rects,
            flow_origins(predator_rects, facing),
            prey_level.occupation_per_previous_level or (),
            predator_level.colors,
            self.config.default_color,
            predator_facing=facing,
        )

        error = tiling_error(prey_rects, polygons)
        if error > _TILING_WARN_PX:
            logger.warning("Level %d flows drift %.3fpx from their prey widths", k + 1, error)
        else:
            logger.debug("Level %d: %d flows, tiling error %.2e", k + 1, len(polygons), error)

        return FlowBand(prey_level=k, predator_level=k - 1, polygons=tuple(polygons))


def _explicit_label(level: Level, index: int) -> str | None:
    if not level.labels or index >= len(level.labels):
        return None
    return level.labels[index] or None


def _facing(
    predator_rects: Sequence[RectangleGeometry],
    prey_rects: Sequence[RectangleGeometry],
) -> Facing:
    if not predator_rects or not prey_rects:
        return Facing.DOWN
    return Facing.DOWN if predator_rects[0].top < prey_rects[0].top else Facing.UP


def assemble_network(
    levels: Sequence[Level],
    options: Mapping[str, Any] | None = None,
    config: NetworkConfig | None = None,
) -> NetworkScene:
    """Assemble with ``options`` merged over ``config`` (or the defaults)."""
    base = config or NetworkConfig()
    return NetworkAssembler(base.merged(options)).assemble(levels)
