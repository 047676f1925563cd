"""Network configuration — drawing options and validation slack."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter

from trophicnet.engine.levels import ColorPair

logger = logging.getLogger(__name__)

# camelCase option names, mapped to field names.
_CAMEL_ALIASES = {
    "separatorWidth": "separator_width",
    "rectangleHeight": "rectangle_height",
    "spaceBetweenLevels": "space_between_levels",
    "defaultFillColor": "default_fill_color",
    "defaultTextColor": "default_text_color",
    "canvasWidth": "canvas_width",
    "sumDecimals": "sum_decimals",
    "sumTolerance": "sum_tolerance",
    "predatorsAbove": "predators_above",
}


@dataclass(frozen=True)
class NetworkConfig:
    """Controls the geometry of a rendered network."""

    # Horizontal gap between two adjacent rectangles (px)
    separator_width: float = 5.0
    rectangle_height: float = 30.0
    # Vertical gap between two levels (px)
    space_between_levels: float = 150.0
    default_fill_color: str = "black"
    default_text_color: str = "white"
    canvas_width: float = 500.0
    font: str = "15px Arial"

    # Sums are rounded to this many decimals before being compared to 1
    sum_decimals: int = 2
    # Extra slack on the rounded sum; 0 keeps the exact comparison
    sum_tolerance: float = 0.0

    # Level 0 at the top of the canvas, flows pointing up to their predators
    predators_above: bool = True
    # Partition levels through a thread pool
    parallel: bool = False

    @property
    def default_color(self) -> ColorPair:
        return ColorPair(fill=self.default_fill_color, text=self.default_text_color)

    def canvas_height(self, level_count: int) -> float:
        if level_count <= 0:
            return 0.0
        return level_count * self.rectangle_height + (level_count - 1) * self.space_between_levels

    def merged(self, options: Mapping[str, Any] | None) -> NetworkConfig:
        """Return a copy with ``options`` laid over this config.

        Keys may use the field names or their camelCase spelling
        (``canvasWidth``). Unknown keys are ignored with a debug log. Values
        are checked against the field types; strings holding numbers are
        converted and anything else raises ``pydantic.ValidationError``.
        """
        if not options:
            return self
        known = {f.name for f in dataclasses.fields(self)}
        changes: dict[str, Any] = {}
        for key, value in options.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown network option %r", key)
                continue
            if value is None:
                continue
            changes[name] = value
        return _CONFIG_ADAPTER.validate_python({**dataclasses.asdict(self), **changes})


_CONFIG_ADAPTER = TypeAdapter(NetworkConfig)
