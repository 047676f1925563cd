"""Color lookup for species and flows. Colors are opaque tokens, passed through as-is."""

from __future__ import annotations

from collections.abc import Sequence

from trophicnet.engine.levels import ColorPair


def resolve_color(
    colors: Sequence[ColorPair] | None,
    index: int,
    default: ColorPair,
) -> ColorPair:
    """Color pair for species ``index``; the list cycles when it is shorter than the level."""
    if not colors:
        return default
    return colors[index % len(colors)]
