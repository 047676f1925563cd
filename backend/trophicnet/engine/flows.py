"""Flow polygons between a prey level and its predator level.

Row i of the occupation matrix splits prey rectangle i left to right, one slice
per predator column. Each slice becomes a triangle whose apex is the
predator's flow origin. Rows sum to 1, so a row's slices tile the prey
rectangle exactly.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from shapely.geometry import LineString
from shapely.ops import unary_union

from trophicnet.engine.colors import resolve_color
from trophicnet.engine.levels import ColorPair, FlowPolygon, Point, RectangleGeometry
from trophicnet.engine.partition import Facing


def compute_flows(
    prey_rectangles: Sequence[RectangleGeometry],
    predator_origins: Sequence[Point],
    occupation: Sequence[Sequence[float]],
    predator_colors: Sequence[ColorPair] | None,
    default_color: ColorPair,
    predator_facing: Facing = Facing.DOWN,
) -> list[FlowPolygon]:
    """Flow polygons ordered by (prey index, predator index).

    Zero cells take no width and emit no polygon.
    """
    flows: list[FlowPolygon] = []

    for i, row in enumerate(occupation):
        prey = prey_rectangles[i]
        # Prey edge facing the predator level
        edge_y = prey.top if predator_facing is Facing.DOWN else prey.bottom
        offset_x = 0.0

        for j, share in enumerate(row):
            w = prey.width * share
            if share != 0:
                color = resolve_color(predator_colors, j, default_color)
                left = (prey.left + offset_x, edge_y)
                flows.append(FlowPolygon(
                    prey_index=i,
                    predator_index=j,
                    left=left,
                    right=(left[0] + w, edge_y),
                    apex=predator_origins[j],
                    fill=color.fill or default_color.fill,
                ))
            offset_x += w

    return flows


def row_coverage(prey: RectangleGeometry, row_flows: Sequence[FlowPolygon]) -> float:
    """Length of the prey edge covered by the union of a row's flow bases."""
    bases = [
        LineString([p.left, p.right])
        for p in row_flows
        if p.right[0] != p.left[0]
    ]
    if not bases:
        return 0.0
    return float(unary_union(bases).length)


def tiling_error(
    prey_rectangles: Sequence[RectangleGeometry],
    flows: Sequence[FlowPolygon],
) -> float:
    """Largest gap or overlap between a prey width and the flows drawn from it."""
    rows: dict[int, list[FlowPolygon]] = defaultdict(list)
    for p in flows:
        rows[p.prey_index].append(p)

    worst = 0.0
    for i, prey in enumerate(prey_rectangles):
        row = rows.get(i)
        if not row:
            continue
        summed = sum(p.width for p in row)
        covered = row_coverage(prey, row)
        # summed > covered means overlap, covered < width means a gap
        worst = max(worst, abs(summed - prey.width), abs(summed - covered))
    return worst
