"""Tests for the flow engine."""

import pytest

from trophicnet.engine.flows import compute_flows, row_coverage, tiling_error
from trophicnet.engine.levels import ColorPair
from trophicnet.engine.partition import Facing, flow_origins, partition

DEFAULT = ColorPair("black", "white")
PREDATOR_COLORS = (ColorPair("red", "white"), ColorPair("blue", "white"))


@pytest.fixture
def predators():
    return partition([0.5, 0.5], total_width=400, separator_width=0, y=0, height=30)


@pytest.fixture
def preys():
    return partition([0.25, 0.75], total_width=400, separator_width=0, y=180, height=30)


def test_single_row_split(predators, preys):
    flows = compute_flows(
        preys,
        flow_origins(predators, Facing.DOWN),
        [[1.0, 0.0], [0.25, 0.75]],
        PREDATOR_COLORS,
        DEFAULT,
    )
    # Zero cell emits nothing
    assert [(f.prey_index, f.predator_index) for f in flows] == [(0, 0), (1, 0), (1, 1)]

    whole, left, right = flows
    assert whole.left == (0.0, 180.0)
    assert whole.right == pytest.approx((100.0, 180.0))
    assert whole.apex == (100.0, 30.0)

    assert left.left == (100.0, 180.0)
    assert left.width == pytest.approx(75.0)
    assert right.left[0] == pytest.approx(175.0)
    assert right.right[0] == pytest.approx(400.0)
    assert right.apex == (300.0, 30.0)


def test_row_flows_tile_prey_width(predators, preys):
    matrix = [[0.3, 0.7], [0.45, 0.55]]
    flows = compute_flows(preys, flow_origins(predators, Facing.DOWN), matrix, None, DEFAULT)
    for i, prey in enumerate(preys):
        row = [f for f in flows if f.prey_index == i]
        assert sum(f.width for f in row) == pytest.approx(prey.width)
        assert row_coverage(prey, row) == pytest.approx(prey.width)
        assert row[0].left[0] == pytest.approx(prey.left)
        assert row[-1].right[0] == pytest.approx(prey.right)
        for a, b in zip(row, row[1:]):
            assert a.right[0] == pytest.approx(b.left[0])
    assert tiling_error(preys, flows) == pytest.approx(0.0, abs=1e-9)


def test_colors_come_from_predators_and_cycle():
    predators = partition([0.2, 0.2, 0.2, 0.2, 0.2], total_width=500, separator_width=5)
    preys = partition([1.0], total_width=500, separator_width=5, y=180)
    flows = compute_flows(
        preys,
        flow_origins(predators, Facing.DOWN),
        [[0.2, 0.2, 0.2, 0.2, 0.2]],
        PREDATOR_COLORS,
        DEFAULT,
    )
    assert [f.fill for f in flows] == ["red", "blue", "red", "blue", "red"]


def test_default_color_without_predator_colors(predators, preys):
    flows = compute_flows(preys, flow_origins(predators, Facing.DOWN), [[1.0, 0.0], [0.5, 0.5]], (), DEFAULT)
    assert {f.fill for f in flows} == {"black"}


def test_predators_below_use_prey_bottom_edge():
    preys = partition([1.0], total_width=200, separator_width=0, y=0, height=30)
    predators = partition([1.0], total_width=200, separator_width=0, y=180, height=30)
    flows = compute_flows(
        preys,
        flow_origins(predators, Facing.UP),
        [[1.0]],
        None,
        DEFAULT,
        predator_facing=Facing.UP,
    )
    (flow,) = flows
    assert flow.left == (0.0, 30.0)
    assert flow.apex == (100.0, 180.0)


def test_vertices_drawing_order(predators, preys):
    (flow, *_) = compute_flows(preys, flow_origins(predators, Facing.DOWN), [[1.0, 0.0], [1.0, 0.0]], None, DEFAULT)
    assert flow.vertices == (flow.left, flow.apex, flow.right)


def test_tiling_error_detects_overrun(preys):
    # A row summing to 1.5 runs 50px past a 100px prey
    flows = compute_flows(preys[:1], [(0.0, 0.0), (0.0, 0.0)], [[1.0, 0.5]], None, DEFAULT)
    assert sum(f.width for f in flows) == pytest.approx(150.0)
    assert row_coverage(preys[0], flows) == pytest.approx(150.0)
    assert tiling_error(preys[:1], flows) == pytest.approx(50.0)


def test_tiling_error_groups_interleaved_rows(predators, preys):
    flows = compute_flows(preys, flow_origins(predators, Facing.DOWN), [[0.3, 0.7], [0.6, 0.4]], None, DEFAULT)
    # Row order in the input list does not matter
    shuffled = [flows[2], flows[0], flows[3], flows[1]]
    assert tiling_error(preys, shuffled) == pytest.approx(0.0, abs=1e-9)
