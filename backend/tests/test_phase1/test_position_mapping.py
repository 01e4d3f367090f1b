"""Tests for anchor placement from Alfa/Beta."""

import pytest

from sfcm.engine.context import GenerationContext, KeywordVector
from sfcm.engine.phase1.s1_01_position_mapping import (
    axes_to_normalized,
    normalized_to_pixel,
    position_mapping,
    quadrant_of,
)
from sfcm.models.axes import AxisVector
from sfcm.models.geometry import Point


def _axes(alfa: float, beta: float) -> AxisVector:
    return AxisVector(alfa=alfa, beta=beta, gamma=0, delta=0)


@pytest.mark.parametrize(
    "alfa,beta,expected,quadrant",
    [
        (0, 0, (0.5, 0.5), 4),
        (100, 100, (1.0, 0.0), 1),
        (-100, 100, (0.0, 0.0), 2),
        (-100, -100, (0.0, 1.0), 3),
        (100, -100, (1.0, 1.0), 4),
        (-35, 40, (0.325, 0.3), 2),
    ],
)
def test_normalized_position_and_quadrant(alfa, beta, expected, quadrant):
    norm = axes_to_normalized(_axes(alfa, beta))
    assert norm.x == pytest.approx(expected[0])
    assert norm.y == pytest.approx(expected[1])
    assert quadrant_of(norm) == quadrant


def test_positive_beta_is_up():
    up = axes_to_normalized(_axes(0, 50))
    down = axes_to_normalized(_axes(0, -50))
    assert up.y < down.y


def test_quadrant_ties_go_right_and_down():
    assert quadrant_of(Point(0.5, 0.2)) == 1
    assert quadrant_of(Point(0.2, 0.5)) == 3
    assert quadrant_of(Point(0.5, 0.5)) == 4


def test_pixel_scaling_on_non_square_canvas():
    pixel = normalized_to_pixel(Point(0.25, 0.5), 1080, 1350)
    assert pixel == Point(270.0, 675.0)


def test_pixel_is_clamped():
    pixel = normalized_to_pixel(Point(1.2, -0.3), 1000, 500)
    assert pixel == Point(1000.0, 0.0)


def test_stage_builds_one_anchor_per_keyword():
    ctx = GenerationContext(
        keywords=["a", "b"],
        seed="1",
        canvas_width=1000,
        canvas_height=800,
        keyword_vectors=[
            KeywordVector("a", _axes(0, 0)),
            KeywordVector("b", _axes(100, 100)),
        ],
    )
    position_mapping(ctx)

    assert [a.keyword_index for a in ctx.anchors] == [0, 1]
    assert ctx.anchors[0].pixel_point == Point(500.0, 400.0)
    assert ctx.anchors[1].pixel_point == Point(1000.0, 0.0)
    assert ctx.anchors[1].quadrant == 1
