"""S1.01 — Position Mapping.

Alfa/Beta → normalized [0, 1]² position → pixel anchor and quadrant.

    x_norm = 0.5 + alfa / 200
    y_norm = 0.5 - beta / 200      (positive beta is up)
"""

from __future__ import annotations

from sfcm.engine.context import Anchor, GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.axes import AxisVector
from sfcm.models.geometry import Point
from sfcm.utils.math_helpers import clamp01


def axes_to_normalized(axes: AxisVector) -> Point:
    return Point(clamp01(0.5 + axes.alfa / 200), clamp01(0.5 - axes.beta / 200))


def normalized_to_pixel(norm: Point, canvas_width: float, canvas_height: float) -> Point:
    return Point(clamp01(norm.x) * canvas_width, clamp01(norm.y) * canvas_height)


def quadrant_of(norm: Point) -> int:
    """1 top-right, 2 top-left, 3 bottom-left, 4 bottom-right.

    Ties on the centre lines go to the right half (x >= 0.5) and the bottom
    half (y >= 0.5).
    """
    x = clamp01(norm.x)
    y = clamp01(norm.y)
    if x >= 0.5 and y < 0.5:
        return 1
    if x < 0.5 and y < 0.5:
        return 2
    if x < 0.5 and y >= 0.5:
        return 3
    return 4


@stage(
    id="S1.01",
    phase=Phase.LAYOUT,
    dependencies=["S0.01"],
    description="Place one anchor per keyword from Alfa/Beta",
)
def position_mapping(ctx: GenerationContext) -> None:
    anchors: list[Anchor] = []
    for index, kv in enumerate(ctx.keyword_vectors):
        norm = axes_to_normalized(kv.axes)
        anchors.append(
            Anchor(
                keyword_index=index,
                keyword=kv.keyword,
                pixel_point=normalized_to_pixel(norm, ctx.canvas_width, ctx.canvas_height),
                normalized_point=norm,
                quadrant=quadrant_of(norm),
            )
        )
    ctx.anchors = anchors
