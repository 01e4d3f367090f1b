"""S4.01 — Orientation Normalization.

With ``force_orientation`` on, a drawing whose *pre-mirroring* bounding box is
taller than wide is turned 90° clockwise about the canvas centre:

    (x, y) → (cx + (y - cy), cy - (x - cx))

Only endpoints move; a rotation keeps every curvature valid as-is.
"""

from __future__ import annotations

from sfcm.engine.context import GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.geometry import BoundingBox, Connection, Point
from sfcm.utils.geometry import clamp_to_canvas


def should_rotate(force_orientation: bool, bbox: BoundingBox | None) -> bool:
    if not force_orientation or bbox is None:
        return False
    if bbox.width <= 0 or bbox.height <= 0:
        return False
    return bbox.height > bbox.width


def rotate_point_clockwise(point: Point, canvas_width: float, canvas_height: float) -> Point:
    cx = canvas_width / 2
    cy = canvas_height / 2
    return clamp_to_canvas(cx + (point.y - cy), cy - (point.x - cx), canvas_width, canvas_height)


def rotate_connections_clockwise(
    connections: list[Connection],
    canvas_width: float,
    canvas_height: float,
) -> list[Connection]:
    return [
        conn.model_copy(
            update={
                "from_": rotate_point_clockwise(conn.from_, canvas_width, canvas_height),
                "to": rotate_point_clockwise(conn.to, canvas_width, canvas_height),
            }
        )
        for conn in connections
    ]


@stage(
    id="S4.01",
    phase=Phase.FINISHING,
    dependencies=["S3.02"],
    description="Rotate tall drawings to landscape when forced",
)
def orientation(ctx: GenerationContext) -> None:
    ctx.rotation_applied = should_rotate(ctx.options.force_orientation, ctx.pre_mirror_bbox)
    if ctx.rotation_applied:
        ctx.connections = rotate_connections_clockwise(ctx.connections, ctx.canvas_width, ctx.canvas_height)
