"""S3.01 — Final Geometry Mirroring. ★★

Reflect the whole drawing across one canvas-centred axis and append the
reflection to the originals.

The bounding box only chooses the axis *type* from its aspect ratio:
wide → vertical axis, tall → horizontal axis, square-ish → the main
diagonal. The axis always passes through the canvas centre, wherever the
geometry sits.
"""

from __future__ import annotations

import logging

from sfcm.engine.context import GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.geometry import BoundingBox, Connection, Point
from sfcm.utils.geometry import (
    clamp_to_canvas,
    compute_bounding_box,
    compute_curve_control,
    curvature_from_control,
)

logger = logging.getLogger(__name__)

VERTICAL = "vertical"
HORIZONTAL = "horizontal"
DIAGONAL = "diagonal"


def classify_axis(bbox: BoundingBox, tolerance: float = 0.01) -> str:
    width = bbox.width
    height = bbox.height
    if abs(width - height) < tolerance * max(width, height):
        return DIAGONAL
    if width > height:
        return VERTICAL
    return HORIZONTAL


def reflect_point(point: Point, axis: str, canvas_width: float, canvas_height: float) -> Point:
    """Reflect across the canvas-centred axis, clamped to the canvas."""
    cx = canvas_width / 2
    cy = canvas_height / 2
    if axis == VERTICAL:
        x, y = 2 * cx - point.x, point.y
    elif axis == HORIZONTAL:
        x, y = point.x, 2 * cy - point.y
    else:
        x, y = cx + cy - point.y, cx + cy - point.x
    return clamp_to_canvas(x, y, canvas_width, canvas_height)


def mirror_axis_segment(axis: str, canvas_width: float, canvas_height: float) -> tuple[Point, Point]:
    """Axis line across the full canvas, for debug overlays."""
    cx = canvas_width / 2
    cy = canvas_height / 2
    if axis == VERTICAL:
        return Point(cx, 0.0), Point(cx, canvas_height)
    if axis == HORIZONTAL:
        return Point(0.0, cy), Point(canvas_width, cy)
    return Point(0.0, 0.0), Point(canvas_width, canvas_height)


def mirror_connection(conn: Connection, axis: str, canvas_width: float, canvas_height: float) -> Connection:
    start = reflect_point(conn.from_, axis, canvas_width, canvas_height)
    end = reflect_point(conn.to, axis, canvas_width, canvas_height)

    curvature = conn.curvature
    if conn.curved:
        control = compute_curve_control(conn, canvas_width, canvas_height)
        mirrored_control = reflect_point(control, axis, canvas_width, canvas_height)
        # Re-derived rather than negated: clamping can break the symmetry.
        curvature = curvature_from_control(start, end, mirrored_control)

    return conn.model_copy(update={"from_": start, "to": end, "curvature": curvature})


def mirror_connections(
    connections: list[Connection],
    canvas_width: float,
    canvas_height: float,
    tolerance: float = 0.01,
) -> tuple[list[Connection], str | None]:
    """Originals followed by their reflections; the count exactly doubles."""
    bbox = compute_bounding_box(connections, canvas_width, canvas_height)
    if bbox is None:
        return list(connections), None

    axis = classify_axis(bbox, tolerance)
    mirrored = [mirror_connection(c, axis, canvas_width, canvas_height) for c in connections]
    return list(connections) + mirrored, axis


@stage(
    id="S3.01",
    phase=Phase.COMPOSITION,
    dependencies=["S2.04"],
    description="Mirror all geometry across a canvas-centred axis",
)
def mirroring(ctx: GenerationContext) -> None:
    if not ctx.connections:
        return

    merged, axis = mirror_connections(
        ctx.connections,
        ctx.canvas_width,
        ctx.canvas_height,
        ctx.config.diagonal_axis_tolerance,
    )
    ctx.connections = merged
    ctx.mirror_axis = axis
    if axis is not None:
        ctx.mirror_axis_segment = mirror_axis_segment(axis, ctx.canvas_width, ctx.canvas_height)
    logger.debug("  mirrored across %s axis → %d connections", axis, len(merged))
