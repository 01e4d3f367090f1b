"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray
from svgpathtools import QuadraticBezier

from sfcm.models.geometry import CURVATURE_LIMIT, BoundingBox, Connection, Point
from sfcm.utils.math_helpers import clamp

# Parallel/collinear segment pairs are skipped below this determinant.
_PARALLEL_EPS = 1e-10


def canvas_diagonal(width: float, height: float) -> float:
    return math.sqrt(width * width + height * height)


def clamp_to_canvas(x: float, y: float, width: float, height: float) -> Point:
    return Point(clamp(x, 0.0, width), clamp(y, 0.0, height))


def compute_curve_control(
    conn: Connection,
    canvas_width: float | None = None,
    canvas_height: float | None = None,
) -> Point:
    """Rebuild the quadratic control point from (from, to, curvature).

    cx = mx + (to.y - from.y) * curvature
    cy = my - (to.x - from.x) * curvature

    Clamped to the canvas when dimensions are given.
    """
    (fx, fy), (tx, ty) = conn.from_, conn.to
    mx = (fx + tx) / 2
    my = (fy + ty) / 2
    cx = mx + (ty - fy) * conn.curvature
    cy = my - (tx - fx) * conn.curvature
    if canvas_width is not None and canvas_height is not None:
        return clamp_to_canvas(cx, cy, canvas_width, canvas_height)
    return Point(cx, cy)


def curvature_from_control(start: Point, end: Point, control: Point) -> float:
    """Inverse of ``compute_curve_control``, clamped to [-0.8, 0.8].

    Solves whichever component equation has the larger denominator. Near 45°
    both are valid and may disagree in the last few bits.
    """
    mid_x = (start.x + end.x) / 2
    mid_y = (start.y + end.y) / 2
    dx = end.x - start.x
    dy = end.y - start.y

    curvature = 0.0
    if abs(dy) > abs(dx):
        curvature = (control.x - mid_x) / dy
    elif abs(dx) > 0:
        curvature = -(control.y - mid_y) / dx

    if not math.isfinite(curvature):
        return 0.0
    return clamp(curvature, -CURVATURE_LIMIT, CURVATURE_LIMIT)


def compute_bounding_box(
    connections: Iterable[Connection],
    canvas_width: float,
    canvas_height: float,
) -> BoundingBox | None:
    """Bounding box over endpoints and (curved) control points, clamped to canvas."""
    xs: list[float] = []
    ys: list[float] = []
    for conn in connections:
        xs.extend((conn.from_.x, conn.to.x))
        ys.extend((conn.from_.y, conn.to.y))
        if conn.curved:
            cx, cy = compute_curve_control(conn, canvas_width, canvas_height)
            xs.append(cx)
            ys.append(cy)

    if not xs:
        return None

    return BoundingBox(
        min_x=clamp(min(xs), 0.0, canvas_width),
        min_y=clamp(min(ys), 0.0, canvas_height),
        max_x=clamp(max(xs), 0.0, canvas_width),
        max_y=clamp(max(ys), 0.0, canvas_height),
    )


def sample_quadratic(start: Point, control: Point, end: Point, segments: int = 12) -> NDArray[np.float64]:
    """Sample a quadratic bézier into ``segments + 1`` points (Nx2)."""
    curve = QuadraticBezier(
        complex(start.x, start.y),
        complex(control.x, control.y),
        complex(end.x, end.y),
    )
    pts = [curve.point(t) for t in np.linspace(0.0, 1.0, segments + 1)]
    return np.array([(p.real, p.imag) for p in pts], dtype=np.float64)


def connection_polyline(
    conn: Connection,
    canvas_width: float,
    canvas_height: float,
    segments: int = 12,
) -> NDArray[np.float64]:
    """Straight connections → 2 points; curved → sampled quadratic."""
    if not conn.curved:
        return np.array([conn.from_, conn.to], dtype=np.float64)
    control = compute_curve_control(conn, canvas_width, canvas_height)
    return sample_quadratic(conn.from_, control, conn.to, segments)


def segment_intersections(
    seg_a: NDArray[np.float64],
    seg_b: NDArray[np.float64],
) -> tuple[NDArray[np.bool_], NDArray[np.float64], NDArray[np.float64]]:
    """Pairwise parametric intersection of two segment sets.

    seg_a: (K, 4) rows of (x1, y1, x2, y2); seg_b: (S, 4).
    Returns (hit mask (K, S), x (K, S), y (K, S)). Hits require
    t, u ∈ [0, 1] and a non-degenerate determinant.
    """
    x1 = seg_a[:, 0:1]
    y1 = seg_a[:, 1:2]
    x2 = seg_a[:, 2:3]
    y2 = seg_a[:, 3:4]
    x3 = seg_b[:, 0][None, :]
    y3 = seg_b[:, 1][None, :]
    x4 = seg_b[:, 2][None, :]
    y4 = seg_b[:, 3][None, :]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    valid = np.abs(denom) >= _PARALLEL_EPS
    safe = np.where(valid, denom, 1.0)

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / safe
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / safe

    hit = valid & (t >= 0) & (t <= 1) & (u >= 0) & (u <= 1)
    px = x1 + t * (x2 - x1)
    py = y1 + t * (y2 - y1)
    return hit, px, py


def polyline_segments(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Nx2 polyline → (N-1)x4 segment rows."""
    return np.hstack([points[:-1], points[1:]])


def unit_vector(dx: float, dy: float) -> tuple[float, float]:
    length = math.hypot(dx, dy)
    if length == 0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (dx / length, dy / length)
