"""S2.01 — Curve Generation. ★★★

Fan each keyword anchor out into 1–7 quadratic curves.

Gamma drives the fan: line count, a global rotation of the direction
clusters, and line length. Delta drives the bend: the perpendicular offset of
the control point from the chord midpoint. Each line additionally draws a
discrete length profile and curvature profile so a single keyword mixes
long/straight and short/bent strokes.

Every random decision is ``seeded_random("<seed>:<decision>:<indices>")``,
so the stage is a pure function of (seed, keywords, canvas, options).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sfcm.engine import generation_constants as gc
from sfcm.engine.context import Anchor, Curve, DirectionClusterDebug, GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.axes import AxisVector
from sfcm.models.geometry import Point
from sfcm.utils.geometry import canvas_diagonal, clamp_to_canvas
from sfcm.utils.math_helpers import clamp, is_finite, round_half_up
from sfcm.utils.seed import seeded_choice, seeded_random

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineDirection:
    cluster_index: int
    cluster_angle: float
    gamma_rotation: float
    jitter: float
    direction: float

    @property
    def final_cluster_angle(self) -> float:
        return self.cluster_angle + self.gamma_rotation


def _gamma_weight(gamma: float) -> float:
    return min(1.0, abs(gamma) / 100)


def line_count(gamma: float) -> int:
    """1 line at gamma 0 up to 7 at |gamma| 100, non-decreasing in |gamma|."""
    span = gc.LINE_COUNT_MAX - gc.LINE_COUNT_MIN
    count = gc.LINE_COUNT_MIN + round_half_up(_gamma_weight(gamma) * span)
    return int(clamp(count, gc.LINE_COUNT_MIN, gc.LINE_COUNT_MAX))


def line_direction(
    seed: str,
    keyword_index: int,
    line_index: int,
    gamma: float,
    cluster_count: int,
    cluster_spread: float,
) -> LineDirection:
    """Cluster centre + gamma rotation + in-cluster jitter, folded into [0, 180]."""
    cluster_count = max(1, cluster_count)
    r = seeded_random(f"{seed}:cluster:{line_index}")
    cluster_index = min(int(r * cluster_count), cluster_count - 1)

    cluster_angle = cluster_index / cluster_count * gc.CLUSTER_ARC_DEG
    gamma_rotation = gamma / 100 * gc.GAMMA_ROTATION_DEG
    jitter = (seeded_random(f"{seed}:cluster_jitter:{keyword_index}:{line_index}") - 0.5) * cluster_spread

    direction = (cluster_angle + gamma_rotation + jitter) % gc.CLUSTER_ARC_DEG
    direction = clamp(direction, 0.0, gc.CLUSTER_ARC_DEG)
    return LineDirection(cluster_index, cluster_angle, gamma_rotation, jitter, direction)


def disperse_start_point(
    anchor: Point,
    seed: str,
    keyword_index: int,
    line_index: int,
    canvas_width: float,
    canvas_height: float,
    dispersion_fraction: float = 0.02,
) -> Point:
    """Start point for a line: the anchor for line 0, else a point in a small disk.

    Uniform by area (radius ∝ √u). Any degenerate input returns the anchor
    unchanged.
    """
    if line_index == 0:
        return anchor
    if not isinstance(seed, str) or keyword_index < 0 or line_index < 0:
        return anchor

    max_radius = canvas_diagonal(canvas_width, canvas_height) * dispersion_fraction
    angle = seeded_random(f"{seed}:dispersion:angle:{keyword_index}:{line_index}") * 2 * math.pi
    radius = max_radius * math.sqrt(seeded_random(f"{seed}:dispersion:radius:{keyword_index}:{line_index}"))

    x = anchor.x + math.cos(angle) * radius
    y = anchor.y + math.sin(angle) * radius
    if not is_finite(x, y):
        return anchor
    return clamp_to_canvas(x, y, canvas_width, canvas_height)


def length_profile(seed: str, keyword: str, line_index: int, cluster_index: int) -> float:
    return seeded_choice(f"{seed}:length_profile:{keyword}:{line_index}:{cluster_index}", gc.LENGTH_PROFILES)


def curvature_profile(seed: str, keyword: str, line_index: int, cluster_index: int) -> float:
    return seeded_choice(f"{seed}:curvature_profile:{keyword}:{line_index}:{cluster_index}", gc.CURVATURE_PROFILES)


def line_length(
    gamma: float,
    canvas_width: float,
    canvas_height: float,
    seed: str,
    keyword_index: int,
    line_index: int,
    length_scale: float = 1.0,
    profile: float = 1.0,
) -> float:
    """15%–50% of the canvas diagonal by |gamma|, ±5% jitter, then scaled."""
    frac = gc.LINE_LENGTH_MIN_FRAC + _gamma_weight(gamma) * (gc.LINE_LENGTH_MAX_FRAC - gc.LINE_LENGTH_MIN_FRAC)
    base = frac * canvas_diagonal(canvas_width, canvas_height)
    variation = (seeded_random(f"{seed}:length:{keyword_index}:{line_index}") - 0.5) * gc.LINE_LENGTH_JITTER
    return base * (1 + variation) * length_scale * profile


def bend_control_point(
    delta: float,
    start: Point,
    end: Point,
    seed: str,
    keyword_index: int,
    line_index: int,
    curvature_scale: float = 1.0,
    curv_profile: float = 1.0,
    len_profile: float = 1.0,
) -> Point:
    """Midpoint pushed along the chord normal by a delta-driven offset (unclamped)."""
    mid = Point((start.x + end.x) / 2, (start.y + end.y) / 2)
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0 or not math.isfinite(length):
        return mid

    perp_x = -dy / length
    perp_y = dx / length

    d = min(1.0, abs(delta) / 100)
    base_frac = gc.CURVATURE_MIN_FRAC + (gc.CURVATURE_MAX_FRAC - gc.CURVATURE_MIN_FRAC) * d
    jitter = (seeded_random(f"{seed}:delta:curv:{keyword_index}:{line_index}") - 0.5) * gc.CURVATURE_JITTER
    curv_frac = base_frac * (1 + jitter)

    profile = curv_profile * (1 + (1 - len_profile) * gc.SHORT_LINE_CURVATURE_GAIN)
    offset = length * curv_frac * curvature_scale * profile

    sign = 1 if delta >= 0 else -1
    if seeded_random(f"{seed}:delta:dir:{keyword_index}:{line_index}") < 0.5:
        sign = -sign

    return Point(mid.x + perp_x * offset * sign, mid.y + perp_y * offset * sign)


def generate_curves_for_anchor(
    ctx: GenerationContext,
    anchor: Anchor,
    axes: AxisVector,
) -> tuple[list[Curve], list[DirectionClusterDebug]]:
    opts = ctx.options
    w, h = ctx.canvas_width, ctx.canvas_height
    k = anchor.keyword_index

    curves: list[Curve] = []
    debug: list[DirectionClusterDebug] = []

    for i in range(line_count(axes.gamma)):
        heading = line_direction(ctx.seed, k, i, axes.gamma, opts.cluster_count, opts.cluster_spread)
        start = disperse_start_point(
            anchor.pixel_point, ctx.seed, k, i, w, h, ctx.config.dispersion_fraction
        )

        len_prof = length_profile(ctx.seed, anchor.keyword, i, heading.cluster_index)
        curv_prof = curvature_profile(ctx.seed, anchor.keyword, i, heading.cluster_index)
        length = line_length(axes.gamma, w, h, ctx.seed, k, i, opts.length_scale, len_prof)

        theta = math.radians(heading.direction)
        end = clamp_to_canvas(
            start.x + math.cos(theta) * length,
            start.y + math.sin(theta) * length,
            w,
            h,
        )

        control = bend_control_point(
            axes.delta, start, end, ctx.seed, k, i, opts.curvature_scale, curv_prof, len_prof
        )
        control = clamp_to_canvas(control.x, control.y, w, h)

        curves.append(
            Curve(
                start=start,
                control=control,
                end=end,
                source_keyword=anchor.keyword,
                keyword_index=k,
                quadrant=anchor.quadrant,
            )
        )
        debug.append(
            DirectionClusterDebug(
                keyword_index=k,
                line_index=i,
                cluster_index=heading.cluster_index,
                cluster_angle=heading.cluster_angle,
                gamma_rotation=heading.gamma_rotation,
                final_cluster_angle=heading.final_cluster_angle,
                in_cluster_jitter=heading.jitter,
                final_direction=heading.direction,
                start_point=start,
                length_profile=len_prof,
                curvature_profile=curv_prof,
            )
        )

    return curves, debug


@stage(
    id="S2.01",
    phase=Phase.GEOMETRY,
    dependencies=["S1.01"],
    description="Generate clustered quadratic curves per keyword anchor",
)
def curve_generation(ctx: GenerationContext) -> None:
    curves: list[Curve] = []
    cluster_debug: list[DirectionClusterDebug] = []

    for anchor, kv in zip(ctx.anchors, ctx.keyword_vectors):
        kw_curves, kw_debug = generate_curves_for_anchor(ctx, anchor, kv.axes)
        curves.extend(kw_curves)
        cluster_debug.extend(kw_debug)
        logger.debug("  %r: %d lines (gamma=%.0f)", kv.keyword, len(kw_curves), kv.axes.gamma)

    ctx.curves = curves
    ctx.cluster_debug = cluster_debug
