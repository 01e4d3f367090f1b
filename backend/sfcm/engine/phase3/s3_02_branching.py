"""S3.02 — Branching from Intersections. ★★

Find where connections cross and sprout short secondary strokes there.

1. Every connection becomes a polyline (straight: 2 points, curved: 12
   segments of its quadratic).
2. All segment pairs between distinct connections are intersected; crossings
   are grouped by their integer pixel and kept when they touch ≥2
   connections.
3. The crossings are shuffled (seeded Fisher–Yates) and at most 30 are used.
4. Each used crossing spawns 1–2 branches roughly along the mean direction of
   the connections meeting there.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from sfcm.engine import generation_constants as gc
from sfcm.engine.context import GenerationContext, Intersection
from sfcm.engine.registry import Phase, stage
from sfcm.models.geometry import Connection, Point
from sfcm.utils.geometry import (
    canvas_diagonal,
    clamp_to_canvas,
    connection_polyline,
    polyline_segments,
    segment_intersections,
    unit_vector,
)
from sfcm.utils.math_helpers import round_half_up
from sfcm.utils.seed import seeded_random

logger = logging.getLogger(__name__)


def detect_intersections(
    connections: list[Connection],
    canvas_width: float,
    canvas_height: float,
    samples: int = 12,
) -> list[Intersection]:
    """Crossings grouped by rounded pixel, in discovery order (i, j, k, l)."""
    n = len(connections)
    if n < 2:
        return []

    segments = [
        polyline_segments(connection_polyline(c, canvas_width, canvas_height, samples))
        for c in connections
    ]
    all_segments = np.vstack(segments)
    owner = np.concatenate([np.full(len(s), idx) for idx, s in enumerate(segments)])
    local = np.concatenate([np.arange(len(s)) for s in segments])
    offsets = np.cumsum([0] + [len(s) for s in segments])

    groups: dict[tuple[int, int], set[int]] = {}

    for i in range(n - 1):
        later = offsets[i + 1]
        hit, px, py = segment_intersections(segments[i], all_segments[later:])
        ks, ss = np.nonzero(hit)
        if len(ks) == 0:
            continue

        owners = owner[later:][ss]
        order = np.lexsort((local[later:][ss], ks, owners))
        for idx in order:
            k, s = ks[idx], ss[idx]
            key = (round_half_up(px[k, s]), round_half_up(py[k, s]))
            members = groups.setdefault(key, set())
            members.add(i)
            members.add(int(owners[idx]))

    return [
        Intersection(point=Point(float(x), float(y)), from_indices=tuple(sorted(members)))
        for (x, y), members in groups.items()
        if len(members) >= 2
    ]


def shuffle_intersections(intersections: list[Intersection], seed: str) -> list[Intersection]:
    """Deterministic Fisher–Yates so branching isn't biased toward early connections."""
    shuffled = list(intersections)
    for i in range(len(shuffled) - 1, 0, -1):
        swap = int(seeded_random(f"{seed}:branching:intersection:shuffle:{i}") * (i + 1))
        shuffled[i], shuffled[swap] = shuffled[swap], shuffled[i]
    return shuffled


def average_direction(connections: list[Connection], indices: tuple[int, ...]) -> tuple[float, float]:
    """Normalized sum of the unit directions; +x when they cancel out."""
    sx = 0.0
    sy = 0.0
    for idx in indices:
        conn = connections[idx]
        ux, uy = unit_vector(conn.to.x - conn.from_.x, conn.to.y - conn.from_.y)
        sx += ux
        sy += uy
    if sx == 0 and sy == 0:
        return (1.0, 0.0)
    direction = unit_vector(sx, sy)
    if direction == (0.0, 0.0):
        return (1.0, 0.0)
    return direction


def spawn_branches(
    connections: list[Connection],
    intersection: Intersection,
    index: int,
    seed: str,
    canvas_width: float,
    canvas_height: float,
) -> list[Connection]:
    origin = clamp_to_canvas(intersection.point.x, intersection.point.y, canvas_width, canvas_height)
    base_x, base_y = average_direction(connections, intersection.from_indices)
    base_angle = math.atan2(base_y, base_x)
    diag = canvas_diagonal(canvas_width, canvas_height)

    count = max(1, round_half_up(seeded_random(f"{seed}:branching:count:{index}") * gc.BRANCH_COUNT_MAX))

    branches: list[Connection] = []
    for b in range(count):
        length = diag * (
            gc.BRANCH_LENGTH_MIN_FRAC
            + seeded_random(f"{seed}:branching:length:{index}:{b}") * gc.BRANCH_LENGTH_RANGE_FRAC
        )
        jitter = (seeded_random(f"{seed}:branching:angle:{index}:{b}") - 0.5) * gc.BRANCH_ANGLE_SPAN_RAD
        angle = base_angle + jitter
        end = clamp_to_canvas(
            origin.x + math.cos(angle) * length,
            origin.y + math.sin(angle) * length,
            canvas_width,
            canvas_height,
        )

        curvature = (seeded_random(f"{seed}:branching:curvature:{index}:{b}") - 0.5) * gc.BRANCH_CURVATURE_SPAN
        branches.append(
            Connection(
                from_=origin,
                to=end,
                curved=abs(curvature) > gc.BRANCH_CURVED_THRESHOLD,
                curvature=curvature,
                dashed=seeded_random(f"{seed}:branching:dashed:{index}:{b}") < gc.BRANCH_DASHED_PROBABILITY,
                generation_depth=1,
                generated_from=index,
            )
        )
    return branches


def apply_branching(
    connections: list[Connection],
    canvas_width: float,
    canvas_height: float,
    seed: str,
    max_intersections: int = 30,
    samples: int = 12,
) -> tuple[list[Connection], int]:
    """Inputs followed by spawned branches; also returns the crossing count."""
    if not connections:
        return list(connections), 0

    intersections = detect_intersections(connections, canvas_width, canvas_height, samples)
    if not intersections:
        return list(connections), 0

    shuffled = shuffle_intersections(intersections, seed)
    result = list(connections)
    for i, intersection in enumerate(shuffled[: min(max_intersections, len(shuffled))]):
        result.extend(spawn_branches(connections, intersection, i, seed, canvas_width, canvas_height))

    return result, len(intersections)


@stage(
    id="S3.02",
    phase=Phase.COMPOSITION,
    dependencies=["S3.01"],
    description="Spawn secondary branches at connection crossings",
)
def branching(ctx: GenerationContext) -> None:
    before = len(ctx.connections)
    ctx.connections, ctx.intersection_count = apply_branching(
        ctx.connections,
        ctx.canvas_width,
        ctx.canvas_height,
        ctx.seed,
        ctx.config.max_intersections,
        ctx.config.samples_per_curve,
    )
    logger.debug(
        "  %d crossings → %d branches",
        ctx.intersection_count,
        len(ctx.connections) - before,
    )
