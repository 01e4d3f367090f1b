"""S2.03 — Origin Bridges (opt-in).

Join every pair of keyword anchors with a straight dashed connection, in
(i, j) order with i < j. Runs only when ``options.origin_bridges`` is set.
"""

from __future__ import annotations

from sfcm.engine.context import Anchor, GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.geometry import Connection


def origin_bridges(anchors: list[Anchor]) -> list[Connection]:
    bridges: list[Connection] = []
    for i in range(len(anchors) - 1):
        for j in range(i + 1, len(anchors)):
            bridges.append(
                Connection(
                    from_=anchors[i].pixel_point,
                    to=anchors[j].pixel_point,
                    curved=False,
                    curvature=0.0,
                    dashed=True,
                    generation_depth=0,
                )
            )
    return bridges


@stage(
    id="S2.03",
    phase=Phase.GEOMETRY,
    dependencies=["S2.02"],
    description="Optionally bridge keyword anchors with dashed lines",
)
def bridge_anchors(ctx: GenerationContext) -> None:
    if not ctx.options.origin_bridges or len(ctx.anchors) < 2:
        return
    ctx.connections = ctx.connections + origin_bridges(ctx.anchors)
