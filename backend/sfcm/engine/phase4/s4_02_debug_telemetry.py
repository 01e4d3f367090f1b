"""S4.02 — Debug Telemetry.

Assemble the inspection payload when the caller asked for it. Nothing here
feeds back into geometry.
"""

from __future__ import annotations

from sfcm.engine.context import GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.responses import AnchorDebug, AxisSegment, ClusterDebug, DebugInfo


def build_debug_info(ctx: GenerationContext) -> DebugInfo | None:
    if not ctx.keyword_vectors or not ctx.anchors:
        return None

    first = ctx.keyword_vectors[0].axes
    segment = None
    if ctx.mirror_axis_segment is not None:
        (x1, y1), (x2, y2) = ctx.mirror_axis_segment
        segment = AxisSegment(x1=x1, y1=y1, x2=x2, y2=y2)

    return DebugInfo(
        alfa=first.alfa,
        beta=first.beta,
        gamma=first.gamma,
        anchor=ctx.anchors[0].pixel_point,
        anchors=[
            AnchorDebug(
                keyword=a.keyword,
                index=a.keyword_index,
                point=a.pixel_point,
                normalized=a.normalized_point,
                quadrant=a.quadrant,
            )
            for a in ctx.anchors
        ],
        bounding_box=ctx.pre_mirror_bbox,
        mirror_axis_type=ctx.mirror_axis,
        mirror_axis_segment=segment,
        direction_clusters=[ClusterDebug(**vars(d)) for d in ctx.cluster_debug],
        cluster_count=ctx.options.cluster_count,
        cluster_spread=ctx.options.cluster_spread,
        force_orientation_enabled=ctx.options.force_orientation,
        force_orientation_applied=ctx.rotation_applied,
    )


@stage(
    id="S4.02",
    phase=Phase.FINISHING,
    dependencies=["S4.01"],
    description="Assemble optional debug telemetry",
)
def debug_telemetry(ctx: GenerationContext) -> None:
    if not ctx.include_debug:
        return
    ctx.debug = build_debug_info(ctx)
