"""S2.04 — Pre-mirroring Bounding Box.

Capture the extent of the primary geometry before mirroring doubles it. The
orientation stage decides on this box, not on the mirrored one.
"""

from __future__ import annotations

from sfcm.engine.context import GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.utils.geometry import compute_bounding_box


@stage(
    id="S2.04",
    phase=Phase.GEOMETRY,
    dependencies=["S2.03"],
    description="Capture the pre-mirroring bounding box",
)
def bounding_box(ctx: GenerationContext) -> None:
    ctx.pre_mirror_bbox = compute_bounding_box(ctx.connections, ctx.canvas_width, ctx.canvas_height)
