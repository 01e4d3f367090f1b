"""S2.02 — Connection Encoding.

Collapse each {start, control, end} curve into a Connection whose
``curvature`` reproduces the control point through
``utils.geometry.compute_curve_control``. All primary curves are curved,
solid, depth 0.
"""

from __future__ import annotations

from sfcm.engine.context import Curve, GenerationContext
from sfcm.engine.registry import Phase, stage
from sfcm.models.geometry import Connection
from sfcm.utils.geometry import curvature_from_control


def encode_curve(curve: Curve) -> Connection:
    return Connection(
        from_=curve.start,
        to=curve.end,
        curved=True,
        curvature=curvature_from_control(curve.start, curve.end, curve.control),
        dashed=False,
        generation_depth=0,
    )


@stage(
    id="S2.02",
    phase=Phase.GEOMETRY,
    dependencies=["S2.01"],
    description="Encode curves as connection records",
)
def connection_encoding(ctx: GenerationContext) -> None:
    ctx.connections = [encode_curve(c) for c in ctx.curves]
