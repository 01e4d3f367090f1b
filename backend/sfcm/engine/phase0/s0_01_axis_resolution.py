"""S0.01 — Axis Resolution.

Map every input keyword to its 4-axis semantic vector: the static dictionary
entry when present, otherwise a deterministic hash-seeded fallback.
"""

from __future__ import annotations

from sfcm.engine.context import GenerationContext, KeywordVector
from sfcm.engine.registry import Phase, stage
from sfcm.semantic import get_semantic_map, resolve_axes


@stage(
    id="S0.01",
    phase=Phase.SEMANTIC,
    description="Resolve keywords to Alfa/Beta/Gamma/Delta axes",
)
def axis_resolution(ctx: GenerationContext) -> None:
    semantic_map = get_semantic_map()
    ctx.keyword_vectors = [
        KeywordVector(keyword=kw, axes=resolve_axes(kw, semantic_map))
        for kw in ctx.keywords[: ctx.config.max_keywords]
    ]
