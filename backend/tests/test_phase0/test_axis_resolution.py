"""Tests for the axis resolution stage."""

from sfcm.engine.config import PipelineConfig
from sfcm.engine.context import GenerationContext
from sfcm.engine.phase0.s0_01_axis_resolution import axis_resolution
from sfcm.semantic import fallback_axes, get_semantic_map
from tests.conftest import MIXED_KEYWORDS


def test_vectors_in_keyword_order():
    ctx = GenerationContext(keywords=MIXED_KEYWORDS, seed="1")
    axis_resolution(ctx)

    assert [kv.keyword for kv in ctx.keyword_vectors] == MIXED_KEYWORDS
    assert ctx.keyword_vectors[0].axes == get_semantic_map()["rete"]
    assert ctx.keyword_vectors[2].axes == fallback_axes("zanzara")


def test_keywords_truncated_to_limit():
    ctx = GenerationContext(
        keywords=[f"parola{i}" for i in range(15)],
        seed="1",
        config=PipelineConfig(max_keywords=4),
    )
    axis_resolution(ctx)
    assert len(ctx.keyword_vectors) == 4
    assert ctx.keyword_vectors[-1].keyword == "parola3"
