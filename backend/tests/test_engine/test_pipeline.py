"""Tests for the pipeline orchestrator."""

import logging

from sfcm.engine.context import GenerationContext
from sfcm.engine.pipeline import Pipeline
from sfcm.engine.registry import Phase, StageRegistry, StageSpec


def test_pipeline_runs_stages():
    reg = StageRegistry()
    results = []

    def s1(ctx: GenerationContext) -> None:
        results.append("s1")

    def s2(ctx: GenerationContext) -> None:
        results.append("s2")

    reg.register(StageSpec(id="S0.02", phase=Phase.SEMANTIC, fn=s2, dependencies=["S0.01"]))
    reg.register(StageSpec(id="S0.01", phase=Phase.SEMANTIC, fn=s1))

    pipeline = Pipeline(registry=reg)
    ctx = GenerationContext()
    pipeline.run(ctx)

    assert results == ["s1", "s2"]
    assert ctx.completed_stages == {"S0.01", "S0.02"}
    assert ctx.errors == {}


def test_pipeline_handles_errors(caplog):
    reg = StageRegistry()

    def fail(ctx: GenerationContext) -> None:
        raise ValueError("test error")

    reg.register(StageSpec(id="S0.01", phase=Phase.SEMANTIC, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = GenerationContext()
    with caplog.at_level(logging.WARNING, logger="sfcm.engine.pipeline"):
        pipeline.run(ctx)

    assert "S0.01" in ctx.errors
    assert "test error" in ctx.errors["S0.01"]
    assert "S0.01" not in ctx.completed_stages
    assert "FAILED" in caplog.text


def test_missing_dependency_blocks_stage():
    reg = StageRegistry()
    ran = []
    reg.register(
        StageSpec(id="S1.01", phase=Phase.LAYOUT, fn=lambda ctx: ran.append("S1.01"), dependencies=["S0.01"])
    )

    ctx = Pipeline(registry=reg).run(GenerationContext())

    assert ran == []
    assert ctx.errors == {"S1.01": "blocked by S0.01"}


def test_dependents_of_failed_stage_are_skipped():
    reg = StageRegistry()
    ran = []

    def fail(ctx: GenerationContext) -> None:
        raise RuntimeError("boom")

    def after(ctx: GenerationContext) -> None:
        ran.append("after")

    def independent(ctx: GenerationContext) -> None:
        ran.append("independent")

    reg.register(StageSpec(id="S0.01", phase=Phase.SEMANTIC, fn=fail))
    reg.register(StageSpec(id="S1.01", phase=Phase.LAYOUT, fn=after, dependencies=["S0.01"]))
    reg.register(StageSpec(id="S1.02", phase=Phase.LAYOUT, fn=independent))

    ctx = Pipeline(registry=reg).run(GenerationContext())

    assert ran == ["independent"]
    assert ctx.errors["S1.01"] == "blocked by S0.01"
    assert "S1.02" in ctx.completed_stages

