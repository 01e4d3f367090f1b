"""Public entry point — keywords in, connections (and optional telemetry) out."""

from __future__ import annotations

import logging
import time

from sfcm.engine.context import GenerationContext
from sfcm.engine.pipeline import Pipeline, create_pipeline
from sfcm.models.requests import GenerateRequest, GenerationOptions
from sfcm.models.responses import GenerationResult

logger = logging.getLogger(__name__)

_pipeline: Pipeline | None = None


def get_pipeline() -> Pipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = create_pipeline()
    return _pipeline


def generate(
    keywords: list[str],
    seed: str,
    canvas_width: float,
    canvas_height: float,
    options: GenerationOptions | None = None,
    include_debug: bool = False,
    pipeline: Pipeline | None = None,
) -> GenerationResult:
    """Run the full pipeline. Same inputs always give the same connection list."""
    if not keywords:
        return GenerationResult()

    pipeline = pipeline or get_pipeline()
    start = time.perf_counter()

    ctx = GenerationContext(
        keywords=list(keywords[: pipeline.config.max_keywords]),
        seed=seed,
        canvas_width=float(canvas_width),
        canvas_height=float(canvas_height),
        options=options or GenerationOptions(),
        include_debug=include_debug,
        config=pipeline.config,
    )
    ctx = pipeline.run(ctx)

    return GenerationResult(
        connections=ctx.connections,
        debug=ctx.debug,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
        errors=ctx.errors,
    )


def generate_from_request(req: GenerateRequest) -> GenerationResult:
    return generate(
        req.keywords,
        req.seed,
        req.canvas_width,
        req.canvas_height,
        options=req.options,
        include_debug=req.include_debug,
    )
