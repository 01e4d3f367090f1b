"""Pipeline orchestrator — runs stages in dependency order over one context."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from sfcm.engine.config import PipelineConfig
from sfcm.engine.context import GenerationContext
from sfcm.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)

_PHASE_PACKAGES = ["phase0", "phase1", "phase2", "phase3", "phase4"]


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: GenerationContext) -> GenerationContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ordered = self.registry.ordered()

        logger.debug("Pipeline: %d stages queued", len(ordered))

        for spec in ordered:
            blocked_by = [d for d in spec.dependencies if d not in ctx.completed_stages]
            if blocked_by:
                ctx.errors[spec.id] = f"blocked by {', '.join(blocked_by)}"
                logger.warning("  %s SKIPPED: dependency %s did not complete", spec.id, blocked_by)
                continue

            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_stages.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages, %d connections in %.0fms",
            len(ctx.completed_stages),
            len(ordered),
            len(ctx.connections),
            total,
        )
        return ctx


def load_stages() -> None:
    """Import all stage modules so @stage decorators fire (idempotent)."""
    for phase_name in _PHASE_PACKAGES:
        package_name = f"sfcm.engine.{phase_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")
    logger.debug("Loaded %d stages", get_registry().count)


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    load_stages()
    return Pipeline(config=config)
