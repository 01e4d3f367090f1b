"""Stage registry — pipeline stages declare themselves with ``@stage``.

    @stage(id="S3.01", phase=Phase.COMPOSITION, dependencies=["S2.04"])
    def mirroring(ctx: GenerationContext) -> None:
        ...

A stage runs after every stage it names. Among stages that are ready at the
same time, the lower (phase, id) goes first, so the run order is fixed by
the declarations alone.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from sfcm.engine.context import GenerationContext

logger = logging.getLogger(__name__)

StageFn = Callable[["GenerationContext"], None]


class Phase(enum.IntEnum):
    SEMANTIC = 0
    LAYOUT = 1
    GEOMETRY = 2
    COMPOSITION = 3
    FINISHING = 4


@dataclass
class StageSpec:
    id: str
    phase: Phase
    fn: StageFn
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[int, str]:
        return (int(self.phase), self.id)


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.phase.name)

    @property
    def count(self) -> int:
        return len(self._stages)

    def ordered(self) -> list[StageSpec]:
        """Dependency order. Unknown dependencies are left for the pipeline to report."""
        waiting = {
            sid: {d for d in spec.dependencies if d in self._stages}
            for sid, spec in self._stages.items()
        }
        dependents: dict[str, list[str]] = {sid: [] for sid in self._stages}
        for sid, deps in waiting.items():
            for dep in deps:
                dependents[dep].append(sid)

        ready = [(self._stages[sid].sort_key, sid) for sid, deps in waiting.items() if not deps]
        heapq.heapify(ready)

        result: list[StageSpec] = []
        while ready:
            _, sid = heapq.heappop(ready)
            result.append(self._stages[sid])
            for other in dependents[sid]:
                waiting[other].discard(sid)
                if not waiting[other]:
                    heapq.heappush(ready, (self._stages[other].sort_key, other))

        if len(result) != len(self._stages):
            stuck = sorted(set(self._stages) - {s.id for s in result})
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return result


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    phase: Phase,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a stage of the global registry."""

    def decorator(fn: StageFn) -> StageFn:
        _registry.register(
            StageSpec(id=id, phase=phase, fn=fn, dependencies=dependencies or [], description=description)
        )
        return fn

    return decorator
