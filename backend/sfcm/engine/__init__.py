"""SFCM geometry generation engine."""

from sfcm.engine.context import GenerationContext
from sfcm.engine.generator import generate, generate_from_request
from sfcm.engine.pipeline import Pipeline, create_pipeline
from sfcm.engine.registry import Phase, get_registry, stage

__all__ = [
    "stage",
    "Phase",
    "get_registry",
    "GenerationContext",
    "Pipeline",
    "create_pipeline",
    "generate",
    "generate_from_request",
]
