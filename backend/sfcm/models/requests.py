"""Generation request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sfcm.config import settings


class GenerationOptions(BaseModel):
    """Immutable per-call options (slider and toggle state of the caller)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    length_scale: float = Field(default=1.0, gt=0, description="Line length multiplier, ~0.7–1.3")
    curvature_scale: float = Field(default=1.0, ge=0, description="Curve intensity multiplier, ~0.3–1.7")
    cluster_count: int = Field(default=3, ge=1, description="Direction clusters per keyword, ~2–5")
    cluster_spread: float = Field(default=30.0, ge=0, le=180, description="In-cluster spread in degrees, ~10–60")
    force_orientation: bool = Field(default=False, description="Rotate tall drawings to landscape")
    origin_bridges: bool = Field(default=False, description="Join keyword anchors with dashed lines")


class GenerateRequest(BaseModel):
    keywords: list[str] = Field(..., min_length=1, max_length=settings.sfcm_max_keywords)
    seed: str = Field(..., description="Global seed string")
    canvas_width: float = Field(default=1080.0, gt=0, allow_inf_nan=False)
    canvas_height: float = Field(default=1080.0, gt=0, allow_inf_nan=False)
    options: GenerationOptions = Field(default_factory=GenerationOptions)
    include_debug: bool = False

    @field_validator("keywords")
    @classmethod
    def _keywords_non_empty(cls, value: list[str]) -> list[str]:
        cleaned = [k.strip() for k in value]
        if any(not k for k in cleaned):
            raise ValueError("keywords must be non-empty strings")
        return cleaned
