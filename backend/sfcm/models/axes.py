"""Semantic axis model — the 4-axis vector a keyword resolves to."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

AXIS_MIN = -100.0
AXIS_MAX = 100.0


class AxisVector(BaseModel):
    """Alfa/Beta place the anchor, Gamma fans out lines, Delta bends them."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    alfa: float = Field(ge=AXIS_MIN, le=AXIS_MAX)
    beta: float = Field(ge=AXIS_MIN, le=AXIS_MAX)
    gamma: float = Field(ge=AXIS_MIN, le=AXIS_MAX)
    delta: float = Field(ge=AXIS_MIN, le=AXIS_MAX)
