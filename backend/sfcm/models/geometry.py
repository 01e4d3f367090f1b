"""Geometry models shared by every stage and by pipeline consumers."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

CURVATURE_LIMIT = 0.8


class Point(NamedTuple):
    x: float
    y: float


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


class Connection(BaseModel):
    """A directed segment, straight or quadratic, in canvas pixel space.

    Curved connections carry no control point: it is rebuilt from
    ``curvature`` with ``cx = mx + dy * c, cy = my - dx * c``
    (see ``utils.geometry.compute_curve_control``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: Point = Field(alias="from")
    to: Point
    curved: bool = True
    curvature: float = Field(default=0.0, ge=-CURVATURE_LIMIT, le=CURVATURE_LIMIT)
    dashed: bool = False
    # Kept for schema compatibility with older renderers; always empty here.
    semantic_influence: dict[str, float] = Field(default_factory=dict)
    generation_depth: int = Field(default=0, ge=0, le=1)
    generated_from: int | None = None
