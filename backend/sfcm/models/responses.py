"""Generation result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sfcm.models.geometry import BoundingBox, Connection, Point


class AnchorDebug(BaseModel):
    keyword: str
    index: int
    point: Point
    normalized: Point
    quadrant: int


class ClusterDebug(BaseModel):
    keyword_index: int
    line_index: int
    cluster_index: int
    cluster_angle: float
    gamma_rotation: float
    final_cluster_angle: float
    in_cluster_jitter: float
    final_direction: float
    start_point: Point
    length_profile: float
    curvature_profile: float


class AxisSegment(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class DebugInfo(BaseModel):
    alfa: float
    beta: float
    gamma: float
    anchor: Point
    anchors: list[AnchorDebug] = Field(default_factory=list)
    bounding_box: BoundingBox | None = None
    mirror_axis_type: str | None = None
    mirror_axis_segment: AxisSegment | None = None
    direction_clusters: list[ClusterDebug] = Field(default_factory=list)
    cluster_count: int
    cluster_spread: float
    force_orientation_enabled: bool = False
    force_orientation_applied: bool = False


class GenerationResult(BaseModel):
    connections: list[Connection] = Field(default_factory=list)
    debug: DebugInfo | None = None
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)
