"""GenerationContext — the single mutable state object flowing through all stages.

Per-keyword intermediates → KeywordVector / Anchor / Curve
Whole-drawing state → GenerationContext.* (connections, bounding box, axis, …)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sfcm.engine.config import PipelineConfig
from sfcm.models.axes import AxisVector
from sfcm.models.geometry import BoundingBox, Connection, Point
from sfcm.models.requests import GenerationOptions
from sfcm.models.responses import DebugInfo


@dataclass(frozen=True)
class KeywordVector:
    keyword: str
    axes: AxisVector


@dataclass(frozen=True)
class Anchor:
    """A keyword's primary canvas position."""

    keyword_index: int
    keyword: str
    pixel_point: Point
    normalized_point: Point
    # 1 top-right, 2 top-left, 3 bottom-left, 4 bottom-right
    quadrant: int


@dataclass(frozen=True)
class Curve:
    start: Point
    control: Point
    end: Point
    source_keyword: str
    keyword_index: int
    quadrant: int


@dataclass(frozen=True)
class Intersection:
    point: Point
    # Sorted, unique, at least two
    from_indices: tuple[int, ...]


@dataclass(frozen=True)
class DirectionClusterDebug:
    """Per-line clustering and profile parameters (telemetry only)."""

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


@dataclass
class GenerationContext:
    """Shared state flowing through the entire pipeline."""

    keywords: list[str] = field(default_factory=list)
    seed: str = ""
    canvas_width: float = 1080.0
    canvas_height: float = 1080.0
    options: GenerationOptions = field(default_factory=GenerationOptions)
    include_debug: bool = False
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Phase 0/1 ---
    keyword_vectors: list[KeywordVector] = field(default_factory=list)
    anchors: list[Anchor] = field(default_factory=list)

    # --- Phase 2 ---
    curves: list[Curve] = field(default_factory=list)
    cluster_debug: list[DirectionClusterDebug] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    pre_mirror_bbox: BoundingBox | None = None

    # --- Phase 3 ---
    mirror_axis: str | None = None
    mirror_axis_segment: tuple[Point, Point] | None = None
    intersection_count: int = 0

    # --- Phase 4 ---
    rotation_applied: bool = False
    debug: DebugInfo | None = None

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
