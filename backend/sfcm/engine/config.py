"""Pipeline configuration — fixed engine tunables (not user options)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Controls the numeric envelope of every stage."""

    # Input contract
    max_keywords: int = 10

    # Start-point dispersion: disk radius as a fraction of the canvas diagonal
    dispersion_fraction: float = 0.02

    # Bézier sampling for intersection detection
    samples_per_curve: int = 12

    # Branching caps
    max_intersections: int = 30

    # Mirroring: |w - h| below this fraction of max(w, h) picks the diagonal axis
    diagonal_axis_tolerance: float = 0.01
