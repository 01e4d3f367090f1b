"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sfcm.engine.generator import generate
from sfcm.models.geometry import Connection
from sfcm.models.requests import GenerationOptions
from sfcm.utils.geometry import compute_curve_control

SCENARIO_KEYWORDS = ["ordine", "caos"]
SCENARIO_SEED = "42"
SQUARE = (1080.0, 1080.0)
PORTRAIT = (1080.0, 1920.0)
LANDSCAPE = (1920.0, 1080.0)

SCENARIO_OPTIONS = GenerationOptions(
    length_scale=1.0,
    curvature_scale=1.0,
    cluster_count=3,
    cluster_spread=30,
    force_orientation=False,
)

# Mixed dictionary and fallback keywords
MIXED_KEYWORDS = ["rete", "flusso", "zanzara", "memoria", "qwerty"]


def connection_points(conn: Connection, width: float, height: float) -> list[tuple[float, float]]:
    """Endpoints plus the reconstructed control point for curved connections."""
    points = [tuple(conn.from_), tuple(conn.to)]
    if conn.curved:
        points.append(tuple(compute_curve_control(conn, width, height)))
    return points


def in_canvas(point: tuple[float, float], width: float, height: float) -> bool:
    x, y = point
    return 0.0 <= x <= width and 0.0 <= y <= height


def coordinates(connections: list[Connection]) -> list[tuple[float, ...]]:
    return [(*c.from_, *c.to, c.curvature) for c in connections]


@pytest.fixture
def scenario_result():
    return generate(SCENARIO_KEYWORDS, SCENARIO_SEED, *SQUARE, options=SCENARIO_OPTIONS)


@pytest.fixture
def debug_result():
    return generate(SCENARIO_KEYWORDS, SCENARIO_SEED, *SQUARE, options=SCENARIO_OPTIONS, include_debug=True)
