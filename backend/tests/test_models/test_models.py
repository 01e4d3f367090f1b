"""Tests for request, option and connection models."""

import pytest
from pydantic import ValidationError

from sfcm.models.axes import AxisVector
from sfcm.models.geometry import Connection, Point
from sfcm.models.requests import GenerateRequest, GenerationOptions


def test_connection_from_alias():
    conn = Connection.model_validate({"from": [1, 2], "to": [3, 4], "curvature": 0.1})
    assert conn.from_ == Point(1, 2)
    dumped = conn.model_dump(by_alias=True)
    assert dumped["from"] == Point(1, 2)
    assert "from_" not in dumped


def test_connection_defaults():
    conn = Connection(from_=Point(0, 0), to=Point(1, 1))
    assert conn.curved
    assert not conn.dashed
    assert conn.generation_depth == 0
    assert conn.generated_from is None
    assert conn.semantic_influence == {}


@pytest.mark.parametrize("curvature", [0.81, -0.9])
def test_connection_curvature_bounds(curvature):
    with pytest.raises(ValidationError):
        Connection(from_=Point(0, 0), to=Point(1, 1), curvature=curvature)


def test_connection_is_frozen():
    conn = Connection(from_=Point(0, 0), to=Point(1, 1))
    with pytest.raises(ValidationError):
        conn.curvature = 0.5


def test_axis_vector_range():
    with pytest.raises(ValidationError):
        AxisVector(alfa=101, beta=0, gamma=0, delta=0)
    with pytest.raises(ValidationError):
        AxisVector(alfa=float("nan"), beta=0, gamma=0, delta=0)


def test_options_defaults():
    opts = GenerationOptions()
    assert opts.length_scale == 1.0
    assert opts.curvature_scale == 1.0
    assert opts.cluster_count == 3
    assert opts.cluster_spread == 30.0
    assert not opts.force_orientation
    assert not opts.origin_bridges


@pytest.mark.parametrize(
    "field,value",
    [
        ("length_scale", 0),
        ("curvature_scale", -0.1),
        ("cluster_count", 0),
        ("cluster_spread", 200),
        ("length_scale", float("inf")),
    ],
)
def test_options_rejects_invalid(field, value):
    with pytest.raises(ValidationError):
        GenerationOptions(**{field: value})


def test_request_strips_keywords():
    req = GenerateRequest(keywords=[" ordine ", "caos"], seed="42")
    assert req.keywords == ["ordine", "caos"]
    assert req.canvas_width == 1080.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"keywords": []},
        {"keywords": ["ok", "   "]},
        {"keywords": [f"k{i}" for i in range(11)]},
        {"keywords": ["ok"], "canvas_width": 0},
        {"keywords": ["ok"], "canvas_height": float("inf")},
    ],
)
def test_request_rejects_invalid(kwargs):
    with pytest.raises(ValidationError):
        GenerateRequest(seed="42", **kwargs)
