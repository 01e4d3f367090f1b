"""Tests for semantic dictionary loading and keyword resolution."""

import json
import logging

import pytest

from sfcm.models.axes import AxisVector
from sfcm.semantic import (
    fallback_axes,
    get_semantic_map,
    load_semantic_map,
    normalize_keyword,
    resolve_axes,
    sanitize_axes,
)


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.json"
    path.write_text(
        '{'
        '"  Luce ": {"alfa": 10, "beta": 20, "gamma": 30, "delta": 40},'
        '"eccesso": {"alfa": 150, "beta": -250, "gamma": 0, "delta": 0},'
        '"rotto": {"alfa": "x", "beta": 0, "gamma": 0, "delta": 0},'
        '"booleano": {"alfa": true, "beta": 0, "gamma": 0, "delta": 0},'
        '"nan": {"alfa": NaN, "beta": 0, "gamma": 0, "delta": 0},'
        '"incompleto": {"alfa": 1, "beta": 2},'
        '"lista": [1, 2, 3, 4]'
        '}',
        encoding="utf-8",
    )
    return path


def test_normalize_keyword():
    assert normalize_keyword("  Ordine ") == "ordine"
    assert normalize_keyword("CAOS") == "caos"


def test_sanitize_clamps_out_of_range():
    axes = sanitize_axes({"alfa": 150, "beta": -101, "gamma": 0.5, "delta": 100})
    assert axes == AxisVector(alfa=100, beta=-100, gamma=0.5, delta=100)


@pytest.mark.parametrize(
    "raw",
    [
        None,
        [1, 2, 3, 4],
        {"alfa": 1, "beta": 2, "gamma": 3},
        {"alfa": "1", "beta": 2, "gamma": 3, "delta": 4},
        {"alfa": True, "beta": 2, "gamma": 3, "delta": 4},
        {"alfa": float("inf"), "beta": 2, "gamma": 3, "delta": 4},
    ],
)
def test_sanitize_rejects_malformed(raw):
    assert sanitize_axes(raw) is None


def test_load_drops_malformed_entries(map_file, caplog):
    with caplog.at_level(logging.WARNING, logger="sfcm.semantic.semantic_map"):
        semantic_map = load_semantic_map(map_file)

    assert set(semantic_map) == {"luce", "eccesso"}
    assert semantic_map["luce"] == AxisVector(alfa=10, beta=20, gamma=30, delta=40)
    assert semantic_map["eccesso"].alfa == 100
    assert semantic_map["eccesso"].beta == -100
    for bad in ("rotto", "booleano", "nan", "incompleto", "lista"):
        assert repr(bad) in caplog.text


def test_load_result_is_read_only(map_file):
    semantic_map = load_semantic_map(map_file)
    with pytest.raises(TypeError):
        semantic_map["nuovo"] = AxisVector(alfa=0, beta=0, gamma=0, delta=0)


def test_load_missing_file_is_empty(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="sfcm.semantic.semantic_map"):
        semantic_map = load_semantic_map(tmp_path / "missing.json")
    assert len(semantic_map) == 0
    assert "Failed to load" in caplog.text


def test_load_non_object_is_empty(tmp_path):
    path = tmp_path / "array.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert len(load_semantic_map(path)) == 0


def test_packaged_map_has_scenario_keywords():
    semantic_map = get_semantic_map()
    assert semantic_map["ordine"] == AxisVector(alfa=-35, beta=40, gamma=-10, delta=-70)
    assert semantic_map["caos"] == AxisVector(alfa=45, beta=-30, gamma=85, delta=90)


def test_resolve_uses_dictionary_case_insensitively():
    assert resolve_axes(" ORDINE ") == get_semantic_map()["ordine"]


def test_resolve_with_explicit_map(map_file):
    semantic_map = load_semantic_map(map_file)
    assert resolve_axes("Luce", semantic_map).delta == 40


def test_fallback_is_deterministic_integer_and_in_range():
    a = fallback_axes("zanzara")
    b = fallback_axes("zanzara")
    assert a == b
    for value in (a.alfa, a.beta, a.gamma, a.delta):
        assert -100 <= value <= 100
        assert value == int(value)


def test_fallback_differs_between_keywords():
    assert fallback_axes("zanzara") != fallback_axes("qwerty")


def test_resolve_unknown_keyword_uses_normalized_fallback():
    assert resolve_axes("  Zanzara") == fallback_axes("zanzara")
    assert resolve_axes("zanzara", {}) == fallback_axes("zanzara")
