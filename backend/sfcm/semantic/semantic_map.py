"""Semantic map — keyword → AxisVector lookup with a deterministic fallback.

The dictionary is a static JSON object ``{keyword: {alfa, beta, gamma, delta}}``
shipped with the package. Keys are normalized and values sanitized once at
load time; malformed entries never reach resolution.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from sfcm.config import settings
from sfcm.models.axes import AXIS_MAX, AXIS_MIN, AxisVector
from sfcm.utils.math_helpers import clamp, round_half_up
from sfcm.utils.seed import prng

logger = logging.getLogger(__name__)

_AXES = ("alfa", "beta", "gamma", "delta")

SemanticMap = Mapping[str, AxisVector]


def normalize_keyword(raw: str) -> str:
    return raw.strip().casefold()


def sanitize_axes(raw: Any) -> AxisVector | None:
    """Validate one dictionary entry; clamp to [-100, 100]. None if malformed."""
    if not isinstance(raw, Mapping):
        return None

    values: dict[str, float] = {}
    for axis in _AXES:
        v = raw.get(axis)
        # bool is an int subclass; JSON true/false is not a coordinate
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if not math.isfinite(v):
            return None
        values[axis] = clamp(float(v), AXIS_MIN, AXIS_MAX)

    return AxisVector(**values)


def load_semantic_map(path: Path | str) -> SemanticMap:
    """Read and clean a semantic map file. Never raises; returns a read-only mapping."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to load semantic map %s: %s", path, e)
        return MappingProxyType({})

    if not isinstance(data, dict):
        logger.error("Semantic map %s is not a JSON object, ignoring", path)
        return MappingProxyType({})

    result: dict[str, AxisVector] = {}
    for key, value in data.items():
        axes = sanitize_axes(value)
        if axes is None:
            logger.warning("Invalid axes data for keyword %r in %s, skipping", key, path.name)
            continue
        result[normalize_keyword(str(key))] = axes

    logger.debug("Loaded %d semantic entries from %s", len(result), path.name)
    return MappingProxyType(result)


@lru_cache(maxsize=1)
def get_semantic_map() -> SemanticMap:
    """Process-wide dictionary, loaded once from the configured path."""
    return load_semantic_map(settings.sfcm_semantic_map_path)


def fallback_axes(normalized: str) -> AxisVector:
    """Deterministic axes for a keyword missing from the dictionary.

    Four successive draws from one generator keyed on the keyword, each
    mapped to an integer in [-100, 100].
    """
    rng = prng(f"axes_v2:{normalized}")

    def _axis() -> float:
        return float(round_half_up(rng.random() * 200 - 100))

    return AxisVector(alfa=_axis(), beta=_axis(), gamma=_axis(), delta=_axis())


def resolve_axes(keyword: str, semantic_map: SemanticMap | None = None) -> AxisVector:
    """Dictionary entry for the keyword, or its fallback. Never raises."""
    if semantic_map is None:
        semantic_map = get_semantic_map()
    normalized = normalize_keyword(keyword)
    found = semantic_map.get(normalized)
    if found is not None:
        return found
    return fallback_axes(normalized)
