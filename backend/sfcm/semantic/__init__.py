"""Static semantic dictionary and keyword → axes resolution."""

from sfcm.semantic.semantic_map import (
    fallback_axes,
    get_semantic_map,
    load_semantic_map,
    normalize_keyword,
    resolve_axes,
    sanitize_axes,
)

__all__ = [
    "fallback_axes",
    "get_semantic_map",
    "load_semantic_map",
    "normalize_keyword",
    "resolve_axes",
    "sanitize_axes",
]
