"""Canvas size presets — one source of truth for supported drawing formats."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (1080, 1080)
MAX_CUSTOM_SIZE = 10000

CANVAS_PRESETS: dict[str, tuple[int, int]] = {
    "square": (1080, 1080),
    "4_5": (1080, 1350),
    "9_16": (1080, 1920),
    "16_9": (1920, 1080),
}


def resolve_canvas_size(
    preset: str,
    custom_width: float | None = None,
    custom_height: float | None = None,
) -> tuple[int, int]:
    """Pixel size for a preset id, or for ``"custom"`` with explicit dimensions.

    Invalid custom dimensions and unknown ids fall back to 1080×1080 per axis.
    """
    if preset in CANVAS_PRESETS:
        return CANVAS_PRESETS[preset]

    if preset == "custom":
        width = round(custom_width) if custom_width and custom_width > 0 else DEFAULT_SIZE[0]
        height = round(custom_height) if custom_height and custom_height > 0 else DEFAULT_SIZE[1]
        return (width, height)

    logger.warning("Unknown canvas preset %r, using %dx%d", preset, *DEFAULT_SIZE)
    return DEFAULT_SIZE


def validate_custom_size(width: float | None, height: float | None) -> bool:
    if width is None or height is None:
        return False
    if width <= 0 or height <= 0:
        return False
    return width <= MAX_CUSTOM_SIZE and height <= MAX_CUSTOM_SIZE
