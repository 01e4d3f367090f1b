"""Math helpers — clamping and rounding. No engine imports."""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +inf.

    Python's round() is banker's rounding; every count and pixel key in the
    engine uses half-up so 0.5 → 1 and -0.5 → 0.
    """
    return int(math.floor(value + 0.5))


def is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)
