"""Deterministic string-keyed randomness.

Every random decision in the engine goes through one construction: the key
string is hashed with SHA-256, the first 8 bytes seed a PCG64 bit generator,
and the generator's first draw is the value. Keys are composed as
``"<seed>:<stage>:<index>:..."`` so that two decisions never share a stream.

Usage:
    r = seeded_random(f"{seed}:branching:count:{i}")
    rng = prng(f"axes_v2:{keyword}")     # several draws from one key
"""

from __future__ import annotations

import hashlib

import numpy as np


def hash_key(key: str) -> int:
    """Stable 64-bit integer hash of a key (independent of PYTHONHASHSEED)."""
    digest = hashlib.sha256(key.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def prng(key: str) -> np.random.Generator:
    """Generator seeded from a key. Successive ``.random()`` calls are reproducible."""
    return np.random.Generator(np.random.PCG64(hash_key(key)))


def seeded_random(key: str) -> float:
    """Single deterministic float in [0, 1) for the given key."""
    return float(prng(key).random())


def seeded_choice(key: str, options: tuple[float, ...]) -> float:
    """Pick one entry from ``options`` using the key's draw."""
    idx = int(seeded_random(key) * len(options))
    return options[min(idx, len(options) - 1)]
