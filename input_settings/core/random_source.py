"""Process-wide random source.

One generator is created at import time and shared by every accessor that
is not handed its own.  Creating a fresh ``random.Random()`` per call could
give identical seeds for calls in quick succession.

Tests and reproducible runs pass ``make_random(seed)`` instead.
"""
from __future__ import annotations

import random

SHARED_RANDOM = random.Random()


def make_random(seed: int | None = None) -> random.Random:
    """Return the shared generator, or a private one seeded with ``seed``."""
    if seed is None:
        return SHARED_RANDOM
    return random.Random(seed)
