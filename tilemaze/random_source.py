"""Random number sources consumed by grid generation and target selection.

The core never seeds or owns global randomness. Callers inject a
``RandomSource``; ``StdlibRandomSource`` is the default and stays unseeded
unless a seed is passed in (tests do this for reproducible grids).
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable

from .errors import RandomSourceError


@runtime_checkable
class RandomSource(Protocol):
    """Uniform randomness needed by the core."""

    def random(self) -> float:
        """Return a float in ``[0, 1)``."""

    def random_range(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi]`` (both inclusive)."""


class StdlibRandomSource:
    """``RandomSource`` backed by ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def random_range(self, lo: int, hi: int) -> int:
        return self._rng.randint(lo, hi)


def draw_unit(rng: RandomSource) -> float:
    """Call ``rng.random()`` and fail fast on errors or out-of-range values."""
    try:
        value = rng.random()
    except Exception as exc:
        raise RandomSourceError(operation="random()", underlying=exc) from exc
    if not 0.0 <= value < 1.0:
        raise RandomSourceError(operation="random()", value=value)
    return value


def draw_range(rng: RandomSource, lo: int, hi: int) -> int:
    """Call ``rng.random_range(lo, hi)`` and fail fast on errors or bad values."""
    try:
        value = rng.random_range(lo, hi)
    except Exception as exc:
        raise RandomSourceError(operation=f"random_range({lo}, {hi})", underlying=exc) from exc
    if not isinstance(value, int) or not lo <= value <= hi:
        raise RandomSourceError(operation=f"random_range({lo}, {hi})", value=value)
    return value
