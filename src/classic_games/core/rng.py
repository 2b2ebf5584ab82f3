"""
Injectable random source.

Every random draw in the engines (food placement, adversary walks, word
selection, easy/medium AI moves) goes through a RandomSource. Engines that
are not handed one explicitly resolve the process-wide source at each
transition, so tests can swap in a seeded source with set_rng()/seed_rng().
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

import numpy as np

from classic_games.core.types import Position

T = TypeVar("T")


class RandomSource:
    """Thin wrapper around a numpy Generator with the draws the games need."""

    __slots__ = ("seed", "_gen")

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._gen = np.random.default_rng(seed)

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {n}")
        return int(self._gen.integers(n))

    def choice(self, items: Sequence[T]) -> T:
        """Uniform element of a non-empty sequence."""
        if len(items) == 0:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.randrange(len(items))]

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._gen.random())

    def position(self, grid_size: int) -> Position:
        """Uniform cell on a square grid."""
        return Position(self.randrange(grid_size), self.randrange(grid_size))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"


_provider = RandomSource()


def get_rng() -> RandomSource:
    """Return the process-wide random source."""
    return _provider


def set_rng(rng: RandomSource) -> None:
    """Replace the process-wide random source."""
    global _provider
    _provider = rng


def seed_rng(seed: Optional[int]) -> RandomSource:
    """Install a freshly seeded process-wide source and return it."""
    rng = RandomSource(seed)
    set_rng(rng)
    return rng
