"""
Core module - shared types and the injectable random source.

This module provides the building blocks used by every game engine.
"""

from classic_games.core.types import (
    Position,
    Direction,
    Status,
    Difficulty,
    Mode,
    Mark,
    Stats,
    coerce,
)
from classic_games.core.rng import RandomSource, get_rng, set_rng, seed_rng

__all__ = [
    # Types
    "Position",
    "Direction",
    "Status",
    "Difficulty",
    "Mode",
    "Mark",
    "Stats",
    "coerce",
    # Randomness
    "RandomSource",
    "get_rng",
    "set_rng",
    "seed_rng",
]
