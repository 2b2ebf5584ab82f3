"""
Selection module - computer move selection for the board game.

Provides the main entry point:
- select_move(): pick a cell for the AI at a given difficulty
"""

from __future__ import annotations

from typing import Sequence

from classic_games.core.rng import RandomSource
from classic_games.core.types import Difficulty, Mark
from classic_games.games.game_rules import empty_cells
from classic_games.selection.minimax import WIN_SCORE, best_move, minimax

# Chance that a medium AI plays a random cell instead of the optimal one
MEDIUM_RANDOM_RATE = 0.3


def random_move(cells: Sequence[int], rng: RandomSource) -> int:
    """Uniform choice among empty cells."""
    moves = empty_cells(cells)
    if not moves:
        raise ValueError("No moves left on a full board")
    return rng.choice(moves)


def select_move(
    cells: Sequence[int],
    difficulty: Difficulty,
    rng: RandomSource,
    ai_mark: Mark = Mark.O,
) -> int:
    """
    Select the AI's cell.

    - easy:   uniform random empty cell
    - medium: random with probability MEDIUM_RANDOM_RATE, otherwise as hard
    - hard:   exhaustive minimax (see selection.minimax)

    Args:
        cells: Flat 9-cell board (0 = empty)
        difficulty: Strategy to use
        rng: Random source for the easy/medium draws
        ai_mark: Mark the AI plays

    Returns:
        Index of the chosen cell
    """
    if difficulty is Difficulty.EASY:
        return random_move(cells, rng)

    if difficulty is Difficulty.MEDIUM and rng.random() < MEDIUM_RANDOM_RATE:
        return random_move(cells, rng)

    return best_move(cells, ai_mark)


__all__ = [
    "select_move",
    "random_move",
    "best_move",
    "minimax",
    "MEDIUM_RANDOM_RATE",
    "WIN_SCORE",
]
