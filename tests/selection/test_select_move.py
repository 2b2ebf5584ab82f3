"""
Tests for classic_games.selection

Tests difficulty dispatch for the computer opponent.
"""

import pytest

from classic_games.core.types import Difficulty
from classic_games.selection import MEDIUM_RANDOM_RATE, random_move, select_move

# O must block at 2; free cells are 2, 3, 5, 6, 7, 8
BLOCK_BOARD = (1, 1, 0, 0, 2, 0, 0, 0, 0)


class TestRandomMove:
    def test_picks_from_empty_cells(self, scripted):
        assert random_move(BLOCK_BOARD, scripted(ints=[0])) == 2
        assert random_move(BLOCK_BOARD, scripted(ints=[3])) == 6

    def test_full_board_raises(self, rng):
        with pytest.raises(ValueError):
            random_move((1, 2) * 4 + (1,), rng)


class TestSelectMove:
    """Difficulty dispatch."""

    def test_easy_is_random(self, scripted):
        assert select_move(BLOCK_BOARD, Difficulty.EASY, scripted(ints=[5])) == 8

    def test_easy_only_empty_cells(self, rng):
        for _ in range(50):
            assert BLOCK_BOARD[select_move(BLOCK_BOARD, Difficulty.EASY, rng)] == 0

    def test_hard_is_optimal(self, scripted):
        source = scripted(floats=[0.0])
        assert select_move(BLOCK_BOARD, Difficulty.HARD, source) == 2
        assert source.floats == [0.0]

    def test_medium_below_rate_plays_random(self, scripted):
        source = scripted(ints=[1], floats=[MEDIUM_RANDOM_RATE - 0.01])
        assert select_move(BLOCK_BOARD, Difficulty.MEDIUM, source) == 3

    def test_medium_at_rate_plays_optimal(self, scripted):
        source = scripted(ints=[1], floats=[MEDIUM_RANDOM_RATE])
        assert select_move(BLOCK_BOARD, Difficulty.MEDIUM, source) == 2
        assert source.ints == [1]

    def test_medium_rate(self):
        assert MEDIUM_RANDOM_RATE == pytest.approx(0.3)
