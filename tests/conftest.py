"""
Shared test fixtures for classic_games tests.

Design principles:
- Every random draw comes from a seeded source
- The process-wide source is restored after each test
- Minimal, focused fixtures
"""

from typing import Generator, List

import pytest

from classic_games.core.rng import RandomSource, get_rng, set_rng
from classic_games.core.types import Difficulty, Mode
from classic_games.games.chase import Chase
from classic_games.games.snake import Snake
from classic_games.games.tic_tac_toe import TicTacToe
from classic_games.games.word_guess import WordGuess
from classic_games.games.word_list import WordEntry


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture(autouse=True)
def restore_global_rng() -> Generator[None, None, None]:
    """Tests may swap the process-wide source; put the original back."""
    original = get_rng()
    yield
    set_rng(original)


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(1234)


class ScriptedRandom(RandomSource):
    """
    RandomSource whose draws are taken from fixed scripts.

    randrange() pops from ``ints`` and random() from ``floats``; when a
    script runs out the seeded generator takes over.
    """

    def __init__(self, ints: List[int] = (), floats: List[float] = ()):
        super().__init__(0)
        self.ints = list(ints)
        self.floats = list(floats)

    def randrange(self, n: int) -> int:
        if self.ints:
            return self.ints.pop(0) % n
        return super().randrange(n)

    def random(self) -> float:
        if self.floats:
            return self.floats.pop(0)
        return super().random()


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def snake(rng: RandomSource) -> Snake:
    return Snake(rng=rng)


@pytest.fixture
def chase(rng: RandomSource) -> Chase:
    return Chase(rng=rng)


@pytest.fixture
def snake_words():
    """A single-word catalogue so the drawn word is known."""
    return {
        "animals": (WordEntry("SNAKE", "Legless reptile", Difficulty.EASY),),
        "food": (WordEntry("PIZZA", "Italian pie with toppings", Difficulty.EASY),),
    }


@pytest.fixture
def word_game(rng: RandomSource, snake_words) -> WordGuess:
    return WordGuess(rng=rng, category="animals", word_list=snake_words)


@pytest.fixture
def board() -> TicTacToe:
    """Two-human board."""
    return TicTacToe(rng=RandomSource(99))


@pytest.fixture
def hard_ai() -> TicTacToe:
    return TicTacToe(rng=RandomSource(99), mode=Mode.AI, difficulty=Difficulty.HARD)
