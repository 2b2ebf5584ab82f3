"""
Configuration and game registry.
"""

from typing import Optional

from classic_games.core.types import Difficulty, Mode, coerce
from classic_games.games import Chase, Snake, TicTacToe, TimedGame, WordGuess
from classic_games.games.word_list import DEFAULT_CATEGORY, WORD_LIST


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "snake": Snake,
    "chase": Chase,
    "word_guess": WordGuess,
    "tic_tac_toe": TicTacToe,
}

# Seconds between ticks for the timer-driven games
TICK_INTERVALS = {
    name: game_class.tick_interval
    for name, game_class in GAMES.items()
    if issubclass(game_class, TimedGame)
}

DEFAULT_GAME = "tic_tac_toe"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Session options with sensible defaults."""

    def __init__(
        self,
        game_name: str = DEFAULT_GAME,
        seed: Optional[int] = None,
        mode: str = "human",
        difficulty: str = "medium",
        category: str = DEFAULT_CATEGORY,
    ):
        # Raises KeyError for unknown games
        self.game_class = GAMES[game_name]
        self.game_name = game_name
        self.seed = seed

        self.mode = coerce(Mode, mode)
        if self.mode is None:
            raise ValueError(f"Unknown mode: {mode}")
        self.difficulty = coerce(Difficulty, difficulty)
        if self.difficulty is None:
            raise ValueError(f"Unknown difficulty: {difficulty}")
        if category not in WORD_LIST:
            raise ValueError(f"Unknown category: {category}")
        self.category = category

        # Derive dependent values
        self.tick_interval = TICK_INTERVALS.get(game_name)

    def game_options(self) -> dict:
        """Constructor keyword arguments relevant to the selected game."""
        if self.game_class is TicTacToe:
            return {"mode": self.mode, "difficulty": self.difficulty}
        if self.game_class is WordGuess:
            return {"category": self.category}
        return {}


# Default configuration
DEFAULT_CONFIG = Config()
