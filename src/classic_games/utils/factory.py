"""
Factory functions for creating games.
"""

from typing import Optional

from classic_games.core.rng import RandomSource
from classic_games.games.game_base import GameBase
from classic_games.utils.config import GAMES, Config


def create_game(game_name: str, rng: Optional[RandomSource] = None, **options) -> GameBase:
    """
    Create a game engine in its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")
        rng: Random source; the process-wide one is used when omitted
        **options: Extra constructor arguments (mode, difficulty, category, ...)

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    game_class = GAMES[game_name]
    return game_class(rng=rng, **options)


def create_from_config(config: Config) -> GameBase:
    """Create the configured game with a seeded source when a seed is set."""
    rng = RandomSource(config.seed) if config.seed is not None else None
    return create_game(config.game_name, rng=rng, **config.game_options())
