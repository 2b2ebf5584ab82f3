"""
Classic Games - deterministic engines for four casual games.

This package provides the game logic for snake, a maze chase, a word
guessing game and tic-tac-toe with a minimax opponent. Every engine keeps an
immutable snapshot and changes it only through transition functions.

Quick Start:
    from classic_games import create_game, seed_rng

    seed_rng(7)
    game = create_game("tic_tac_toe", mode="ai", difficulty="hard")
    game.play(4)
    print(game.state_string())

Modules:
    core       - Shared types and the injectable random source
    games      - Snake, Chase, WordGuess and TicTacToe engines
    selection  - Computer move selection (minimax and difficulty levels)
    simulation - Real-time tick driver for timed games
"""

from classic_games.api import start_session, handle_command
from classic_games.core import RandomSource, get_rng, set_rng, seed_rng
from classic_games.games import Chase, Snake, TicTacToe, WordGuess
from classic_games.selection import select_move
from classic_games.simulation import TickRunner
from classic_games.utils.factory import create_game

__version__ = "1.0.0"

__all__ = [
    # Main API
    "create_game",
    "start_session",
    "handle_command",
    "select_move",
    "TickRunner",
    # Engines
    "Snake",
    "Chase",
    "WordGuess",
    "TicTacToe",
    # Randomness
    "RandomSource",
    "get_rng",
    "set_rng",
    "seed_rng",
]
