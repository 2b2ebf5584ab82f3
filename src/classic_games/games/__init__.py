"""
Games module - game engine implementations.
"""

from classic_games.games.game_base import GameBase, TimedGame
from classic_games.games.game_rules import (
    in_bounds,
    wrap_step,
    open_neighbours,
    winning_line,
    empty_cells,
    board_full,
)
from classic_games.games.snake import Snake, SnakeState
from classic_games.games.chase import Chase, ChaseState, MazeLayout
from classic_games.games.word_guess import WordGuess, WordGuessState
from classic_games.games.tic_tac_toe import TicTacToe, BoardState

__all__ = [
    "GameBase",
    "TimedGame",
    "Snake",
    "SnakeState",
    "Chase",
    "ChaseState",
    "MazeLayout",
    "WordGuess",
    "WordGuessState",
    "TicTacToe",
    "BoardState",
    "in_bounds",
    "wrap_step",
    "open_neighbours",
    "winning_line",
    "empty_cells",
    "board_full",
]
