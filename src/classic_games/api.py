"""
Public API for playing the games from a terminal.

Usage:
    from classic_games import create_game, start_session

    game = create_game("tic_tac_toe", mode="ai", difficulty="hard")
    start_session(game)

Typed lines are translated into engine commands by handle_command();
snapshots are printed with game.state_string().
"""

from __future__ import annotations

import logging

from classic_games.core.types import Direction
from classic_games.games import Chase, GameBase, Snake, TicTacToe, TimedGame, WordGuess
from classic_games.simulation import TickRunner

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}
RESET_WORDS = {"r", "reset", "restart"}

HELP = {
    "snake": "Directions: w/a/s/d or up/down/left/right. p = pause, r = restart, q = quit.",
    "chase": "Directions: w/a/s/d or up/down/left/right. r = restart, q = quit.",
    "word_guess": "Type a letter. hint, reset, stats (clear score), category <name>, quit.",
    "tic_tac_toe": "Type a cell 0-8. mode <human|ai>, difficulty <easy|medium|hard>, reset, stats, q = quit.",
}


def handle_command(game: GameBase, raw: str) -> bool:
    """
    Apply one typed line to ``game``.

    Args:
        game: The engine to drive
        raw: The line as typed

    Returns:
        False when the player asked to quit, True otherwise
    """
    text = raw.strip()
    word, _, arg = text.partition(" ")
    word = word.lower()
    arg = arg.strip()

    # Single letters are guesses, even q and r
    if isinstance(game, WordGuess) and len(word) == 1:
        game.guess_letter(word)
        return True

    if word in QUIT_WORDS:
        return False
    if word in RESET_WORDS:
        game.reset()
        return True

    if isinstance(game, TimedGame):
        if word in ("p", "pause") and isinstance(game, Snake):
            game.toggle_pause()
        elif word:
            try:
                game.set_direction(Direction.parse(word))
            except ValueError as e:
                print(f"Invalid input: {e}")
        return True

    if isinstance(game, WordGuess):
        if word == "hint":
            game.reveal_hint()
        elif word == "stats":
            game.reset_stats()
        elif word == "category":
            arg = arg.lower()
            if arg not in game.categories:
                print(f"Unknown category. Available: {', '.join(game.categories)}")
            game.select_category(arg)
        elif word:
            print(f"Invalid input: {raw!r}")
        return True

    if isinstance(game, TicTacToe):
        if word == "stats":
            game.reset_stats()
        elif word == "mode":
            game.set_mode(arg)
        elif word == "difficulty":
            game.set_difficulty(arg)
        elif word.isdigit():
            game.play(int(word))
        elif word:
            print(f"Invalid input: {raw!r}")
        return True

    raise TypeError(f"Unsupported game: {type(game).__name__}")


def _turn_loop(game: GameBase) -> None:
    """Prompt-driven play for games that only change on commands."""
    print(game.state_string())
    while True:
        if not handle_command(game, input("> ")):
            return
        print(game.state_string())
        if game.is_over():
            print("(reset to play again, q to quit)")


def _realtime_loop(game: TimedGame) -> None:
    """Ticks run on a background thread; typed lines steer in between."""
    def render(state) -> None:
        print("\n" + game.state_string())
        if game.is_over():
            print("(r to restart, q to quit)")

    with TickRunner(game, on_tick=render) as runner:
        print(game.state_string())
        while True:
            raw = input()
            if raw.strip().lower() in RESET_WORDS:
                # Through the runner so ticks from the old round are dropped
                runner.reset()
                print(game.state_string())
            elif not runner.submit(handle_command, game, raw):
                return


def start_session(game: GameBase) -> None:
    """
    Main entry point: play ``game`` in the terminal until the player quits.

    Parameters
    ----------
    game : GameBase
        Engine created by utils.factory.create_game.
    """
    print(f"Starting {game.game_id()}. {HELP.get(game.game_id(), '')}")

    try:
        if isinstance(game, (Snake, Chase)):
            _realtime_loop(game)
        else:
            _turn_loop(game)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - shutting down...")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


__all__ = [
    "handle_command",
    "start_session",
]
