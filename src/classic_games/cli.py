"""
Command-line interface for playing the games in a terminal.
"""

import argparse
import logging

from classic_games.api import start_session
from classic_games.core.types import Difficulty, Mode
from classic_games.games.word_list import DEFAULT_CATEGORY, WORD_LIST
from classic_games.utils.config import DEFAULT_GAME, GAMES, Config
from classic_games.utils.factory import create_from_config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake, maze chase, word guess or tic-tac-toe in the terminal"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default=DEFAULT_GAME,
        help=f"Game to play (default: {DEFAULT_GAME})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for a reproducible session (default: unseeded)",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in Mode],
        default=Mode.HUMAN.value,
        help="tic_tac_toe: play a friend or the computer (default: human)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="tic_tac_toe: computer strength (default: medium)",
    )
    parser.add_argument(
        "--category", "-c",
        choices=list(WORD_LIST.keys()),
        default=DEFAULT_CATEGORY,
        help=f"word_guess: word category (default: {DEFAULT_CATEGORY})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        seed=args.seed,
        mode=args.mode,
        difficulty=args.difficulty,
        category=args.category,
    )
    game = create_from_config(config)
    start_session(game)


if __name__ == "__main__":
    main()
