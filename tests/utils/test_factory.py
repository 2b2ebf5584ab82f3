"""
Tests for classic_games.utils.factory

Tests factory functions for creating games.
"""

import pytest

from classic_games.core.rng import RandomSource, get_rng
from classic_games.core.types import Difficulty, Mode
from classic_games.games import Chase, GameBase, Snake, TicTacToe, WordGuess
from classic_games.utils.config import GAMES, Config
from classic_games.utils.factory import create_from_config, create_game


class TestCreateGame:
    """create_game function tests."""

    @pytest.mark.parametrize("name, cls", [
        ("snake", Snake),
        ("chase", Chase),
        ("word_guess", WordGuess),
        ("tic_tac_toe", TicTacToe),
    ])
    def test_creates_each_game(self, name, cls):
        game = create_game(name)
        assert isinstance(game, cls)
        assert isinstance(game, GameBase)
        assert not game.is_over()

    def test_all_registered_games(self):
        for name in GAMES:
            assert create_game(name).game_id() == name

    def test_unknown_game_raises(self):
        with pytest.raises(ValueError, match="Unknown game"):
            create_game("pong")

    def test_options_forwarded(self):
        game = create_game("tic_tac_toe", mode="ai", difficulty="easy")
        assert game.get_state().mode is Mode.AI
        assert game.get_state().difficulty is Difficulty.EASY

    def test_explicit_rng_used(self):
        source = RandomSource(5)
        assert create_game("snake", rng=source).rng is source

    def test_defaults_to_process_source(self):
        assert create_game("chase").rng is get_rng()


class TestCreateFromConfig:
    """create_from_config function tests."""

    def test_seeded_games_reproducible(self):
        config = Config("word_guess", seed=42, category="movies")
        first = create_from_config(config).get_state()
        second = create_from_config(config).get_state()
        assert first.category == "movies"
        assert first.word == second.word

    def test_unseeded_uses_process_source(self):
        game = create_from_config(Config("snake"))
        assert game.rng is get_rng()

    def test_board_settings_applied(self):
        game = create_from_config(Config("tic_tac_toe", mode="ai", difficulty="hard"))
        assert game.get_state().mode is Mode.AI
        assert game.get_state().difficulty is Difficulty.HARD
