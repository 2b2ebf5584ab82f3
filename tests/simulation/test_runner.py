"""
Tests for classic_games.simulation.runner

Tests TickRunner for real-time game driving.
"""

import threading
import time

import pytest

from classic_games.core.rng import RandomSource
from classic_games.core.types import Direction, Position, Status
from classic_games.games.snake import Snake, SnakeState
from classic_games.simulation.runner import TickRunner, _active_runners

FAST = 0.01


@pytest.fixture(autouse=True)
def cleanup_globals():
    """Ensure the runner registry is clean before and after each test."""
    _active_runners.clear()
    yield
    for runner in _active_runners[:]:
        runner.shutdown()
    _active_runners.clear()


@pytest.fixture
def game() -> Snake:
    game = Snake(rng=RandomSource(11))
    # Food out of the way so ticks only move the snake
    game.set_state(SnakeState(
        segments=(Position(5, 5),),
        direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
        food=Position(0, 19),
    ))
    return game


def doomed_state() -> SnakeState:
    """A snake that bites itself on the next tick."""
    return SnakeState(
        segments=(Position(5, 5), Position(6, 5), Position(6, 6), Position(5, 6)),
        direction=Direction.LEFT,
        pending_direction=Direction.DOWN,
        food=Position(0, 0),
    )


def wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(FAST)
    return predicate()


class TestCreation:
    """TickRunner construction."""

    def test_uses_game_interval(self, game):
        assert TickRunner(game).interval == pytest.approx(0.15)

    def test_interval_override(self, game):
        assert TickRunner(game, interval=0.5).interval == pytest.approx(0.5)

    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_non_positive_interval_rejected(self, game, interval):
        with pytest.raises(ValueError):
            TickRunner(game, interval=interval)

    def test_not_running_until_started(self, game):
        runner = TickRunner(game)
        assert not runner.running
        assert runner not in _active_runners


class TestGlobalRegistry:
    """Tests for cleanup infrastructure."""

    def test_registers_on_start(self, game):
        runner = TickRunner(game, interval=FAST)
        runner.start()
        assert runner in _active_runners
        runner.shutdown()
        assert runner not in _active_runners

    def test_context_manager(self, game):
        with TickRunner(game, interval=FAST) as runner:
            assert runner.running
        assert not runner.running
        assert runner not in _active_runners


class TestStep:
    """Synchronous ticking."""

    def test_step_applies_one_tick(self, game):
        runner = TickRunner(game)
        state = runner.step()
        assert state.head == Position(6, 5)
        assert runner.ticks == 1

    def test_on_tick_receives_state(self, game):
        seen = []
        runner = TickRunner(game, on_tick=seen.append)
        runner.step()
        runner.step()
        assert [s.head for s in seen] == [Position(6, 5), Position(7, 5)]

    def test_snapshot(self, game):
        runner = TickRunner(game)
        assert runner.snapshot() is game.get_state()


class TestCommands:
    """Commands submitted from other threads."""

    def test_submit_runs_command(self, game):
        runner = TickRunner(game)
        runner.submit(game.set_direction, Direction.UP)
        assert runner.snapshot().pending_direction is Direction.UP

    def test_submit_returns_result(self, game):
        runner = TickRunner(game)
        assert runner.submit(game.game_id) == "snake"

    def test_submit_after_shutdown_raises(self, game):
        runner = TickRunner(game, interval=FAST)
        runner.start()
        runner.shutdown()
        with pytest.raises(RuntimeError):
            runner.submit(game.set_direction, Direction.UP)


class TestBackgroundLoop:
    """Real-time ticking on the worker thread."""

    def test_ticks_in_background(self, game):
        ticked = threading.Event()
        count = []

        def on_tick(state):
            count.append(state)
            if len(count) >= 3:
                ticked.set()

        with TickRunner(game, interval=FAST, on_tick=on_tick):
            assert ticked.wait(timeout=2.0)

    def test_stops_when_game_over(self, game):
        game.set_state(doomed_state())
        runner = TickRunner(game, interval=FAST)
        runner.start()
        assert wait_for(lambda: not runner.running)
        assert game.get_state().status is Status.GAME_OVER
        assert runner.ticks == 1
        runner.shutdown()

    def test_reset_restarts_loop(self, game):
        game.set_state(doomed_state())
        runner = TickRunner(game, interval=FAST)
        runner.start()
        assert wait_for(lambda: not runner.running)

        runner.reset()
        assert runner.running
        assert runner.snapshot().status is Status.PLAYING
        runner.shutdown()

    def test_stale_generation_dropped(self, game):
        """A loop started for an earlier round applies no ticks."""
        runner = TickRunner(game, interval=FAST)
        runner._generation += 1
        runner._loop(0)
        assert runner.ticks == 0
