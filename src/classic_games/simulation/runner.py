"""
Real-time tick driver for timed games.

A TickRunner calls game.tick() every game.tick_interval seconds on a
background thread. Commands from other threads go through submit() so
every transition runs under one lock and sees a complete snapshot.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import Any, Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from classic_games.games.game_base import TimedGame

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["TickRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown()


atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class TickRunner:
    """
    Drives one timed game in real time.

    Usage:
        with TickRunner(Snake(), on_tick=render) as runner:
            runner.submit(game.set_direction, Direction.UP)
            ...

    The loop stops by itself once the game is over; reset() restarts it.
    Resetting bumps a generation counter so a tick that was scheduled
    against the previous round is dropped instead of applied.
    """

    def __init__(
        self,
        game: "TimedGame",
        interval: Optional[float] = None,
        on_tick: Optional[Callable[[Any], None]] = None,
    ):
        interval = game.tick_interval if interval is None else interval
        if interval is None or interval <= 0:
            raise ValueError(f"{game.game_id()} needs a positive tick interval")

        self.game = game
        self.interval = interval
        self.on_tick = on_tick
        self.ticks = 0

        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._generation = 0
        self._thread: Optional[threading.Thread] = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *_):
        self.shutdown()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop,
            args=(self._generation,),
            name=f"tick-{self.game.game_id()}",
            daemon=True,
        )
        if self not in _active_runners:
            _active_runners.append(self)
        logger.debug("Starting %s ticks every %.3fs", self.game.game_id(), self.interval)
        self._thread.start()

    def shutdown(self) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=max(1.0, 2 * self.interval))
            logger.debug("Stopped %s after %d ticks", self.game.game_id(), self.ticks)

    def submit(self, command: Callable[..., Any], *args: Any) -> Any:
        """Run an engine command atomically with respect to ticks."""
        if self._stop.is_set() and not self.running:
            raise RuntimeError("TickRunner is stopped")
        with self._lock:
            return command(*args)

    def snapshot(self) -> Any:
        with self._lock:
            return self.game.get_state()

    def reset(self) -> None:
        """Reset the game and restart ticking; pending ticks are dropped."""
        with self._lock:
            self._generation += 1
            self.game.reset()
        self._restart()

    def step(self) -> Any:
        """Apply one tick synchronously (used by tests and headless play)."""
        with self._lock:
            return self._apply_tick()

    # ------------------------------------------------------------------

    def _restart(self) -> None:
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=max(1.0, 2 * self.interval))
        self.start()

    def _apply_tick(self) -> Any:
        self.game.tick()
        self.ticks += 1
        state = self.game.get_state()
        if self.on_tick is not None:
            self.on_tick(state)
        return state

    def _loop(self, generation: int) -> None:
        while not self._stop.wait(self.interval):
            with self._lock:
                if generation != self._generation:
                    return
                self._apply_tick()
                if self.game.is_over():
                    return
