"""
GameBase - abstract base class for all game engines.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from classic_games.core.rng import RandomSource, get_rng
from classic_games.core.types import Direction


class GameBase(ABC):
    """
    Abstract base class for all game engines.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Each game module defines an immutable snapshot type and pure
      transition functions (state, command) -> state.
    - The engine only holds the current snapshot and swaps it wholesale.
    - External code never patches a snapshot; it issues commands.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self._rng = rng

    @property
    def rng(self) -> RandomSource:
        """Explicit source if one was given, else the process-wide one."""
        return self._rng if self._rng is not None else get_rng()

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def get_state(self) -> Any:
        """Return the current (immutable) state snapshot."""
        pass

    @abstractmethod
    def set_state(self, state: Any) -> None:
        """Replace the current state snapshot."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Replace the state with a fresh initial state."""
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the current round has ended."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass


class TimedGame(GameBase):
    """A game advanced by a periodic timer plus direction commands."""

    #: Seconds between ticks when driven in real time.
    tick_interval: float = 0.2

    @abstractmethod
    def tick(self) -> None:
        """Advance the game by one time step."""
        pass

    @abstractmethod
    def set_direction(self, direction: Direction) -> None:
        """Queue a movement direction."""
        pass
