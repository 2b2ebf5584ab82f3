"""
Snake game implementation.

The snake moves on a torus: leaving one edge re-enters on the opposite
edge, so the only way to lose is to run into its own body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np

from classic_games.core.rng import RandomSource
from classic_games.core.types import Direction, Position, Status, coerce
from classic_games.games.game_base import TimedGame
from classic_games.games.game_rules import wrap_step

logger = logging.getLogger(__name__)

GRID_SIZE = 20
INITIAL_DIRECTION = Direction.RIGHT
FOOD_POINTS = 1

CELL_STRINGS = {0: "·", 1: "o", 2: "@", 3: "*"}


@dataclass(frozen=True)
class SnakeState:
    segments: Tuple[Position, ...]  # head first
    direction: Direction            # applied on the last tick
    pending_direction: Direction    # applied on the next tick
    food: Position
    score: int = 0
    status: Status = Status.PLAYING
    paused: bool = False
    grid_size: int = GRID_SIZE

    @property
    def head(self) -> Position:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def spawn_food(rng: RandomSource, grid_size: int = GRID_SIZE) -> Position:
    """
    Uniform cell anywhere on the grid.

    Occupied cells are not excluded: food can land under the snake.
    """
    return rng.position(grid_size)


def initial_state(rng: RandomSource, grid_size: int = GRID_SIZE) -> SnakeState:
    """One segment in the middle of the grid, heading right."""
    return SnakeState(
        segments=(Position(grid_size // 2, grid_size // 2),),
        direction=INITIAL_DIRECTION,
        pending_direction=INITIAL_DIRECTION,
        food=spawn_food(rng, grid_size),
        grid_size=grid_size,
    )


def set_direction(state: SnakeState, direction: Direction) -> SnakeState:
    """Queue a turn. Reversing onto the body is ignored."""
    if direction is state.direction.opposite:
        return state
    return replace(state, pending_direction=direction)


def toggle_pause(state: SnakeState) -> SnakeState:
    if state.status is not Status.PLAYING:
        return state
    return replace(state, paused=not state.paused)


def tick(state: SnakeState, rng: RandomSource) -> SnakeState:
    """Advance the snake one cell."""
    if state.status is not Status.PLAYING or state.paused:
        return state

    direction = state.pending_direction
    new_head = wrap_step(state.head, direction, state.grid_size)

    if new_head in state.segments:
        return replace(state, status=Status.GAME_OVER)

    if new_head == state.food:
        return replace(
            state,
            segments=(new_head,) + state.segments,
            direction=direction,
            food=spawn_food(rng, state.grid_size),
            score=state.score + FOOD_POINTS,
        )

    return replace(
        state,
        segments=(new_head,) + state.segments[:-1],
        direction=direction,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class Snake(TimedGame):
    """Snake engine holding the current snapshot."""

    tick_interval = 0.15

    def __init__(self, rng: Optional[RandomSource] = None, grid_size: int = GRID_SIZE):
        super().__init__(rng)
        self.grid_size = grid_size
        self.state = initial_state(self.rng, grid_size)

    def game_id(self) -> str:
        return "snake"

    def get_state(self) -> SnakeState:
        return self.state

    def set_state(self, state: SnakeState) -> None:
        self.state = state

    def reset(self) -> None:
        self.state = initial_state(self.rng, self.grid_size)

    def is_over(self) -> bool:
        return self.state.status is not Status.PLAYING

    def tick(self) -> None:
        before = self.state
        self.state = tick(before, self.rng)
        if self.state.status is not before.status:
            logger.info("Snake game over with score %d", self.state.score)

    def set_direction(self, direction) -> None:
        parsed = coerce(Direction, direction)
        if parsed is None:
            logger.debug("Ignoring unknown direction %r", direction)
            return
        self.state = set_direction(self.state, parsed)

    def toggle_pause(self) -> None:
        self.state = toggle_pause(self.state)

    def state_string(self) -> str:
        s = self.state
        grid = np.zeros((s.grid_size, s.grid_size), dtype=np.int8)
        grid[s.food.y, s.food.x] = 3
        for seg in s.segments[1:]:
            grid[seg.y, seg.x] = 1
        grid[s.head.y, s.head.x] = 2

        lines = [f"Score: {s.score}" + ("  [PAUSED]" if s.paused else "")]
        lines.append("╭" + "─" * s.grid_size + "╮")
        for row in grid:
            lines.append("│" + "".join(CELL_STRINGS[int(v)] for v in row) + "│")
        lines.append("╰" + "─" * s.grid_size + "╯")
        if s.status is Status.GAME_OVER:
            lines.append("Game Over!")
        return "\n".join(lines)
