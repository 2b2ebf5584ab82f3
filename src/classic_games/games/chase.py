"""
Maze-chase game implementation.

The player walks a walled maze collecting pickups while adversaries wander
at random. Adversaries do not pursue the player: each tick every adversary
picks one of its open neighbour cells uniformly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional, Tuple

import numpy as np

from classic_games.core.rng import RandomSource
from classic_games.core.types import Direction, Position, Status, coerce
from classic_games.games.game_base import TimedGame
from classic_games.games.game_rules import (
    in_bounds,
    open_neighbours,
    step,
    wall_mask_to_cells,
)

logger = logging.getLogger(__name__)

PICKUP_POINTS = 10
INITIAL_DIRECTION = Direction.RIGHT

CELL_STRINGS = {0: " ", 1: "█", 2: "·", 3: "C", 4: "G"}


@dataclass(frozen=True)
class MazeLayout:
    """Static maze description: walls and starting cells."""

    grid_size: int
    walls: FrozenSet[Position]
    player_start: Position
    adversary_starts: Tuple[Position, ...] = field(default_factory=tuple)

    def __post_init__(self):
        starts = (self.player_start,) + tuple(self.adversary_starts)
        for pos in starts:
            if not in_bounds(pos, self.grid_size):
                raise ValueError(f"Start {pos} is outside a {self.grid_size}x{self.grid_size} maze")
            if pos in self.walls:
                raise ValueError(f"Start {pos} is on a wall")

    def open_cells(self) -> FrozenSet[Position]:
        """Every non-wall cell of the maze."""
        return frozenset(
            Position(x, y)
            for x in range(self.grid_size)
            for y in range(self.grid_size)
            if Position(x, y) not in self.walls
        )


def _default_walls(size: int = 15) -> FrozenSet[Position]:
    mask = np.zeros((size, size), dtype=bool)
    # Outer ring
    mask[0, :] = mask[-1, :] = True
    mask[:, 0] = mask[:, -1] = True
    # Inner obstacles (mask is indexed [y, x])
    mask[3, 3:6] = mask[3, 9:12] = True
    mask[11, 3:6] = mask[11, 9:12] = True
    mask[5:10, 7] = True
    return wall_mask_to_cells(mask)


DEFAULT_LAYOUT = MazeLayout(
    grid_size=15,
    walls=_default_walls(15),
    player_start=Position(7, 11),
    adversary_starts=(
        Position(1, 1),
        Position(13, 1),
        Position(1, 13),
        Position(13, 13),
    ),
)


@dataclass(frozen=True)
class ChaseState:
    player: Position
    adversaries: Tuple[Position, ...]
    walls: FrozenSet[Position]
    pickups: FrozenSet[Position]
    direction: Direction = INITIAL_DIRECTION
    score: int = 0
    status: Status = Status.PLAYING
    grid_size: int = DEFAULT_LAYOUT.grid_size


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def initial_state(layout: MazeLayout = DEFAULT_LAYOUT) -> ChaseState:
    return ChaseState(
        player=layout.player_start,
        adversaries=tuple(layout.adversary_starts),
        walls=layout.walls,
        pickups=layout.open_cells(),
        grid_size=layout.grid_size,
    )


def set_direction(state: ChaseState, direction: Direction) -> ChaseState:
    if state.status is not Status.PLAYING:
        return state
    return replace(state, direction=direction)


def move_player(state: ChaseState) -> Position:
    """The player's next cell; blocked moves leave it in place."""
    nxt = step(state.player, state.direction)
    if not in_bounds(nxt, state.grid_size) or nxt in state.walls:
        return state.player
    return nxt


def move_adversary(pos: Position, state: ChaseState, rng: RandomSource) -> Position:
    """One memoryless random-walk step."""
    options = open_neighbours(pos, state.walls, state.grid_size)
    if not options:
        return pos
    return rng.choice(options)


def tick(state: ChaseState, rng: RandomSource) -> ChaseState:
    """Move the player, then every adversary, then resolve pickups and collisions."""
    if state.status is not Status.PLAYING:
        return state

    player = move_player(state)
    adversaries = tuple(move_adversary(a, state, rng) for a in state.adversaries)

    pickups = state.pickups
    score = state.score
    status = Status.PLAYING

    if player in pickups:
        pickups = pickups - {player}
        score += PICKUP_POINTS
        if not pickups:
            status = Status.WON

    if status is Status.PLAYING and player in adversaries:
        status = Status.LOST

    return replace(
        state,
        player=player,
        adversaries=adversaries,
        pickups=pickups,
        score=score,
        status=status,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class Chase(TimedGame):
    """Maze-chase engine holding the current snapshot."""

    tick_interval = 0.2

    def __init__(self, rng: Optional[RandomSource] = None, layout: MazeLayout = DEFAULT_LAYOUT):
        super().__init__(rng)
        self.layout = layout
        self.state = initial_state(layout)

    def game_id(self) -> str:
        return "chase"

    def get_state(self) -> ChaseState:
        return self.state

    def set_state(self, state: ChaseState) -> None:
        self.state = state

    def reset(self) -> None:
        self.state = initial_state(self.layout)

    def is_over(self) -> bool:
        return self.state.status is not Status.PLAYING

    def tick(self) -> None:
        before = self.state
        self.state = tick(before, self.rng)
        if self.state.status is before.status:
            return
        if self.state.status is Status.WON:
            logger.info("Chase won with score %d", self.state.score)
        elif self.state.status is Status.LOST:
            logger.info("Chase lost at %s with score %d", self.state.player, self.state.score)

    def set_direction(self, direction) -> None:
        parsed = coerce(Direction, direction)
        if parsed is None:
            logger.debug("Ignoring unknown direction %r", direction)
            return
        self.state = set_direction(self.state, parsed)

    def state_string(self) -> str:
        s = self.state
        grid = np.zeros((s.grid_size, s.grid_size), dtype=np.int8)
        for cells, value in ((s.walls, 1), (s.pickups, 2), (s.adversaries, 4)):
            for pos in cells:
                grid[pos.y, pos.x] = value
        grid[s.player.y, s.player.x] = 3

        lines = [f"Score: {s.score}  Pickups left: {len(s.pickups)}"]
        lines.extend("".join(CELL_STRINGS[int(v)] for v in row) for row in grid)
        if s.status is Status.WON:
            lines.append("You Win!")
        elif s.status is Status.LOST:
            lines.append("Game Over!")
        return "\n".join(lines)
