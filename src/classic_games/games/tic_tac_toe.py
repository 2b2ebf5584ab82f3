"""
TicTacToe game implementation.

Cells use the int8 encoding from core.types.Mark:
    0 = empty
    1 = X (human, moves first)
    2 = O (second player, or the computer in AI mode)
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from classic_games.core.rng import RandomSource
from classic_games.core.types import Difficulty, Mark, Mode, Stats, Status, coerce
from classic_games.games.game_base import GameBase
from classic_games.games.game_rules import BOARD_CELLS, as_grid, board_full, winning_line

logger = logging.getLogger(__name__)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

HUMAN_MARK = Mark.X
AI_MARK = Mark.O
STARTING_MARK = Mark.X

DEFAULT_MODE = Mode.HUMAN
DEFAULT_DIFFICULTY = Difficulty.MEDIUM

AI_TAUNTS = (
    "Ha! You thought you had a chance?",
    "Is that all you've got?",
    "Come on, is that your best move?",
    "Better luck next time, amateur!",
    "You're making this too easy for me!",
    "Was that supposed to be a move?",
)

EMPTY_BOARD: Tuple[int, ...] = (Mark.EMPTY,) * BOARD_CELLS


@dataclass(frozen=True)
class BoardState:
    cells: Tuple[int, ...] = EMPTY_BOARD
    current_mark: Mark = STARTING_MARK
    status: Status = Status.PLAYING
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    mode: Mode = DEFAULT_MODE
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    stats: Stats = Stats()
    taunt: Optional[str] = None

    @property
    def ai_turn(self) -> bool:
        return (
            self.mode is Mode.AI
            and self.status is Status.PLAYING
            and self.current_mark == AI_MARK
        )


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def reset(state: BoardState) -> BoardState:
    """Clear the board; mode, difficulty and stats are kept."""
    return BoardState(mode=state.mode, difficulty=state.difficulty, stats=state.stats)


def reset_stats(state: BoardState) -> BoardState:
    return replace(state, stats=Stats())


def set_mode(state: BoardState, mode: Mode) -> BoardState:
    if mode is state.mode:
        return state
    return reset(replace(state, mode=mode))


def set_difficulty(state: BoardState, difficulty: Difficulty) -> BoardState:
    if difficulty is state.difficulty:
        return state
    return reset(replace(state, difficulty=difficulty))


def is_valid_cell(cell: object) -> bool:
    """Any integer type (numpy included) in 0..8; bools are not cells."""
    return isinstance(cell, numbers.Integral) and not isinstance(cell, bool) and 0 <= cell < BOARD_CELLS


def place(state: BoardState, cell: int, rng: RandomSource) -> BoardState:
    """
    Put the current mark on ``cell`` and settle the outcome.

    Occupied or out-of-range cells and finished games are ignored.
    """
    if state.status is not Status.PLAYING or not is_valid_cell(cell):
        return state
    cell = int(cell)
    if state.cells[cell] != Mark.EMPTY:
        return state

    mark = Mark(state.current_mark)
    cells = state.cells[:cell] + (mark,) + state.cells[cell + 1:]

    line = winning_line(cells)
    if line is not None:
        taunt = None
        if mark is AI_MARK and state.mode is Mode.AI:
            taunt = rng.choice(AI_TAUNTS)
        return replace(
            state,
            cells=cells,
            status=Status.WON,
            winner=mark,
            winning_line=line,
            stats=state.stats.record(mark),
            taunt=taunt,
        )

    if board_full(cells):
        return replace(state, cells=cells, status=Status.DRAW, stats=state.stats.record(None))

    return replace(state, cells=cells, current_mark=mark.other)


def ai_move(state: BoardState, rng: RandomSource) -> BoardState:
    """Let the computer play if it is its turn."""
    if not state.ai_turn:
        return state
    from classic_games.selection import select_move

    cell = select_move(state.cells, state.difficulty, rng, ai_mark=AI_MARK)
    return place(state, cell, rng)


def play(state: BoardState, cell: int, rng: RandomSource) -> BoardState:
    """
    A human click on ``cell``. In AI mode the computer answers before
    this returns, so the human never observes the AI's turn.
    """
    if state.ai_turn:
        return state
    after = place(state, cell, rng)
    if after is state:
        return state
    return ai_move(after, rng)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class TicTacToe(GameBase):
    """TicTacToe engine with an optional computer opponent."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        mode: Mode = DEFAULT_MODE,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
    ):
        super().__init__(rng)
        parsed_mode = coerce(Mode, mode)
        parsed_difficulty = coerce(Difficulty, difficulty)
        if parsed_mode is None:
            raise ValueError(f"Unknown mode: {mode}")
        if parsed_difficulty is None:
            raise ValueError(f"Unknown difficulty: {difficulty}")
        self.state = BoardState(mode=parsed_mode, difficulty=parsed_difficulty)

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "tic_tac_toe"

    def get_state(self) -> BoardState:
        return self.state

    def set_state(self, state: BoardState) -> None:
        self.state = state

    def reset(self) -> None:
        self.state = reset(self.state)

    def reset_stats(self) -> None:
        self.state = reset_stats(self.state)

    def is_over(self) -> bool:
        return self.state.status is not Status.PLAYING

    def play(self, cell: int) -> None:
        before = self.state
        self.state = play(before, cell, self.rng)
        if self.state is before:
            logger.debug("Ignoring move %r", cell)
            return
        if self.state.status is Status.WON:
            logger.info("%s wins on line %s", self.state.winner.name, self.state.winning_line)
        elif self.state.status is Status.DRAW:
            logger.info("Draw")

    def set_mode(self, mode) -> None:
        parsed = coerce(Mode, mode)
        if parsed is None:
            logger.debug("Ignoring unknown mode %r", mode)
            return
        self.state = set_mode(self.state, parsed)

    def set_difficulty(self, difficulty) -> None:
        parsed = coerce(Difficulty, difficulty)
        if parsed is None:
            logger.debug("Ignoring unknown difficulty %r", difficulty)
            return
        self.state = set_difficulty(self.state, parsed)

    def state_string(self) -> str:
        s = self.state
        board = as_grid(s.cells)
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(CELL_STRINGS[int(board[i, j])] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        lines.append(f"Wins: {s.stats.wins} • Losses: {s.stats.losses} • Draws: {s.stats.draws}")
        if s.status is Status.DRAW:
            lines.append("It's a Draw!")
        elif s.status is Status.WON:
            lines.append(f"{s.winner.name} wins!")
            if s.taunt:
                lines.append(s.taunt)
        else:
            lines.append(f"{s.current_mark.name} to move")
        return "\n".join(lines)
