"""
Exhaustive minimax search for the 3x3 board.

Leaf scores at search depth d:
    AI line     ->  WIN_SCORE - d
    human line  ->  d - WIN_SCORE
    full board  ->  0

The search uses alpha-beta pruning. Values that reach the root are exact,
so the chosen move is the same one plain minimax would pick: the lowest
cell index among the moves with the best score.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from classic_games.core.types import Mark
from classic_games.games.game_rules import empty_cells, winner_of

WIN_SCORE = 10


def terminal_score(board: Sequence[int], depth: int, ai_mark: int) -> Optional[int]:
    """Score of a finished position, or None while the game is open."""
    winner = winner_of(board)
    if winner == ai_mark:
        return WIN_SCORE - depth
    if winner != 0:
        return depth - WIN_SCORE
    if 0 not in board:
        return 0
    return None


def minimax(
    board: List[int],
    depth: int,
    maximizing: bool,
    ai_mark: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
) -> float:
    """
    Value of ``board`` with the AI to move when ``maximizing``.

    ``board`` is mutated and restored (apply/undo) so no copies are made.
    """
    score = terminal_score(board, depth, ai_mark)
    if score is not None:
        return score

    human_mark = 3 - ai_mark
    if maximizing:
        best = -math.inf
        for move in empty_cells(board):
            board[move] = ai_mark
            best = max(best, minimax(board, depth + 1, False, ai_mark, alpha, beta))
            board[move] = 0
            alpha = max(alpha, best)
            if alpha >= beta:
                break
        return best

    best = math.inf
    for move in empty_cells(board):
        board[move] = human_mark
        best = min(best, minimax(board, depth + 1, True, ai_mark, alpha, beta))
        board[move] = 0
        beta = min(beta, best)
        if alpha >= beta:
            break
    return best


def best_move(cells: Sequence[int], ai_mark: int = Mark.O) -> int:
    """
    Optimal move for ``ai_mark``.

    Candidates are tried in increasing index order and only a strictly
    better score replaces the current pick.

    Raises:
        ValueError: if the board has no empty cell.
    """
    board = [int(v) for v in cells]
    moves = empty_cells(board)
    if not moves:
        raise ValueError("No moves left on a full board")

    ai_mark = int(ai_mark)
    best_score = -math.inf
    choice = moves[0]
    for move in moves:
        board[move] = ai_mark
        # alpha = best_score: anything not strictly better comes back as a bound <= best_score
        score = minimax(board, 0, False, ai_mark, alpha=best_score)
        board[move] = 0
        if score > best_score:
            best_score = score
            choice = move
    return choice
