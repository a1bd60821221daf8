"""Perfect play by exhaustive minimax search."""

from __future__ import annotations

import math
from typing import Optional

from .board import COMPUTER, PLAYER, Board, Cell

WIN_SCORE = 10


def evaluate(board: Board) -> int:
    """+10 if the computer has a line, -10 if the player has, else 0."""
    winner = board.winner()
    if winner is COMPUTER:
        return WIN_SCORE
    if winner is PLAYER:
        return -WIN_SCORE
    return 0


def _score_after(
    board: Board, cell: Cell, mark, depth: int, maximizing: bool, depth_penalty: bool
) -> int:
    board.place(cell[0], cell[1], mark)
    try:
        return minimax(board, depth, maximizing, depth_penalty)
    finally:
        board.clear(*cell)


def minimax(
    board: Board, depth: int = 0, maximizing: bool = True, depth_penalty: bool = False
) -> int:
    """Value of ``board`` for the computer with both sides playing perfectly.

    With ``depth_penalty`` a win is worth less the later it comes, so the
    search prefers quick wins and slow losses.
    """
    score = evaluate(board)
    if score:
        if depth_penalty:
            return score - depth if score > 0 else score + depth
        return score
    if not board.moves_left():
        return 0
    mark = COMPUTER if maximizing else PLAYER
    choose = max if maximizing else min
    return choose(
        _score_after(board, cell, mark, depth + 1, not maximizing, depth_penalty)
        for cell in board.empty_cells()
    )


def find_best_move(board: Board, depth_penalty: bool = False) -> Optional[Cell]:
    """Place the computer's best mark and return its square, or None if full."""
    best_cell: Optional[Cell] = None
    best_value = -math.inf
    for cell in board.empty_cells():
        value = _score_after(board, cell, COMPUTER, 0, False, depth_penalty)
        if value > best_value:
            best_cell, best_value = cell, value
    if best_cell is not None:
        board.place(best_cell[0], best_cell[1], COMPUTER)
    return best_cell