"""An opponent that blocks the player's threats and otherwise takes the centre."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from .board import COMPUTER, PLAYER, Board, Cell, Mark


def _patterns() -> Iterator[Tuple[Cell, Cell, Cell]]:
    """(two squares held, square to block) in the order they are checked."""
    for row in range(3):
        yield (row, 0), (row, 1), (row, 2)
        yield (row, 1), (row, 2), (row, 0)
        yield (row, 0), (row, 2), (row, 1)
    for col in range(3):
        yield (0, col), (1, col), (2, col)
        yield (1, col), (2, col), (0, col)
        yield (0, col), (2, col), (1, col)
    yield (0, 0), (1, 1), (2, 2)
    yield (1, 1), (2, 2), (0, 0)
    yield (0, 2), (1, 1), (2, 0)
    yield (1, 1), (2, 0), (0, 2)


_BLOCK_PATTERNS = tuple(_patterns())


def block_move(board: Board) -> Optional[Cell]:
    """The square that stops the player completing a line, or None."""
    for first, second, target in _BLOCK_PATTERNS:
        if board[first] is PLAYER and board[second] is PLAYER and board[target] is Mark.EMPTY:
            return target
    return None


def find_best_move(board: Board) -> Optional[Cell]:
    """Block, else take the centre, else the first free square; return it."""
    cell = block_move(board)
    if cell is None and board[1, 1] is Mark.EMPTY:
        cell = (1, 1)
    if cell is None:
        free = board.empty_cells()
        cell = free[0] if free else None
    if cell is not None:
        board.place(cell[0], cell[1], COMPUTER)
    return cell