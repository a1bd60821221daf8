"""An opponent that wins if it can, blocks if it must, and otherwise guesses."""

from __future__ import annotations

import random
from typing import Optional

from .board import COMPUTER, PLAYER, Board, Cell, Mark


def winning_move(board: Board, mark: Mark) -> Optional[Cell]:
    """The first free square that completes a line for ``mark``, or None."""
    for row, col in board.empty_cells():
        board.place(row, col, mark)
        try:
            won = board.has_won(mark)
        finally:
            board.clear(row, col)
        if won:
            return row, col
    return None


def random_move(board: Board, rng: Optional[random.Random] = None) -> Optional[Cell]:
    """A free square chosen at random, or None if the board is full."""
    free = board.empty_cells()
    if not free:
        return None
    chooser = random if rng is None else rng
    return chooser.choice(free)


def find_best_move(board: Board, rng: Optional[random.Random] = None) -> Optional[Cell]:
    """Win, else block the player, else play at random; return the square."""
    cell = winning_move(board, COMPUTER)
    if cell is None:
        cell = winning_move(board, PLAYER)
    if cell is None:
        cell = random_move(board, rng)
    if cell is not None:
        board.place(cell[0], cell[1], COMPUTER)
    return cell