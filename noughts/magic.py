"""Noughts and crosses played as picking numbers from a 3x3 magic square.

Three squares form a line exactly when their magic values sum to 15.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Optional

from .board import COMPUTER, PLAYER, Board, Cell, InvalidMove, Mark

MAGIC_SQUARE = (
    (8, 1, 6),
    (3, 5, 7),
    (4, 9, 2),
)
LINE_SUM = 15
CENTRE = 5
FALLBACK_ORDER = (2, 4, 6, 8, 1, 3, 7, 9)

_COORDINATES = {
    value: (row, col)
    for row, values in enumerate(MAGIC_SQUARE)
    for col, value in enumerate(values)
}


def magic_value(row: int, col: int) -> int:
    """The magic-square number of a square."""
    if not (0 <= row < 3 and 0 <= col < 3):
        raise InvalidMove(f"square ({row}, {col}) is off the board")
    return MAGIC_SQUARE[row][col]


def coordinates(value: int) -> Cell:
    """The square that holds magic number ``value``."""
    try:
        return _COORDINATES[value]
    except KeyError:
        raise ValueError(f"{value!r} is not a magic-square number") from None


def is_winning_set(values: Iterable[int]) -> bool:
    """True if any three of ``values`` sum to 15."""
    return any(sum(triple) == LINE_SUM for triple in combinations(values, 3))


class MagicSquareGame:
    """A game tracking each side's picked numbers alongside the board."""

    def __init__(self) -> None:
        self.board = Board()
        self.values: dict[Mark, list[int]] = {PLAYER: [], COMPUTER: []}

    def is_cell_free(self, value: int) -> bool:
        return self.board[coordinates(value)] is Mark.EMPTY

    def make_move(self, mark: Mark, value: int) -> None:
        """Claim the square holding ``value`` for ``mark``."""
        if mark not in self.values:
            raise ValueError("only X or O can move")
        row, col = coordinates(value)
        self.board.place(row, col, mark)
        self.values[mark].append(value)

    def play_cell(self, row: int, col: int) -> int:
        """The player's move by square; returns the number claimed."""
        value = magic_value(row, col)
        self.make_move(PLAYER, value)
        return value

    def find_best_move(self) -> Optional[int]:
        """Win, else block, else centre, else a fixed order; return the number."""
        for mark in (COMPUTER, PLAYER):
            for first, second in combinations(self.values[mark], 2):
                third = LINE_SUM - first - second
                if 1 <= third <= 9 and self.is_cell_free(third):
                    self.make_move(COMPUTER, third)
                    return third
        for value in (CENTRE, *FALLBACK_ORDER):
            if self.is_cell_free(value):
                self.make_move(COMPUTER, value)
                return value
        return None

    def has_won(self, mark: Mark) -> bool:
        if mark not in self.values:
            raise ValueError("only X or O can win")
        return is_winning_set(self.values[mark])