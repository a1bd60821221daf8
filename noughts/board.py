"""The 3x3 noughts-and-crosses board shared by every opponent."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

SIZE = 3

Cell = Tuple[int, int]


class Mark(str, Enum):
    """What a square holds."""

    EMPTY = " "
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("an empty square has no opponent")


PLAYER = Mark.X
COMPUTER = Mark.O

LINES: Tuple[Tuple[Cell, Cell, Cell], ...] = (
    *(tuple((row, col) for col in range(SIZE)) for row in range(SIZE)),
    *(tuple((row, col) for row in range(SIZE)) for col in range(SIZE)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class InvalidMove(ValueError):
    """A move outside the board or onto an occupied square."""


class Board:
    """A 3x3 grid of marks, indexed by ``(row, col)``."""

    def __init__(self) -> None:
        self._cells = [[Mark.EMPTY] * SIZE for _ in range(SIZE)]

    @staticmethod
    def _check(pos: Cell) -> Cell:
        row, col = pos
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMove(f"square ({row}, {col}) is off the board")
        return row, col

    def __getitem__(self, pos: Cell) -> Mark:
        row, col = self._check(pos)
        return self._cells[row][col]

    def place(self, row: int, col: int, mark: Mark) -> None:
        """Put ``mark`` on an empty square."""
        row, col = self._check((row, col))
        if mark is Mark.EMPTY:
            raise ValueError("use clear() to empty a square")
        if self._cells[row][col] is not Mark.EMPTY:
            raise InvalidMove(f"square ({row}, {col}) is already taken")
        self._cells[row][col] = Mark(mark)

    def clear(self, row: int, col: int) -> None:
        """Empty a square."""
        row, col = self._check((row, col))
        self._cells[row][col] = Mark.EMPTY

    def reset(self) -> None:
        """Empty every square."""
        for row in self._cells:
            row[:] = [Mark.EMPTY] * SIZE

    def empty_cells(self) -> list[Cell]:
        """Free squares in row-major order."""
        return [
            (row, col)
            for row, marks in enumerate(self._cells)
            for col, mark in enumerate(marks)
            if mark is Mark.EMPTY
        ]

    def moves_left(self) -> bool:
        return any(Mark.EMPTY in row for row in self._cells)

    def has_won(self, mark: Mark) -> bool:
        """True if ``mark`` fills a row, column or diagonal."""
        if mark is Mark.EMPTY:
            raise ValueError("only X or O can win")
        return any(all(self[cell] is mark for cell in line) for line in LINES)

    def winner(self) -> Optional[Mark]:
        """The mark of the first complete line found, or None."""
        for line in LINES:
            first = self[line[0]]
            if first is not Mark.EMPTY and all(self[cell] is first for cell in line):
                return first
        return None

    def render(self) -> str:
        """The board as text, framed by blank lines."""
        rows = ("|".join(f" {mark.value} " for mark in marks) for marks in self._cells)
        return "\n" + "\n---+---+---\n".join(rows) + "\n\n"

    __str__ = render