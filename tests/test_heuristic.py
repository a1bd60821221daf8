import random

import pytest

from noughts.board import COMPUTER, PLAYER, Board, Mark
from noughts.heuristic import find_best_move, random_move, winning_move


def make(layout):
    board = Board()
    for row, text in enumerate(layout):
        for col, ch in enumerate(text):
            if ch != ".":
                board.place(row, col, Mark(ch))
    return board


def test_winning_move_found_and_board_unchanged():
    board = make(["X.X", ".O.", "..."])
    assert winning_move(board, PLAYER) == (0, 1)
    assert board[0, 1] is Mark.EMPTY
    assert winning_move(board, COMPUTER) is None


def test_random_move_is_free_square():
    board = make(["XO.", ".X.", "O.."])
    rng = random.Random(1)
    for _ in range(20):
        assert random_move(board, rng) in board.empty_cells()


def test_random_move_is_reproducible():
    board = Board()
    first = random_move(board, random.Random(7))
    second = random_move(board, random.Random(7))
    assert first == second


def test_random_move_on_full_board():
    assert random_move(make(["XOX", "XOO", "OXX"]), random.Random(0)) is None


def test_win_preferred_over_block():
    board = make(["OO.", "XX.", "..."])
    assert find_best_move(board, random.Random(0)) == (0, 2)
    assert board.has_won(COMPUTER)


def test_blocks_when_cannot_win():
    board = make(["XX.", ".O.", "..."])
    assert find_best_move(board, random.Random(0)) == (0, 2)
    assert board[0, 2] is COMPUTER


@pytest.mark.parametrize("seed", range(5))
def test_random_fallback_fills_one_square(seed):
    board = make(["X..", "...", "..."])
    free_before = set(board.empty_cells())
    cell = find_best_move(board, random.Random(seed))
    assert cell in free_before
    assert set(board.empty_cells()) == free_before - {cell}
    assert board[cell] is COMPUTER


def test_full_board_returns_none():
    assert find_best_move(make(["XOX", "XOO", "OXX"])) is None