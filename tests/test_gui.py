import pygame
import pytest

from noughts.board import COMPUTER, PLAYER, Mark
from noughts.gui import (
    CELL_HEIGHT,
    CELL_WIDTH,
    GRID_START_X,
    GRID_START_Y,
    GuiGame,
    cell_at,
    cell_rect,
)


def _centre(row, col):
    return cell_rect(row, col).center


def _count(game, mark):
    return sum(game.board[r, c] is mark for r in range(3) for c in range(3))


def test_cell_at_grid_corners():
    assert cell_at(GRID_START_X, GRID_START_Y) == (0, 0)
    assert cell_at(GRID_START_X + 3 * CELL_WIDTH - 1, GRID_START_Y + 3 * CELL_HEIGHT - 1) == (2, 2)


@pytest.mark.parametrize(
    "x, y",
    [
        (GRID_START_X - 1, GRID_START_Y),
        (GRID_START_X, GRID_START_Y - 1),
        (GRID_START_X + 3 * CELL_WIDTH, GRID_START_Y),
        (GRID_START_X, GRID_START_Y + 3 * CELL_HEIGHT),
    ],
)
def test_cell_at_outside_grid(x, y):
    assert cell_at(x, y) is None


def test_cell_rect_first_square():
    assert cell_rect(0, 0) == pygame.Rect(GRID_START_X, GRID_START_Y, CELL_WIDTH, CELL_HEIGHT)


@pytest.mark.parametrize("row", range(3))
@pytest.mark.parametrize("col", range(3))
def test_cell_rect_round_trip(row, col):
    rect = cell_rect(row, col)
    assert cell_at(rect.left, rect.top) == (row, col)
    assert cell_at(rect.right - 1, rect.bottom - 1) == (row, col)


def test_click_outside_grid_changes_nothing(capsys):
    game = GuiGame()
    assert game.handle_click(0, 0) is False
    assert game.board.empty_cells() == [(r, c) for r in range(3) for c in range(3)]
    assert "Click outside grid (0, 0)" in capsys.readouterr().out


def test_click_places_mark_and_computer_answers():
    game = GuiGame()
    assert game.handle_click(*_centre(0, 0)) is True
    assert game.board[0, 0] is PLAYER
    assert _count(game, PLAYER) == 1
    assert _count(game, COMPUTER) == 1


def test_click_on_taken_square_is_rejected(capsys):
    game = GuiGame()
    game.handle_click(*_centre(1, 1))
    assert game.handle_click(*_centre(1, 1)) is False
    assert _count(game, PLAYER) == 1
    assert "Cell already occupied or game is over" in capsys.readouterr().out


def test_reset_empties_board():
    game = GuiGame()
    game.handle_click(*_centre(2, 2))
    game.reset()
    assert len(game.board.empty_cells()) == 9
    assert game.board[2, 2] is Mark.EMPTY


def test_player_never_beats_computer():
    game = GuiGame()
    for _ in range(2):
        for row in range(3):
            for col in range(3):
                game.handle_click(*_centre(row, col))
    assert game.board.winner() is not PLAYER
    assert game.board.winner() is COMPUTER or not game.board.moves_left()


def test_clicks_after_game_over_are_rejected():
    game = GuiGame()
    for _ in range(2):
        for row in range(3):
            for col in range(3):
                game.handle_click(*_centre(row, col))
    free = game.board.empty_cells()
    for row, col in free:
        assert game.handle_click(*_centre(row, col)) is False
    assert game.board.empty_cells() == free