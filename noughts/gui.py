"""A windowed game against a perfect minimax opponent."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pygame

from .board import COMPUTER, PLAYER, Board, Cell, Mark
from .minimax import find_best_move

WINDOW_TITLE = "Neon Tic-Tac-Toe"
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 533
GRID_START_X = 250
GRID_START_Y = 120
CELL_WIDTH = 100
CELL_HEIGHT = 100
GRID_ROWS = 3
GRID_COLS = 3
FRAME_DELAY_MS = 16
DEFAULT_ASSETS = "assests"


def cell_at(x: int, y: int) -> Optional[Cell]:
    """The grid square under pixel ``(x, y)``, or None outside the grid."""
    if not (
        GRID_START_X <= x < GRID_START_X + CELL_WIDTH * GRID_COLS
        and GRID_START_Y <= y < GRID_START_Y + CELL_HEIGHT * GRID_ROWS
    ):
        return None
    return (y - GRID_START_Y) // CELL_HEIGHT, (x - GRID_START_X) // CELL_WIDTH


def cell_rect(row: int, col: int) -> pygame.Rect:
    """The screen rectangle a square's symbol is drawn into."""
    return pygame.Rect(
        GRID_START_X + col * CELL_WIDTH,
        GRID_START_Y + row * CELL_HEIGHT,
        CELL_WIDTH,
        CELL_HEIGHT,
    )


class GuiGame:
    """Game state driven by mouse clicks."""

    def __init__(self) -> None:
        self.board = Board()

    def reset(self) -> None:
        self.board.reset()

    def handle_click(self, x: int, y: int) -> bool:
        """Play the player's mark at a click and let the computer answer.

        Returns False if the click was outside the grid, on a taken square,
        or after the game ended.
        """
        cell = cell_at(x, y)
        if cell is None:
            print(f"Click outside grid ({x}, {y})")
            return False
        row, col = cell
        print(f"Mouse clicked at ({x}, {y})")
        print(f"Grid cell clicked: row={row}, col={col}")
        if self.board[cell] is not Mark.EMPTY or self.board.winner() is not None:
            print("Cell already occupied or game is over")
            return False

        self.board.place(row, col, PLAYER)
        if self.board.winner() is not None:
            print("Player wins!")
        elif self.board.moves_left():
            self._reply()
        return True

    def _reply(self) -> None:
        chosen = find_best_move(self.board, depth_penalty=True)
        row, col = chosen if chosen is not None else (-1, -1)
        print(f"Computer chooses position: row={row}, col={col}")
        if self.board.winner() is COMPUTER:
            print("Computer wins!")


@dataclass
class _Textures:
    background: pygame.Surface
    x: pygame.Surface
    o: pygame.Surface


def _load(path: Path, size, what: str, alpha: bool) -> pygame.Surface:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        raise RuntimeError(f"Error creating {what}: {exc}") from exc
    image = image.convert_alpha() if alpha else image.convert()
    return pygame.transform.scale(image, size)


def _load_textures(assets: Path) -> _Textures:
    cell = (CELL_WIDTH, CELL_HEIGHT)
    return _Textures(
        background=_load(
            assets / "background.png", (SCREEN_WIDTH, SCREEN_HEIGHT), "Background", False
        ),
        x=_load(assets / "X.png", cell, "X", True),
        o=_load(assets / "O.png", cell, "O", True),
    )


def _draw(screen: pygame.Surface, game: GuiGame, textures: _Textures) -> None:
    screen.fill((0, 0, 0))
    screen.blit(textures.background, (0, 0))
    symbols = {PLAYER: textures.x, COMPUTER: textures.o}
    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            symbol = symbols.get(game.board[row, col])
            if symbol is not None:
                screen.blit(symbol, cell_rect(row, col))
    pygame.display.flip()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="noughts-gui", description="Play noughts and crosses in a window."
    )
    parser.add_argument(
        "--assets",
        default=DEFAULT_ASSETS,
        help="directory holding background.png, X.png and O.png",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"Error creating window: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            textures = _load_textures(Path(args.assets))
        except RuntimeError as exc:
            print(exc, file=sys.stderr)
            return 1

        game = GuiGame()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.handle_click(*event.pos)
            _draw(screen, game, textures)
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())