"""Play noughts and crosses against the computer in a terminal."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, TextIO, Tuple

from . import blocking, heuristic, minimax
from .board import COMPUTER, PLAYER, Board, Mark
from .magic import MagicSquareGame

TITLE = "Tic-Tac-Toe: You (X) vs Computer (O)"
MAGIC_TITLE = "Tic-Tac-Toe (Magic Square): You (X) vs Computer (O)"
PROMPT = "Enter your move (row and column: 0-2 0-2): "
INVALID = "Invalid move, try again."


class Opponent(str, Enum):
    """The computer's strategy."""

    MINIMAX = "minimax"
    BLOCKING = "blocking"
    HEURISTIC = "heuristic"
    MAGIC = "magic"


class Outcome(str, Enum):
    """How a game ended, with the line announcing it."""

    PLAYER = "You win!"
    COMPUTER = "Computer wins!"
    DRAW = "It's a draw!"


@dataclass
class _Match:
    title: str
    board: Board
    move: Callable[[int, int], object]
    reply: Callable[[], object]
    has_won: Callable[[Mark], bool]


def _board_match(strategy: Callable[[Board], object]) -> _Match:
    board = Board()
    return _Match(
        title=TITLE,
        board=board,
        move=lambda row, col: board.place(row, col, PLAYER),
        reply=lambda: strategy(board),
        has_won=board.has_won,
    )


def _new_match(opponent: Opponent) -> _Match:
    if opponent is Opponent.MAGIC:
        game = MagicSquareGame()
        return _Match(
            title=MAGIC_TITLE,
            board=game.board,
            move=game.play_cell,
            reply=game.find_best_move,
            has_won=game.has_won,
        )
    strategies = {
        Opponent.MINIMAX: minimax.find_best_move,
        Opponent.BLOCKING: blocking.find_best_move,
        Opponent.HEURISTIC: heuristic.find_best_move,
    }
    return _board_match(strategies[opponent])


def _parse(line: str) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"expected two numbers, got {line!r}")
    return int(parts[0]), int(parts[1])


def play(opponent, lines: Iterable[str], out: TextIO) -> Outcome:
    """Run one game, reading the player's moves from ``lines``.

    Raises EOFError if the input runs out before the game is decided.
    """
    match = _new_match(Opponent(opponent))
    moves = iter(lines)
    out.write(match.title + "\n")
    out.write(match.board.render())

    while True:
        while True:
            out.write(PROMPT)
            line = next(moves, None)
            if line is None:
                raise EOFError("input ended before the game was decided")
            try:
                match.move(*_parse(line))
            except ValueError:
                out.write(INVALID + "\n")
            else:
                break
        out.write(match.board.render())
        if match.has_won(PLAYER):
            outcome = Outcome.PLAYER
            break
        if not match.board.moves_left():
            outcome = Outcome.DRAW
            break

        match.reply()
        out.write(match.board.render())
        if match.has_won(COMPUTER):
            outcome = Outcome.COMPUTER
            break
        if not match.board.moves_left():
            outcome = Outcome.DRAW
            break

    out.write(outcome.value + "\n")
    return outcome


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="noughts", description="Play noughts and crosses against the computer."
    )
    parser.add_argument(
        "--opponent",
        choices=[opponent.value for opponent in Opponent],
        default=Opponent.MINIMAX.value,
        help="the computer's strategy (default: minimax)",
    )
    args = parser.parse_args(argv)
    try:
        play(args.opponent, sys.stdin, sys.stdout)
    except EOFError:
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())