"""Two-player Tic Tac Toe on a 3x3 board, played in the terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
_MARKS = ("X", "O")


class InvalidMove(ValueError):
    """Raised when a move targets a missing or occupied square."""


class Board:
    """A 3x3 board whose free squares show their position number."""

    def __init__(self):
        self.cells = [str(n) for n in range(1, 10)]

    def render(self):
        """Return the board drawn as text."""
        rows = [
            " " + " | ".join(self.cells[start:start + 3])
            for start in (0, 3, 6)
        ]
        return "\n" + "\n-----------\n".join(rows) + "\n\n"

    def place(self, position, mark):
        """Put ``mark`` on square ``position`` (1-9)."""
        if not 1 <= position <= 9 or self.cells[position - 1] in _MARKS:
            raise InvalidMove("Invalid move! Try again.")
        self.cells[position - 1] = mark

    def has_won(self, mark):
        """Whether ``mark`` fills a row, column or diagonal."""
        return any(all(self.cells[i] == mark for i in line) for line in _LINES)

    def is_full(self):
        """Whether every square holds a mark."""
        return all(cell in _MARKS for cell in self.cells)


def _write(text: str) -> None:
    sys.stdout.write(text)


def play(input_fn: Callable[[str], str] | None = None,
         output_fn: Callable[[str], object] | None = None):
    """Run a game; return the winning mark, or None on a draw."""
    read = input_fn or input
    write = output_fn or _write
    board = Board()
    current = "X"

    write("Welcome to Tic Tac Toe!\n")
    write(board.render())

    while True:
        raw = read(f"Player {current}, enter your move (1-9): ")
        try:
            position = int(raw.strip())
        except ValueError:
            position = 0
        try:
            board.place(position, current)
        except InvalidMove as exc:
            write(f"{exc}\n")
            continue

        write(board.render())
        if board.has_won(current):
            write(f"Player {current} wins!\n")
            return current
        if board.is_full():
            write("It's a draw!\n")
            return None
        current = "O" if current == "X" else "X"


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play Tic Tac Toe.")
    parser.parse_args(argv)
    try:
        play()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())