"""Snake-Water-Gun, a one-round game against the computer."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable
from enum import Enum


class Choice(str, Enum):
    SNAKE = "s"
    WATER = "w"
    GUN = "g"


class Outcome(Enum):
    DRAW = 0
    PLAYER = 1
    COMPUTER = -1


_NAMES = {"s": "Snake", "w": "Water"}
_BEATS = {("s", "w"), ("w", "g"), ("g", "s")}


def _code(value) -> str:
    return value.value if isinstance(value, Choice) else value


def choice_name(code):
    """Name of a choice; anything unrecognised counts as Gun."""
    return _NAMES.get(_code(code), "Gun")


def random_choice(rng=None):
    """Pick the computer's choice."""
    rng = rng or random.Random()
    return (Choice.SNAKE, Choice.WATER, Choice.GUN)[rng.randrange(3)]


def determine_winner(player, computer):
    """Decide the round from the player's point of view."""
    player, computer = _code(player), _code(computer)
    if player == computer:
        return Outcome.DRAW
    if (player, computer) in _BEATS:
        return Outcome.PLAYER
    return Outcome.COMPUTER


def _write(text: str) -> None:
    sys.stdout.write(text)


def play(input_fn: Callable[[str], str] | None = None,
         output_fn: Callable[[str], object] | None = None,
         rng=None):
    """Play one round and return its Outcome."""
    read = input_fn or input
    write = output_fn or _write

    write("Welcome to Snake-Water-Gun Game!\n")
    name = read("Enter your name: ").rstrip("\n")
    write("\nChoose:\n's' for Snake\n'w' for Water\n'g' for Gun\n")
    player = read("Enter your choice: ").strip()[:1]

    computer = random_choice(rng)
    write(f"\n{name} chose: {choice_name(player)}\n")
    write(f"Computer chose: {choice_name(computer)}\n")

    result = determine_winner(player, computer)
    if result is Outcome.DRAW:
        write("\nIt's a draw!\n")
    elif result is Outcome.PLAYER:
        write("\nYou win! \n")
    else:
        write("\nComputer wins! \n")
    return result


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="snakewatergun", description="Play Snake-Water-Gun.")
    parser.parse_args(argv)
    try:
        play()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())