import random

import pytest

from minigames.snakewatergun import (
    Choice,
    Outcome,
    choice_name,
    determine_winner,
    play,
    random_choice,
)


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        assert 0 <= self.value < n
        return self.value


@pytest.mark.parametrize("code,name", [
    ("s", "Snake"), ("w", "Water"), ("g", "Gun"), ("x", "Gun"),
    (Choice.SNAKE, "Snake"),
])
def test_choice_name(code, name):
    assert choice_name(code) == name


@pytest.mark.parametrize("player,computer", [("s", "w"), ("w", "g"), ("g", "s")])
def test_winning_pairs(player, computer):
    assert determine_winner(player, computer) is Outcome.PLAYER
    assert determine_winner(computer, player) is Outcome.COMPUTER


@pytest.mark.parametrize("code", ["s", "w", "g"])
def test_same_choice_draws(code):
    assert determine_winner(code, code) is Outcome.DRAW


def test_unknown_player_choice_loses():
    assert determine_winner("x", Choice.SNAKE) is Outcome.COMPUTER


def test_enum_and_char_agree():
    assert determine_winner(Choice.SNAKE, "w") is Outcome.PLAYER


@pytest.mark.parametrize("index,expected", [(0, Choice.SNAKE), (1, Choice.WATER), (2, Choice.GUN)])
def test_random_choice_mapping(index, expected):
    assert random_choice(FixedRng(index)) is expected


def test_random_choice_covers_all():
    rng = random.Random(7)
    seen = {random_choice(rng) for _ in range(200)}
    assert seen == set(Choice)


def test_play_player_wins():
    answers = iter(["Ann", " s"])
    out = []
    result = play(lambda prompt: next(answers), out.append, FixedRng(1))
    text = "".join(out)
    assert result is Outcome.PLAYER
    assert "Ann chose: Snake\n" in text
    assert "Computer chose: Water\n" in text
    assert text.endswith("\nYou win! \n")


def test_play_draw_and_loss():
    answers = iter(["Bob", "g", "Bob", "w"])
    read = lambda prompt: next(answers)
    out = []
    assert play(read, out.append, FixedRng(2)) is Outcome.DRAW
    assert "".join(out).endswith("\nIt's a draw!\n")
    out.clear()
    assert play(read, out.append, FixedRng(0)) is Outcome.COMPUTER
    assert "".join(out).endswith("\nComputer wins! \n")