import pytest

from minigames.tictactoe import Board, InvalidMove, play


def scripted(*moves):
    it = iter(moves)
    return lambda prompt: next(it)


def test_fresh_board_renders_numbers():
    expected = "\n 1 | 2 | 3\n-----------\n 4 | 5 | 6\n-----------\n 7 | 8 | 9\n\n"
    assert Board().render() == expected


def test_place_shows_mark_in_render():
    board = Board()
    board.place(5, "X")
    assert " 4 | X | 6" in board.render()


@pytest.mark.parametrize("position", [0, 10, -3])
def test_place_out_of_range_raises(position):
    with pytest.raises(InvalidMove, match="Invalid move! Try again."):
        Board().place(position, "X")


def test_place_on_occupied_square_raises():
    board = Board()
    board.place(1, "O")
    with pytest.raises(InvalidMove):
        board.place(1, "X")


@pytest.mark.parametrize("line", [
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    (1, 5, 9), (3, 5, 7),
])
def test_has_won_on_every_line(line):
    board = Board()
    for pos in line:
        board.place(pos, "O")
    assert board.has_won("O")
    assert not board.has_won("X")


def test_is_full_only_when_all_marked():
    board = Board()
    for pos in range(1, 9):
        board.place(pos, "X" if pos % 2 else "O")
    assert not board.is_full()
    board.place(9, "X")
    assert board.is_full()


def test_play_x_wins_top_row():
    out = []
    winner = play(scripted("1", "4", "2", "5", "3"), out.append)
    text = "".join(out)
    assert winner == "X"
    assert text.startswith("Welcome to Tic Tac Toe!\n")
    assert text.endswith("Player X wins!\n")


def test_play_rejects_bad_input_and_retries():
    out = []
    prompts = []
    moves = iter(["abc", "1", "1", "4", "2", "5", "7", "6"])

    def read(prompt):
        prompts.append(prompt)
        return next(moves)

    winner = play(read, out.append)
    assert winner == "O"
    assert "".join(out).count("Invalid move! Try again.\n") == 2
    assert prompts[1] == "Player X, enter your move (1-9): "
    assert prompts[3] == "Player O, enter your move (1-9): "


def test_play_draw():
    out = []
    result = play(scripted("1", "2", "3", "5", "4", "6", "8", "7", "9"), out.append)
    assert result is None
    assert "".join(out).endswith("It's a draw!\n")