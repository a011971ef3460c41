import io

import pytest

from intcheckers.board import Point
from intcheckers.game import Checkers, GameState
from intcheckers.terminal_ui import (
    handle_move,
    parse_position,
    read_line,
    run,
    validate_input,
)


def _sparse_game(force_capture=True):
    game = Checkers(force_capture=force_capture, enable_ai=False)
    board = game.board
    board.grid = [[board.blank] * board.size for _ in range(board.size)]
    board.grid[5][2] = board.light_man
    board.grid[4][3] = board.dark_man
    return game


@pytest.mark.parametrize("text", ["a6 b5", "A6 B5", "66 55", "j0 J9", "06 a5"])
def test_validate_accepts(text):
    assert validate_input(text) is True


@pytest.mark.parametrize(
    "text", ["k6 a5", "a6b5", "a6 b5 ", "a  b5", "ab cd", "", "a6-b5", "é6 b5"]
)
def test_validate_rejects(text):
    assert validate_input(text) is False


def test_parse_top_left_corner():
    assert parse_position("a9") == Point(0, 0)


@pytest.mark.parametrize("letter, digit", [("a", "0"), ("c", "2"), ("j", "9")])
def test_letter_and_digit_columns_agree(letter, digit):
    for row in "0369":
        assert parse_position(letter + row) == parse_position(digit + row)
        assert parse_position(letter.upper() + row) == parse_position(letter + row)


def test_parse_rows_descend():
    ys = [parse_position(f"a{row}").y for row in "9876543210"]
    assert ys == list(range(10))


def test_parse_too_short():
    with pytest.raises(ValueError):
        parse_position("a")


def test_read_line_skips_leading_blank_lines():
    stream = io.StringIO("\n\r\na6 b5\nexit\n")
    assert read_line(stream) == "a6 b5"
    assert read_line(stream) == "exit"
    assert read_line(stream) is None


def test_read_line_interactive_keeps_blank_line():
    stream = io.StringIO("\nabc")
    assert read_line(stream, interactive=True) == ""
    assert read_line(stream, interactive=True) == "abc"


def test_read_line_applies_backspace():
    assert read_line(io.StringIO("ab\bc\n")) == "ac"
    assert read_line(io.StringIO("\b\bx\n")) == "x"


def test_read_line_empty_stream():
    assert read_line(io.StringIO("")) is None


def test_handle_simple_move():
    game = Checkers()
    message = handle_move(game, Point(1, 6), Point(0, 5))
    assert message == "successful move!"
    assert game.state is GameState.P2_TURN
    assert game.board.grid[5][0] == game.board.light_man


def test_handle_move_from_empty_square():
    game = Checkers()
    message = handle_move(game, Point(0, 6), Point(1, 5))
    assert message == "index does not represent a current player's piece"
    assert game.state is GameState.P1_TURN


def test_handle_forced_capture_rejects_plain_move():
    game = _sparse_game()
    message = handle_move(game, Point(2, 5), Point(1, 4))
    assert message == "Player shall capture!!\nCapture failed!"
    assert game.board.grid[5][2] == game.board.light_man
    assert game.turns_total == 0


def test_handle_forced_capture_accepts_capture():
    game = _sparse_game()
    remaining = game.board.remaining_dark
    message = handle_move(game, Point(2, 5), Point(4, 3))
    assert message == "successful capture!"
    assert game.board.grid[4][3] == game.board.blank
    assert game.board.remaining_dark == remaining - 1


def test_run_exit_prints_prompt():
    out = io.StringIO()
    game = Checkers()
    run(game, io.StringIO("exit\n"), out)
    assert "Current player: Player one, light pieces (M and K)" in out.getvalue()
    assert game.running


def test_run_reports_invalid_input():
    out = io.StringIO()
    run(Checkers(), io.StringIO("zz\nexit\n"), out)
    assert "Invalid indices" in out.getvalue()


def test_run_plays_move_then_switches_player():
    out = io.StringIO()
    game = Checkers()
    run(game, io.StringIO("b3 a4\nexit\n"), out)
    text = out.getvalue()
    assert "successful move!" in text
    assert "Current player: Player two, dark pieces (m and k)" in text
    assert game.state is GameState.P2_TURN


def test_run_ends_with_winner():
    game = _sparse_game()
    game.board.remaining_dark = 1
    out = io.StringIO()
    run(game, io.StringIO("c4 e6\n"), out)
    assert game.state is GameState.END_P1_WIN
    assert out.getvalue().rstrip().endswith(f"Player one wins!! Turns: {game.turns_total}")


def test_run_stops_at_end_of_input():
    out = io.StringIO()
    game = Checkers()
    run(game, io.StringIO(""), out)
    assert "wins" not in out.getvalue()
    assert game.turns_total == 0