"""Text front end: reads moves such as ``b3 a4`` and prints the board after each one."""

from __future__ import annotations

import string
import sys
from typing import TextIO

from .ai import Ai
from .board import BOARD_SIZE, MoveStatus, Player, Point
from .game import Checkers, GameState

_DIGITS = "0123456789"

_STATUS_MESSAGES = {
    MoveStatus.CAPTURE_SUCCESS: "successful capture!",
    MoveStatus.MOVE_SUCCESS: "successful move!",
    MoveStatus.MOVE_FAIL: "move attempt failed!",
    MoveStatus.INVALID_MOVE: "invalid move attempt",
    MoveStatus.NOT_A_PIECE: "index does not represent a current player's piece",
}

_RESULTS = {
    GameState.END_P1_WIN: "Player one wins!! Turns: {turns}",
    GameState.END_P2_WIN: "Player two wins!! Turns: {turns}",
    GameState.END_DRAW: "Draw!! Turns: {turns}",
}


def _valid_column(ch: str) -> bool:
    return ch in _DIGITS or (ch in string.ascii_letters and ch.lower() <= "j")


def validate_input(text: str) -> bool:
    """Whether ``text`` has the form ``oo dd``, each square a letter a-j or digit, then a digit."""
    return (
        len(text) == 5
        and text[2] == " "
        and _valid_column(text[0])
        and text[1] in _DIGITS
        and _valid_column(text[3])
        and text[4] in _DIGITS
    )


def parse_position(text: str) -> Point:
    """Turn a square such as ``a6`` or ``06`` into board coordinates; row 9 is the top."""
    if len(text) < 2:
        raise ValueError(f"square {text!r} is too short")
    column, row = text[0], text[1]
    base = "a" if column in string.ascii_letters else "0"
    return Point(
        ord(column.lower()) - ord(base),
        BOARD_SIZE - 1 - (ord(row) - ord("0")),
    )


def read_line(stream: TextIO, interactive: bool = False) -> str | None:
    """Read one line, applying backspaces; ``None`` once the stream is exhausted.

    Outside interactive use, blank lines before the text are skipped.
    """
    chars: list[str] = []
    consumed = False
    at_start = True
    while True:
        ch = stream.read(1)
        if not ch:
            if not consumed:
                return None
            break
        consumed = True
        if ch in "\r\n":
            if at_start and not interactive:
                continue
            break
        at_start = False
        if ch == "\b":
            if chars:
                chars.pop()
            continue
        chars.append(ch)
    return "".join(chars)


def handle_move(game: Checkers, origin, dest) -> str:
    """Play a move and describe the outcome; a forced capture rejects any other move."""
    if game.player_shall_capture():
        future = game.copy()
        if future.make_move(origin, dest) is not MoveStatus.CAPTURE_SUCCESS:
            return "Player shall capture!!\nCapture failed!"
        game.make_move(origin, dest)
        return _STATUS_MESSAGES[MoveStatus.CAPTURE_SUCCESS]
    status = game.make_move(origin, dest)
    return _STATUS_MESSAGES.get(status, "unknown status")


def _read_move(stream: TextIO, interactive: bool, out: TextIO) -> str | None:
    while True:
        line = read_line(stream, interactive)
        if line is None or line == "exit":
            return None
        if validate_input(line):
            return line
        print("Invalid indices", file=out)


def run(game: Checkers, stream: TextIO | None = None, out: TextIO | None = None) -> None:
    """Play the game in the terminal until it ends, the input runs out or ``exit`` is read."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    interactive = stream is sys.stdin
    ai = Ai(game) if game.ai_enabled else None
    board = game.board
    try:
        while game.running:
            out.write(game.render())
            if game.current_player() is Player.ONE:
                print(
                    f"Current player: Player one, light pieces "
                    f"({board.light_man} and {board.light_king})",
                    file=out,
                )
            else:
                print(
                    f"Current player: Player two, dark pieces "
                    f"({board.dark_man} and {board.dark_king})",
                    file=out,
                )
                if ai is not None:
                    print("Thinking...", file=out)
                    move = ai.generate_sync()
                    if move is None:
                        break
                    print(handle_move(game, move.origin, move.dest), end="\n\n", file=out)
                    continue

            line = _read_move(stream, interactive, out)
            if line is None:
                return
            origin_text, dest_text = line.split(" ")
            message = handle_move(game, parse_position(origin_text), parse_position(dest_text))
            print(message, end="\n\n", file=out)

        out.write(game.render())
        result = _RESULTS.get(game.state, "Something went wrong...")
        print(result.format(turns=game.turns_total), file=out)
    finally:
        if ai is not None:
            ai.kill()