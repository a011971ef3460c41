"""Turn handling and win detection on top of the checkers board."""

from __future__ import annotations

from enum import Enum

from .board import Board, MoveStatus, PieceMoves, Player, Point

_BRIGHT_WHITE = "\x1b[1;37m"
_BLACK = "\x1b[0;30m"
_RESET = "\x1b[0m"


class GameOverError(RuntimeError):
    """Raised when a move is attempted after the game has finished."""


class GameState(Enum):
    """Whose turn it is, or how the game ended."""

    P1_TURN = 0
    P2_TURN = 1
    END_P1_WIN = 2
    END_P2_WIN = 3
    END_DRAW = 4


_TURN_PLAYERS = {
    GameState.P1_TURN: Player.ONE,
    GameState.P2_TURN: Player.TWO,
}

_WINNERS = {
    GameState.END_P1_WIN: Player.ONE,
    GameState.END_P2_WIN: Player.TWO,
}

_WIN_STATE = {
    Player.ONE: GameState.END_P1_WIN,
    Player.TWO: GameState.END_P2_WIN,
}

_TURN_STATE = {
    Player.ONE: GameState.P1_TURN,
    Player.TWO: GameState.P2_TURN,
}


class Checkers:
    """A game of international checkers between two players."""

    def __init__(self, force_capture=False, enable_ai=False) -> None:
        self.force_capture = bool(force_capture)
        self.ai_enabled = bool(enable_ai)
        self.running = True
        self.state = GameState.P1_TURN
        self.turns_total = 0
        self.board = Board()

    def copy(self) -> "Checkers":
        other = Checkers(self.force_capture, self.ai_enabled)
        other.running = self.running
        other.state = self.state
        other.turns_total = self.turns_total
        other.board = self.board.copy()
        return other

    def make_move(self, origin, dest) -> MoveStatus:
        """Play a move for the current player and advance the game state.

        A capture that leaves the same piece able to capture again keeps the
        turn with the mover when capturing is forced.
        """
        player = self.current_player()
        if player is None:
            raise GameOverError("the game is over")
        enemy = player.opponent()
        dest = Point(*dest)

        status = self.board.try_move_or_capture(player, origin, dest)
        if status is MoveStatus.CAPTURE_SUCCESS:
            self.turns_total += 1
            if self.board.remaining(enemy) == 0:
                self.state = _WIN_STATE[player]
                self.running = False
                self.board.try_turn_king(dest)
            elif self.force_capture and self.board.piece_can_capture(player, dest):
                pass
            else:
                self.state = _TURN_STATE[enemy]
                self.board.try_turn_king(dest)
        elif status is MoveStatus.MOVE_SUCCESS:
            self.turns_total += 1
            self.state = _TURN_STATE[enemy]
            self.board.try_turn_king(dest)
        return status

    def current_player(self) -> Player | None:
        """The player to move, or ``None`` once the game has ended."""
        if not self.running:
            return None
        return _TURN_PLAYERS.get(self.state)

    def winner(self) -> Player | None:
        """The winning player, or ``None`` while running or on a draw."""
        if self.running:
            return None
        return _WINNERS.get(self.state)

    def player_shall_capture(self) -> bool:
        """Whether forced capture obliges the current player to capture."""
        player = self.current_player()
        if player is None or not self.force_capture:
            return False
        return self.board.player_can_capture(player)

    def available_moves(self) -> list[PieceMoves]:
        """Moves open to the current player; empty once the game has ended."""
        player = self.current_player()
        if player is None:
            return []
        return self.board.moves_for_player(player, self.force_capture)

    def render(self) -> str:
        """Coloured terminal view of the board with coordinates and turn count."""
        board = self.board
        light = (board.light_man, board.light_king)
        dark = (board.dark_man, board.dark_king)
        lines = [
            f"{_BRIGHT_WHITE}Light pieces:{_RESET} {board.remaining_light}",
            f"{_BLACK}Dark pieces:{_RESET} {board.remaining_dark}",
        ]
        for y, row in enumerate(board.grid):
            cells = []
            for square in row:
                if square in light:
                    cells.append(f"{_BRIGHT_WHITE}{square}{_RESET} ")
                elif square in dark:
                    cells.append(f"{_BLACK}{square}{_RESET} ")
                else:
                    cells.append(f"{square} ")
            lines.append(f"{board.size - 1 - y}  " + "".join(cells))

        letters = "".join(f"{chr(ord('A') + i)} " for i in range(board.size))
        player = self.current_player()
        if player is Player.ONE:
            colour = _BRIGHT_WHITE
        elif player is Player.TWO:
            colour = _BLACK
        else:
            colour = ""
        lines.append(f"   {letters}\t{colour}Turn: {self.turns_total}{_RESET}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()