"""Board representation and move rules for 10x10 international checkers."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

BOARD_SIZE = 10
PIECES_PER_PLAYER = (BOARD_SIZE // 2) * ((BOARD_SIZE - 2) // 2)


class Point(NamedTuple):
    """A square on the board; ``y`` grows downwards from the dark side."""

    x: int
    y: int


_DIAGONALS = (Point(-1, -1), Point(-1, 1), Point(1, -1), Point(1, 1))


def _step(pos: Point, vec: Point, times: int = 1) -> Point:
    return Point(pos.x + vec.x * times, pos.y + vec.y * times)


class Player(IntEnum):
    """Player one owns the light pieces, player two the dark ones."""

    ONE = 0
    TWO = 1

    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class MoveStatus(IntEnum):
    """Outcome of an attempted move."""

    CAPTURE_SUCCESS = 2
    MOVE_SUCCESS = 1
    MOVE_FAIL = -2
    INVALID_MOVE = -3
    NOT_A_PIECE = -5


@dataclass(frozen=True)
class PieceMoves:
    """The squares a single piece may move to."""

    origin: Point
    targets: tuple[Point, ...]


class Board:
    """The grid of squares together with the count of pieces left per side."""

    light_man = "M"
    light_king = "K"
    dark_man = "m"
    dark_king = "k"
    blank = "."

    def __init__(self) -> None:
        self.size = BOARD_SIZE
        self.remaining_light = PIECES_PER_PLAYER
        self.remaining_dark = PIECES_PER_PLAYER
        home_rows = (self.size - 2) // 2
        self.grid: list[list[str]] = []
        for y in range(self.size):
            if y < home_rows:
                piece = self.dark_man
            elif y >= home_rows + 2:
                piece = self.light_man
            else:
                piece = None
            self.grid.append(
                [piece if piece and (x + y) % 2 == 1 else self.blank for x in range(self.size)]
            )

    def copy(self) -> "Board":
        other = _copy.copy(self)
        other.grid = [row[:] for row in self.grid]
        return other

    def is_on_board(self, pos) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def _at(self, pos: Point) -> str:
        return self.grid[pos.y][pos.x]

    def _put(self, pos: Point, piece: str) -> None:
        self.grid[pos.y][pos.x] = piece

    def _sides(self, player: Player) -> tuple[str, str, str, str, int]:
        """Own man, own king, enemy man, enemy king and the forbidden y direction."""
        if player is Player.ONE:
            return self.light_man, self.light_king, self.dark_man, self.dark_king, 1
        return self.dark_man, self.dark_king, self.light_man, self.light_king, -1

    def _lose_piece(self, player: Player) -> None:
        if player is Player.ONE:
            self.remaining_light -= 1
        else:
            self.remaining_dark -= 1

    def _can_capture(self, enemies: tuple[str, str], enemy_pos: Point, vec: Point) -> bool:
        landing = _step(enemy_pos, vec)
        return (
            self._at(enemy_pos) in enemies
            and self.is_on_board(landing)
            and self._at(landing) == self.blank
        )

    def try_move_or_capture(self, player, piece_pos, new_pos) -> MoveStatus:
        """Move the player's piece, capturing at most one enemy on the way."""
        player = Player(player)
        piece_pos, new_pos = Point(*piece_pos), Point(*new_pos)
        if not self.is_on_board(new_pos) or not self.is_on_board(piece_pos):
            return MoveStatus.INVALID_MOVE
        own_man, own_king, enemy_man, enemy_king, illegal_y = self._sides(player)
        own, enemies = (own_man, own_king), (enemy_man, enemy_king)

        dx, dy = new_pos.x - piece_pos.x, new_pos.y - piece_pos.y
        vec = Point(1 if dx > 0 else -1, 1 if dy > 0 else -1)
        piece = self._at(piece_pos)

        if piece == own_king:
            if abs(dx) != abs(dy):
                return MoveStatus.INVALID_MOVE
            enemy_at: Point | None = None
            test = piece_pos
            while test.x != new_pos.x and test.y != new_pos.y:
                following = _step(test, vec)
                square = self._at(following)
                if square in own:
                    return MoveStatus.MOVE_FAIL
                if square in enemies:
                    if enemy_at is not None:
                        return MoveStatus.MOVE_FAIL
                    enemy_at = following
                test = following
            if enemy_at == test:
                return MoveStatus.MOVE_FAIL
            if enemy_at is not None:
                self._lose_piece(player.opponent())
                self._put(enemy_at, self.blank)
            self._put(piece_pos, self.blank)
            self._put(new_pos, own_king)
            return MoveStatus.CAPTURE_SUCCESS if enemy_at is not None else MoveStatus.MOVE_SUCCESS

        if piece == own_man:
            if (abs(dx), abs(dy)) != (1, 1):
                if abs(dx) == 2 and abs(dy) == 2:
                    jumped = _step(piece_pos, vec)
                    if self._at(jumped) in enemies:
                        self._lose_piece(player.opponent())
                        self._put(jumped, self.blank)
                        self._put(piece_pos, self.blank)
                        self._put(new_pos, own_man)
                        return MoveStatus.CAPTURE_SUCCESS
                return MoveStatus.INVALID_MOVE
            if self._at(new_pos) != self.blank or vec.y == illegal_y:
                return MoveStatus.MOVE_FAIL
            self._put(piece_pos, self.blank)
            self._put(new_pos, own_man)
            return MoveStatus.MOVE_SUCCESS

        return MoveStatus.NOT_A_PIECE

    def try_turn_king(self, piece_pos) -> None:
        """Promote a man standing on the far row of its side."""
        pos = Point(*piece_pos)
        if not self.is_on_board(pos):
            return
        if pos.y == 0 and self._at(pos) == self.light_man:
            self._put(pos, self.light_king)
        elif pos.y == self.size - 1 and self._at(pos) == self.dark_man:
            self._put(pos, self.dark_king)

    def remaining_total(self) -> int:
        return self.remaining_light + self.remaining_dark

    def remaining(self, player) -> int:
        player = Player(player)
        return self.remaining_light if player is Player.ONE else self.remaining_dark

    def moves_for_piece(self, piece_pos, include_backwards_captures=False) -> list[Point]:
        """Squares the piece at ``piece_pos`` may reach this turn."""
        pos = Point(*piece_pos)
        if not self.is_on_board(pos):
            raise ValueError(f"position {tuple(pos)} is off the board")
        piece = self._at(pos)
        if piece in (self.light_man, self.light_king):
            enemies = (self.dark_man, self.dark_king)
            illegal_y = 1
        elif piece in (self.dark_man, self.dark_king):
            enemies = (self.light_man, self.light_king)
            illegal_y = -1
        else:
            return []

        targets: list[Point] = []
        if piece in (self.light_man, self.dark_man):
            forward = -illegal_y
            for dx in (-1, 1):
                vec = Point(dx, forward)
                near = _step(pos, vec)
                if not self.is_on_board(near):
                    continue
                if self._can_capture(enemies, near, vec):
                    targets.append(_step(near, vec))
                elif self._at(near) == self.blank:
                    targets.append(near)
            if include_backwards_captures:
                for dx in (-1, 1):
                    vec = Point(dx, illegal_y)
                    near = _step(pos, vec)
                    if self.is_on_board(near) and self._can_capture(enemies, near, vec):
                        targets.append(_step(near, vec))
            return targets

        for vec in _DIAGONALS:
            current = _step(pos, vec)
            captured = False
            while self.is_on_board(current):
                if self._can_capture(enemies, current, vec):
                    if captured:
                        break
                    captured = True
                    targets.append(_step(current, vec))
                    current = _step(current, vec, 2)
                elif self._at(current) == self.blank:
                    targets.append(current)
                    current = _step(current, vec)
                else:
                    break
        return targets

    def moves_for_player(self, player, force_capture=False) -> list[PieceMoves]:
        """Every piece of the player that can move, scanned row by row."""
        own_man, own_king, *_ = self._sides(Player(player))
        result = []
        for y, row in enumerate(self.grid):
            for x, square in enumerate(row):
                if square not in (own_man, own_king):
                    continue
                origin = Point(x, y)
                targets = self.moves_for_piece(origin, force_capture)
                if targets:
                    result.append(PieceMoves(origin, tuple(targets)))
        return result

    def piece_can_capture(self, player, pos) -> bool:
        """Whether the player's piece at ``pos`` has a capture available."""
        own_man, own_king, enemy_man, enemy_king, _ = self._sides(Player(player))
        pos = Point(*pos)
        if not self.is_on_board(pos):
            return False
        enemies = (enemy_man, enemy_king)
        piece = self._at(pos)

        if piece == own_king:
            for vec in _DIAGONALS:
                current = _step(pos, vec)
                while self.is_on_board(current):
                    square = self._at(current)
                    if square in enemies:
                        if self._can_capture(enemies, current, vec):
                            return True
                        break
                    if square != self.blank:
                        break
                    current = _step(current, vec)
            return False

        if piece == own_man:
            return any(
                self.is_on_board(_step(pos, vec))
                and self._can_capture(enemies, _step(pos, vec), vec)
                for vec in _DIAGONALS
            )
        return False

    def player_can_capture(self, player) -> bool:
        player = Player(player)
        return any(
            self.piece_can_capture(player, Point(x, y))
            for y in range(self.size)
            for x in range(self.size)
        )

    def render(self) -> str:
        """Plain-text description of the board."""
        lines = [
            ">> C h e c k e r s ! <<",
            f"Light pieces: {self.light_man}{self.light_king}",
            f"Dark pieces: {self.dark_man}{self.dark_king}",
            "",
            f"LIGHT PIECES REMAINING: {self.remaining_light}",
            f"DARK PIECES REMAINING: {self.remaining_dark}",
            "",
            "Current board state:",
        ]
        lines.extend("".join(f"{square} " for square in row) for row in self.grid)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()