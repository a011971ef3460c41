"""Computer opponent for player two, driven by a plain minimax search."""

from __future__ import annotations

import random
import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .board import Board, MoveStatus, PieceMoves, Player, Point
from .game import Checkers, GameState

AI_DEPTH = 5

_LONG_MIN = float(-(2**63))
_INT_MIN = float(-(2**31))
_INT_MAX = float(2**31 - 1)


@dataclass(frozen=True)
class AiMove:
    """A move chosen by the computer player."""

    origin: Point
    dest: Point


def heuristics(board: Board) -> float:
    """Score a position from the dark side's point of view; higher is better for dark."""
    rewards = 0.0
    if board.remaining_dark == 0:
        rewards -= 1000.0
    elif board.remaining_light == 0:
        rewards += 1000.0
    for i, row in enumerate(board.grid):
        for j, square in enumerate(row):
            centrality = (1 - 0.5 / abs(j - 5.5)) * 20
            if square == board.light_man:
                rewards -= 20.0 + ((10.0 - (i + 1)) / 10.0) * 10.0 + centrality
            elif square == board.light_king:
                rewards -= 100.0 + ((10.0 - (i + 1)) / 10.0) * 10.0 + centrality
            elif square == board.dark_man:
                rewards += 20.0 + ((i + 1) / 10.0) * 10.0 + centrality
            elif square == board.dark_king:
                rewards += 100.0 + ((i + 1) / 10.0) * 10.0 + centrality
    return rewards


def _successors(
    board: Board, player: Player, moves: Sequence[PieceMoves], force_capture: bool
) -> Iterator[tuple[Point, Point, Board]]:
    """Yield every legal follow-up position, restricted to captures when they are forced."""
    must_capture = force_capture and board.player_can_capture(player)
    if must_capture:
        accepted = {MoveStatus.CAPTURE_SUCCESS}
    else:
        accepted = {MoveStatus.MOVE_SUCCESS, MoveStatus.CAPTURE_SUCCESS}
    for piece in moves:
        if must_capture and not board.piece_can_capture(player, piece.origin):
            continue
        for dest in piece.targets:
            future = board.copy()
            if future.try_move_or_capture(player, piece.origin, dest) in accepted:
                yield piece.origin, dest, future


def _minimax(board: Board, force_capture: bool, depth: int, maximize: bool) -> float:
    if depth == 0 or board.remaining_dark == 0 or board.remaining_light == 0:
        return heuristics(board)
    if maximize:
        player, best, better = Player.TWO, _INT_MIN, max
    else:
        player, best, better = Player.ONE, _INT_MAX, min
    moves = board.moves_for_player(player, force_capture)
    for _, _, future in _successors(board, player, moves, force_capture):
        best = better(best, _minimax(future, force_capture, depth - 1, not maximize))
    return best


class Ai:
    """Chooses moves for player two, either on demand or on a background thread."""

    def __init__(self, game: Checkers, depth: int = AI_DEPTH) -> None:
        if depth < 0:
            raise ValueError("search depth must not be negative")
        self.game = game
        self.depth = depth
        self._rng = random.Random()
        self._lock = threading.Lock()
        self._queued: AiMove | None = None
        self._thread: threading.Thread | None = None

    def _shuffle(self, moves: list[PieceMoves]) -> None:
        count = len(moves)
        for i in range(count - 1):
            r = self._rng.randint(0, count - 1)
            moves[i], moves[r] = moves[r], moves[i]

    def _search(self) -> AiMove | None:
        game = self.game
        if not game.running or game.state is not GameState.P2_TURN:
            return None
        board = game.board
        moves = board.moves_for_player(Player.TWO, game.force_capture)
        self._shuffle(moves)
        best: AiMove | None = None
        best_score = _LONG_MIN
        for origin, dest, future in _successors(board, Player.TWO, moves, game.force_capture):
            score = _minimax(future, game.force_capture, self.depth, False)
            if score > best_score:
                best_score = score
                best = AiMove(origin, dest)
        return best

    def _worker(self) -> None:
        with self._lock:
            self._queued = self._search()

    def generate_async(self) -> None:
        """Start a background search unless one is running or a result is waiting."""
        if not self._lock.acquire(blocking=False):
            return
        try:
            if self._queued is not None:
                return
            if self._thread is not None and self._thread.is_alive():
                return
            self._thread = threading.Thread(target=self._worker, daemon=True)
            self._thread.start()
        finally:
            self._lock.release()

    def generate_sync(self) -> AiMove | None:
        """Search for a move now; ``None`` when it is not player two's turn or no move exists."""
        return self._search()

    def try_get_move(self) -> AiMove | None:
        """Take the result of a finished background search, if there is one."""
        if not self._lock.acquire(blocking=False):
            return None
        try:
            move, self._queued = self._queued, None
            return move
        finally:
            self._lock.release()

    def kill(self) -> None:
        """Wait for any running background search to finish."""
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> "Ai":
        return self

    def __exit__(self, *exc_info) -> None:
        self.kill()