import pytest

from intcheckers.board import Board, MoveStatus, PIECES_PER_PLAYER, Player, Point
from intcheckers.game import Checkers, GameOverError, GameState


def _cleared(game, pieces, remaining_light, remaining_dark):
    board = game.board
    board.grid = [[board.blank] * board.size for _ in range(board.size)]
    for (x, y), piece in pieces.items():
        board.grid[y][x] = piece
    board.remaining_light = remaining_light
    board.remaining_dark = remaining_dark
    return game


def test_initial_state():
    game = Checkers()
    assert game.state is GameState.P1_TURN
    assert game.running is True
    assert game.turns_total == 0
    assert game.current_player() is Player.ONE
    assert game.winner() is None
    assert game.board.remaining_total() == 2 * PIECES_PER_PLAYER


def test_flags_are_booleans():
    game = Checkers(1, 0)
    assert game.force_capture is True
    assert game.ai_enabled is False


def test_simple_moves_alternate_turns():
    game = Checkers()
    assert game.make_move((1, 6), (0, 5)) is MoveStatus.MOVE_SUCCESS
    assert game.state is GameState.P2_TURN
    assert game.current_player() is Player.TWO
    assert game.turns_total == 1
    assert game.make_move(Point(0, 3), Point(1, 4)) is MoveStatus.MOVE_SUCCESS
    assert game.state is GameState.P1_TURN
    assert game.turns_total == 2


def test_failed_move_keeps_turn():
    game = Checkers()
    status = game.make_move((1, 6), (1, 5))
    assert status is MoveStatus.INVALID_MOVE
    assert game.state is GameState.P1_TURN
    assert game.turns_total == 0


def test_moving_opponent_piece_is_not_a_piece():
    game = Checkers()
    assert game.make_move((0, 3), (1, 4)) is MoveStatus.NOT_A_PIECE
    assert game.current_player() is Player.ONE


def test_last_capture_wins_and_ends_game():
    game = _cleared(Checkers(), {(2, 5): Board.light_man, (3, 4): Board.dark_man}, 1, 1)
    assert game.make_move((2, 5), (4, 3)) is MoveStatus.CAPTURE_SUCCESS
    assert game.state is GameState.END_P1_WIN
    assert game.running is False
    assert game.winner() is Player.ONE
    assert game.current_player() is None
    assert game.turns_total == 1
    assert game.available_moves() == []
    assert game.player_shall_capture() is False


def test_move_after_game_over_raises():
    game = _cleared(Checkers(), {(2, 5): Board.light_man, (3, 4): Board.dark_man}, 1, 1)
    game.make_move((2, 5), (4, 3))
    with pytest.raises(GameOverError):
        game.make_move((4, 3), (5, 2))


def _chain_position(force_capture):
    pieces = {
        (2, 7): Board.light_man,
        (3, 6): Board.dark_man,
        (5, 4): Board.dark_man,
        (9, 0): Board.dark_man,
    }
    return _cleared(Checkers(force_capture=force_capture), pieces, 1, 3)


def test_forced_capture_chain_keeps_turn():
    game = _chain_position(True)
    assert game.player_shall_capture() is True
    assert game.make_move((2, 7), (4, 5)) is MoveStatus.CAPTURE_SUCCESS
    assert game.state is GameState.P1_TURN
    assert game.turns_total == 1
    assert game.board.remaining_dark == 2
    assert game.player_shall_capture() is True


def test_capture_without_forcing_passes_turn():
    game = _chain_position(False)
    assert game.player_shall_capture() is False
    assert game.make_move((2, 7), (4, 5)) is MoveStatus.CAPTURE_SUCCESS
    assert game.state is GameState.P2_TURN


def test_reaching_far_row_promotes():
    pieces = {(1, 1): Board.light_man, (9, 8): Board.dark_man}
    game = _cleared(Checkers(), pieces, 1, 1)
    assert game.make_move((1, 1), (0, 0)) is MoveStatus.MOVE_SUCCESS
    assert game.board.grid[0][0] == Board.light_king
    assert game.make_move((9, 8), (8, 9)) is MoveStatus.MOVE_SUCCESS
    assert game.board.grid[9][8] == Board.dark_king


def test_available_moves_belong_to_current_player():
    game = Checkers()
    moves = game.available_moves()
    assert moves == game.board.moves_for_player(Player.ONE, False)
    assert moves
    for entry in moves:
        assert game.board.grid[entry.origin.y][entry.origin.x] == Board.light_man
        for target in entry.targets:
            assert game.board.is_on_board(target)


def test_copy_is_independent():
    game = Checkers()
    clone = game.copy()
    clone.make_move((1, 6), (0, 5))
    assert game.state is GameState.P1_TURN
    assert game.turns_total == 0
    assert game.board.grid[6][1] == Board.light_man
    assert clone.board.grid[5][0] == Board.light_man


def test_render_layout():
    game = Checkers()
    text = game.render()
    lines = text.splitlines()
    assert lines[0] == f"\x1b[1;37mLight pieces:\x1b[0m {PIECES_PER_PLAYER}"
    assert lines[1] == f"\x1b[0;30mDark pieces:\x1b[0m {PIECES_PER_PLAYER}"
    assert lines[2].startswith("9  . ")
    assert len(lines) == 2 + game.board.size + 1
    assert lines[-1].startswith("   A B C D E F G H I J ")
    assert "Turn: 0" in lines[-1]
    assert str(game) == text