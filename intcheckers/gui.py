"""Windowed front end drawn with pygame; moves are made by clicking two squares."""

from __future__ import annotations

import os

from .ai import Ai
from .board import BOARD_SIZE, MoveStatus, Player, Point
from .game import Checkers, GameOverError, GameState

GAME_WIDTH = 800
GAME_HEIGHT = 800
MIN_WINDOW = 200
TITLE = "International Checkers"

_PLAYER_ONE_COLOUR = (255, 203, 0)
_PLAYER_TWO_COLOUR = (105, 71, 62)
_LIGHT_SQUARE = (232, 208, 170)
_DARK_SQUARE = (166, 125, 93)
_SELECTION = (0, 121, 241)
_BACKGROUND = (0, 0, 0)
_KING_ALPHA = 127
_FPS = 60


def window_title(game: Checkers, ai_active: bool = False) -> str:
    """The window caption describing whose turn it is or how the game ended."""
    state = game.state
    if state is GameState.P1_TURN:
        if game.player_shall_capture():
            return f"{TITLE} - Player one's turn, light pieces. Must capture!!"
        return f"{TITLE} - Player one's turn, light pieces"
    if state is GameState.P2_TURN:
        if ai_active:
            return f"{TITLE} - Player two is thinking..."
        if game.player_shall_capture():
            return f"{TITLE} - Player two's turn, dark pieces. Must capture!!"
        return f"{TITLE} - Player two's turn, dark pieces"
    if state is GameState.END_P1_WIN:
        return f"{TITLE} - Player one wins!"
    if state is GameState.END_P2_WIN:
        return f"{TITLE} - Player two wins!"
    return f"{TITLE} - Draw!!!"


def cell_at(mouse_x, mouse_y, screen_width, screen_height, board_size=BOARD_SIZE) -> Point:
    """Board square under the mouse, with the board letterboxed into the window."""
    if screen_width <= 0 or screen_height <= 0:
        raise ValueError("screen size must be positive")
    scale = min(screen_width / GAME_WIDTH, screen_height / GAME_HEIGHT)
    vx = (mouse_x - (screen_width - GAME_WIDTH * scale) * 0.5) / scale
    vy = (mouse_y - (screen_height - GAME_HEIGHT * scale) * 0.5) / scale
    vx = min(max(vx, 0.0), float(GAME_WIDTH))
    vy = min(max(vy, 0.0), float(GAME_HEIGHT))
    quad = GAME_WIDTH // board_size
    return Point(int(vx / quad), int(vy / quad))


def apply_move(game: Checkers, origin, dest) -> MoveStatus | None:
    """Play a move, honouring forced capture; ``None`` once the game is over."""
    try:
        if game.player_shall_capture():
            future = game.copy()
            status = future.make_move(origin, dest)
            if status is MoveStatus.CAPTURE_SUCCESS:
                game.make_move(origin, dest)
            return status
        return game.make_move(origin, dest)
    except GameOverError:
        return None


def run(game: Checkers) -> None:
    """Open the game window and play until it is closed."""
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    import pygame

    pygame.init()
    ai = Ai(game) if game.ai_enabled else None
    try:
        info = pygame.display.Info()
        side = max(int(info.current_h / 1.5), MIN_WINDOW)
        screen = pygame.display.set_mode((side, side), pygame.RESIZABLE)
        clock = pygame.time.Clock()
        canvas = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
        board = game.board
        quad = GAME_WIDTH // board.size
        radius = quad * 0.85 / 2
        selected: Point | None = None
        allow_player_move = True

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    width, height = max(event.w, MIN_WINDOW), max(event.h, MIN_WINDOW)
                    if (width, height) != (event.w, event.h):
                        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and allow_player_move
                ):
                    width, height = screen.get_size()
                    cell = cell_at(event.pos[0], event.pos[1], width, height, board.size)
                    if selected is None:
                        selected = cell
                    else:
                        if cell != selected:
                            apply_move(game, selected, cell)
                        selected = None
            if not running:
                break

            thinking = ai is not None and game.state is GameState.P2_TURN
            pygame.display.set_caption(window_title(game, thinking))
            if thinking:
                allow_player_move = False
                ai.generate_async()
                move = ai.try_get_move()
                if move is not None:
                    apply_move(game, move.origin, move.dest)
                    allow_player_move = True

            width, height = screen.get_size()
            mouse_x, mouse_y = pygame.mouse.get_pos()
            hover = cell_at(mouse_x, mouse_y, width, height, board.size)

            canvas.fill(_BACKGROUND)
            kings = pygame.Surface((GAME_WIDTH, GAME_HEIGHT), pygame.SRCALPHA)
            for i, row in enumerate(board.grid):
                for j, square in enumerate(row):
                    rect = pygame.Rect(j * quad, i * quad, quad, quad)
                    colour = _LIGHT_SQUARE if (i + j) % 2 == 0 else _DARK_SQUARE
                    pygame.draw.rect(canvas, colour, rect)
                    centre = (j * quad + quad // 2, i * quad + quad // 2)
                    if square == board.light_man:
                        pygame.draw.circle(canvas, _PLAYER_ONE_COLOUR, centre, radius)
                    elif square == board.dark_man:
                        pygame.draw.circle(canvas, _PLAYER_TWO_COLOUR, centre, radius)
                    elif square == board.light_king:
                        pygame.draw.circle(kings, (*_PLAYER_ONE_COLOUR, _KING_ALPHA), centre, radius)
                    elif square == board.dark_king:
                        pygame.draw.circle(kings, (*_PLAYER_TWO_COLOUR, _KING_ALPHA), centre, radius)
            canvas.blit(kings, (0, 0))

            hover_colour = (
                _PLAYER_ONE_COLOUR if game.current_player() is Player.ONE else _PLAYER_TWO_COLOUR
            )
            pygame.draw.rect(
                canvas, hover_colour, pygame.Rect(hover.x * quad, hover.y * quad, quad, quad), 4
            )
            if selected is not None:
                pygame.draw.rect(
                    canvas,
                    _SELECTION,
                    pygame.Rect(selected.x * quad, selected.y * quad, quad, quad),
                    4,
                )

            scale = min(width / GAME_WIDTH, height / GAME_HEIGHT)
            scaled_size = (max(int(GAME_WIDTH * scale), 1), max(int(GAME_HEIGHT * scale), 1))
            scaled = pygame.transform.smoothscale(canvas, scaled_size)
            screen.fill(_BACKGROUND)
            screen.blit(
                scaled, ((width - scaled_size[0]) // 2, (height - scaled_size[1]) // 2)
            )
            pygame.display.flip()
            clock.tick(_FPS)

        if ai is not None:
            pygame.display.set_caption("Just a second...")
            ai.kill()
    finally:
        pygame.quit()