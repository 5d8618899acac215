"""Drawing the board and turning mouse clicks into moves."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from .piece import Piece, PieceColor, PieceType, Position

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

TILE_SIZE = 96
PIECE_RADIUS = 32
MARKER_RADIUS = 8
FONT_PATH = "inter.ttf"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
OWN_KING = (33, 130, 33)
OPPONENT_KING = (130, 33, 33)

SWITCH_BUTTON = pygame.Rect(768, 600, 256, 168)
VS_AI_BUTTON = pygame.Rect(768, 500, 128, 100)
VS_PLAYER_BUTTON = pygame.Rect(896, 500, 128, 100)


def _tile(coordinate: int) -> int:
    # Truncate towards zero, so clicks just left of or above the board land on row/column 0.
    return int(coordinate / TILE_SIZE)


class Display:
    """Renders a board with side panel buttons and handles the player's clicks."""

    def __init__(self, board: Board, font_path: str = FONT_PATH) -> None:
        self.board = board
        self.selected_piece: Piece | None = None
        self.width = 8
        self.height = 8
        self._font_path = font_path
        self._fonts: dict[int, pygame.font.Font] = {}
        self._font_warned = False

    def record_mouse_click(self, x: int, y: int) -> None:
        """Handle a left click at window coordinates (x, y)."""
        if 768 < x <= 1024 and 600 < y <= 768:
            self.selected_piece = None
            self.board.restart(True)
        elif 768 < x <= 896 and 500 < y <= 600:
            self.selected_piece = None
            self.board.restart(False, True)
        elif 896 < x <= 1024 and 500 < y <= 600:
            self.selected_piece = None
            self.board.restart(False, False)

        col, row = _tile(x), _tile(y)
        if not (0 <= col < self.width and 0 <= row < self.height):
            return

        target = Position(col, row)
        piece = self.board.get_piece_at(target)
        if piece is not None:
            self.selected_piece = piece
            return
        if self.selected_piece is None:
            return

        for move in self.board.get_valid_moves(self.selected_piece, True):
            if move.new_pos == target:
                self.board.make_move(move, False)
                self.selected_piece = None
                break

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(self._font_path, size)
            except OSError:
                if not self._font_warned:
                    logger.error("Font loading failed: %s", self._font_path)
                    self._font_warned = True
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, surface: pygame.Surface, text: str, size: int, pos: tuple[int, int]) -> None:
        surface.blit(self._font(size).render(text, True, RED), pos)

    def _piece_color(self, piece: Piece) -> tuple[int, int, int]:
        own = (piece.color is PieceColor.WHITE) == self.board.bottom_player_white
        if piece.kind is PieceType.KING:
            return OWN_KING if own else OPPONENT_KING
        return GREEN if own else RED

    def draw_board(self, surface: pygame.Surface) -> None:
        """Draw tiles, pieces, move markers, buttons and status text."""
        half = TILE_SIZE // 2
        for i in range(self.width):
            for j in range(self.height):
                color = WHITE if (i + j) % 2 == 0 else BLACK
                pygame.draw.rect(surface, color, (i * TILE_SIZE, j * TILE_SIZE, TILE_SIZE, TILE_SIZE))
                piece = self.board.get_piece_at(Position(i, j))
                if piece is not None:
                    center = (i * TILE_SIZE + half, j * TILE_SIZE + half)
                    pygame.draw.circle(surface, self._piece_color(piece), center, PIECE_RADIUS)

        if self.selected_piece is not None:
            for move in self.board.get_valid_moves(self.selected_piece, True):
                center = (move.new_pos.x * TILE_SIZE + half, move.new_pos.y * TILE_SIZE + half)
                pygame.draw.circle(surface, BLUE, center, MARKER_RADIUS)

        pygame.draw.rect(surface, BLACK, SWITCH_BUTTON)
        pygame.draw.rect(surface, YELLOW, VS_AI_BUTTON)
        pygame.draw.rect(surface, GREEN, VS_PLAYER_BUTTON)

        self._text(surface, "Checkers", 32, (768, 0))
        self._text(surface, "vs AI" if self.board.vs_ai else "Player vs Player", 24, (768, 40))
        self._text(surface, f"Current Pos Eval: {self.board.evaluate_board()}", 16, (768, 80))
        if self.board.game_over:
            self._text(surface, "Game Over", 32, (768, 120))
        self._text(surface, "Switch sides", 16, (768, 600))
        self._text(surface, "vs AI", 16, (768, 500))
        self._text(surface, "vs Player", 16, (896, 500))