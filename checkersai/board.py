"""Board state, move generation and the rules of play."""

from __future__ import annotations

import copy
import dataclasses
from itertools import chain

from .ai import AI
from .piece import Move, Piece, PieceColor, PieceType, Position

AI_DEPTH = 7
STARTING_PIECES = 12

_WHITE_START = (
    (0, 7), (0, 5), (1, 6), (2, 7), (2, 5), (3, 6),
    (4, 7), (4, 5), (5, 6), (6, 7), (6, 5), (7, 6),
)
_BLACK_START = (
    (0, 1), (1, 0), (1, 2), (2, 1), (3, 0), (3, 2),
    (4, 1), (5, 0), (5, 2), (6, 1), (7, 0), (7, 2),
)

_MAN_DIRECTIONS = {
    PieceColor.WHITE: ((-1, -1), (1, -1)),
    PieceColor.BLACK: ((-1, 1), (1, 1)),
}
_KING_DIRECTIONS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


class Board:
    """An 8x8 checkers board. White moves up (towards row 0), black moves down."""

    def __init__(self) -> None:
        self.width = 8
        self.height = 8
        self.white_pieces: list[Piece] = []
        self.black_pieces: list[Piece] = []
        self.white_pieces_count = STARTING_PIECES
        self.black_pieces_count = STARTING_PIECES
        self.current_color = PieceColor.WHITE
        self.bottom_player_white = True
        self.game_over = False
        self.vs_ai = False
        self.ai_depth = AI_DEPTH
        self.restart(False)

    def restart(self, switch_sides: bool = False, vs_ai: bool | None = None) -> None:
        """Set up a new game, optionally swapping sides and choosing the opponent."""
        if vs_ai is not None:
            self.vs_ai = vs_ai
        self.white_pieces = [
            Piece(PieceType.MAN, PieceColor.WHITE, Position(x, y)) for x, y in _WHITE_START
        ]
        self.black_pieces = [
            Piece(PieceType.MAN, PieceColor.BLACK, Position(x, y)) for x, y in _BLACK_START
        ]
        self.white_pieces_count = STARTING_PIECES
        self.black_pieces_count = STARTING_PIECES
        self.game_over = False
        self.current_color = PieceColor.WHITE

        if switch_sides:
            self.bottom_player_white = not self.bottom_player_white

        # When the top player moves first, pass white's turn with an in-place move.
        if not self.bottom_player_white:
            first = self.white_pieces[0]
            self.make_move(Move(first, first.position), False)

    def clone(self) -> Board:
        """Return an independent copy of the board."""
        other = copy.copy(self)
        other.white_pieces = [dataclasses.replace(p) for p in self.white_pieces]
        other.black_pieces = [dataclasses.replace(p) for p in self.black_pieces]
        return other

    def evaluate_board(self) -> int:
        """Score the position: positive favours white, negative favours black."""
        score = 0
        for piece in self.black_pieces:
            if piece.kind is PieceType.KING:
                score -= 25
            else:
                score -= 5 + piece.position.y
        for piece in self.white_pieces:
            if piece.kind is PieceType.KING:
                score += 25
            else:
                score += 5 + (7 - piece.position.y)
        return score

    def get_piece_at(self, pos: Position) -> Piece | None:
        """Return the piece on a square, or None if it is empty."""
        return next(
            (p for p in chain(self.white_pieces, self.black_pieces) if p.position == pos),
            None,
        )

    def _on_board(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _pieces_of(self, color: PieceColor) -> list[Piece]:
        return self.white_pieces if color is PieceColor.WHITE else self.black_pieces

    def get_valid_moves(self, piece: Piece, check_all_moves: bool = False) -> list[Move]:
        """Moves for one piece.

        With check_all_moves, only those moves of the piece that are legal given
        the whole position (captures are compulsory) are returned.
        """
        if check_all_moves:
            return [m for m in self.get_all_valid_moves() if m.piece == piece]

        if piece.color is not self.current_color:
            return []

        if piece.kind is PieceType.KING:
            directions = _KING_DIRECTIONS
        else:
            directions = _MAN_DIRECTIONS[piece.color]

        moves = []
        for dx, dy in directions:
            step = Position(piece.position.x + dx, piece.position.y + dy)
            if not self._on_board(step):
                continue
            neighbour = self.get_piece_at(step)
            if neighbour is None:
                moves.append(Move(piece, step))
                continue
            if neighbour.color is piece.color:
                continue
            landing = Position(step.x + dx, step.y + dy)
            if self._on_board(landing) and self.get_piece_at(landing) is None:
                moves.append(Move(piece, landing, neighbour))
        return moves

    def get_all_valid_moves(self) -> list[Move]:
        """All moves for the side to play; only captures if any capture exists."""
        jumps: list[Move] = []
        steps: list[Move] = []
        for piece in self._pieces_of(self.current_color):
            for move in self.get_valid_moves(piece):
                (jumps if move.capture_piece is not None else steps).append(move)
        return jumps or steps

    def _capture(self, piece: Piece) -> None:
        if piece.color is PieceColor.WHITE:
            self.white_pieces_count -= 1
        else:
            self.black_pieces_count -= 1
        pieces = self._pieces_of(piece.color)
        pieces[:] = [p for p in pieces if p.position != piece.position]
        if self.black_pieces_count == 0 or self.white_pieces_count == 0:
            self.game_over = True

    def _change_turn(self) -> None:
        self.current_color = self.current_color.opponent()

    def make_move(self, move: Move, made_by_ai: bool = False) -> None:
        """Play a move, handling captures, follow-up jumps, promotion and the AI reply."""
        piece = move.piece
        piece.position = move.new_pos

        if move.capture_piece is not None:
            self._capture(move.capture_piece)
            follow_up = next(
                (m for m in self.get_valid_moves(piece) if m.capture_piece is not None),
                None,
            )
            if follow_up is None:
                self._change_turn()
            elif self.vs_ai:
                self.make_move(follow_up, True)
        else:
            self._change_turn()

        if (piece.color is PieceColor.WHITE and piece.position.y == 0) or (
            piece.color is PieceColor.BLACK and piece.position.y == self.height - 1
        ):
            piece.kind = PieceType.KING

        if self.vs_ai and not made_by_ai and not self.game_over:
            reply = AI().get_best_move(self, self.ai_depth)
            if reply is not None:
                self.make_move(reply, True)