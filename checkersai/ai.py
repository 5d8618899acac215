"""Alpha-beta minimax search over board positions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .piece import Move, PieceColor

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

SCORE_LIMIT = 10000


def _play_on_clone(board: Board, move: Move) -> Board | None:
    """Play a move on a copy of the board; None if the move cannot be mapped onto it."""
    child = board.clone()
    child.vs_ai = False
    piece = child.get_piece_at(move.piece.position)
    if piece is None:
        return None
    captured = None
    if move.capture_piece is not None:
        captured = child.get_piece_at(move.capture_piece.position)
        if captured is None:
            return None
    child.make_move(Move(piece, move.new_pos, captured), False)
    return child


class AI:
    """Computer player that prefers positions with a low evaluation (good for black)."""

    def minimax(self, board: Board, depth: int, alpha: int, beta: int, is_maximizing: bool) -> int:
        """Score the board searching `depth` turns ahead with alpha-beta pruning."""
        if depth == 0 or board.game_over:
            return board.evaluate_board()

        moves = board.get_all_valid_moves()
        if not moves:
            return board.evaluate_board()

        if board.current_color is PieceColor.WHITE:
            best = -SCORE_LIMIT
            for move in moves:
                child = _play_on_clone(board, move)
                if child is None:
                    continue
                new_depth = depth - 1 if child.current_color is PieceColor.BLACK else depth
                value = self.minimax(child, new_depth, alpha, beta, False)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return best

        best = SCORE_LIMIT
        for move in moves:
            child = _play_on_clone(board, move)
            if child is None:
                continue
            new_depth = depth - 1 if child.current_color is PieceColor.WHITE else depth
            value = self.minimax(child, new_depth, alpha, beta, True)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                break
        return best

    def get_best_move(self, board: Board, depth: int) -> Move | None:
        """Return the move with the lowest score, or None when there is no move."""
        moves = board.get_all_valid_moves()
        if not moves:
            return None

        best_value = SCORE_LIMIT
        best_move = moves[0]
        for move in moves:
            child = _play_on_clone(board, move)
            if child is None:
                continue
            new_depth = depth - 1 if child.current_color is PieceColor.WHITE else depth
            value = self.minimax(child, new_depth, -SCORE_LIMIT, SCORE_LIMIT, False)
            logger.info(
                "Move: (%d,%d) -> (%d,%d) Value: %d",
                move.piece.position.x,
                move.piece.position.y,
                move.new_pos.x,
                move.new_pos.y,
                value,
            )
            if value < best_value:
                best_value = value
                best_move = move

        logger.info("Best move value: %d", best_value)
        return best_move