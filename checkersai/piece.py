"""Pieces, colours, board positions and moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PieceType(Enum):
    """Rank of a piece."""

    MAN = 0
    KING = 1


class PieceColor(Enum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    def opponent(self) -> PieceColor:
        """Return the other side."""
        return PieceColor.BLACK if self is PieceColor.WHITE else PieceColor.WHITE


@dataclass(frozen=True)
class Position:
    """A square on the board; x is the column, y the row (0 is the top)."""

    x: int
    y: int


@dataclass
class Piece:
    """A piece on the board. Two pieces are equal when rank, colour and square match."""

    kind: PieceType
    color: PieceColor
    position: Position


@dataclass
class Move:
    """A piece moving to a square, possibly jumping over an opposing piece."""

    piece: Piece
    new_pos: Position
    capture_piece: Piece | None = None