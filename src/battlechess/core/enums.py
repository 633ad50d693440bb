"""Core enumerations for the battle chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row direction a pawn of this color advances in."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds. ``MINER`` is the variant's extra rook-moving piece."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
    MINER = 7


class MoveKind(IntEnum):
    """Classification of a legal move."""

    NORMAL = 0
    CAPTURE = 1
    DOUBLE_STEP = 2
    EN_PASSANT = 3
