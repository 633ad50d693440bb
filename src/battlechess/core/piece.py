"""Piece: a single playing piece and its per-piece movement state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from battlechess.core.enums import Color, PieceType

# Diagram character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "M": (Color.WHITE, PieceType.MINER),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
    "m": (Color.BLACK, PieceType.MINER),
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True, eq=False)
class Piece:
    """A piece on the board.

    Pieces are compared by identity: the game tracks *which* pawn made the
    last double step, not which kind of piece did.

    Attributes:
        color: Owning side.
        piece_type: Kind of piece.
        image: Opaque visual identifier supplied by the display layer.
        first_move: Pawn only: the pawn has not moved yet.
        just_made_double_step: Pawn only: set for exactly one ply after a
            two-row advance; makes the pawn capturable en passant.
        moved: Miner only: set once the miner has moved.
        pawn_image: Queen only: image of the pawn this queen was promoted
            from, shown instead of the queen when it is captured.
    """

    color: Color
    piece_type: PieceType
    image: Any = None
    first_move: bool = True
    just_made_double_step: bool = False
    moved: bool = False
    pawn_image: Any = None

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    def __repr__(self) -> str:
        return f"Piece({self.color.name}, {self.piece_type.name})"

    @classmethod
    def from_char(cls, char: str, image: Any = None) -> Piece:
        """Create piece from diagram character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, image)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def is_promoted(self) -> bool:
        return self.piece_type == PieceType.QUEEN and self.pawn_image is not None

    def captured_form(self) -> Piece:
        """The piece the display should show once this one is captured."""
        if self.is_promoted:
            return Piece(self.color, PieceType.PAWN, self.pawn_image, first_move=False)
        return self
