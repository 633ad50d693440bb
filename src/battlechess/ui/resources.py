"""Default icon set: piece images shipped with the display layer."""

from __future__ import annotations

from pathlib import Path

from battlechess.core.enums import Color, PieceType

_PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
    PieceType.MINER: "miner",
}

_COLOR_SUFFIX: dict[Color, str] = {
    Color.WHITE: "w",
    Color.BLACK: "b",
}


def pieces_dir() -> Path:
    """Directory holding the ``<kind>-<w|b>.svg`` piece images."""
    return Path(__file__).resolve().parent / "assets" / "pieces"


def icon_name(color: Color, piece_type: PieceType) -> str:
    return f"{_PIECE_NAMES[piece_type]}-{_COLOR_SUFFIX[color]}.svg"


def default_icon_set(root: Path | None = None) -> dict[tuple[Color, PieceType], Path]:
    """Map every (color, kind) to its SVG path under *root*.

    The engine never opens these paths; it only hands them back to the
    display with the pieces that carry them.  Raises ``FileNotFoundError``
    when *root* is not an existing directory.
    """
    base = root if root is not None else pieces_dir()
    if not base.is_dir():
        raise FileNotFoundError(f"Piece image directory not found: {base}")
    return {
        (color, piece_type): base / icon_name(color, piece_type)
        for color in Color
        for piece_type in PieceType
    }
