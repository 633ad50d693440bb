"""Core domain layer — pure battle chess rules with zero external dependencies.

Quick start::

    from battlechess.core import random_board, resolve_move, make_square

    board = random_board(seed=7)
    outcome = resolve_move(board.view(), make_square(2, 1), make_square(2, 2))
    if outcome is not None:
        print(outcome.kind, outcome.effects)
"""

from battlechess.core.board import Board, BoardView
from battlechess.core.enums import Color, MoveKind, PieceType
from battlechess.core.movement import (
    EN_PASSANT_ROWS,
    PROMOTION_ROWS,
    classify_move,
    is_valid_move,
    legal_targets,
)
from battlechess.core.notation import board_from_text, board_to_text
from battlechess.core.piece import Piece
from battlechess.core.resolver import Effect, IconSet, MoveOutcome, resolve_move
from battlechess.core.setup import SETUP_SQUARES, populate_board, random_board
from battlechess.core.types import (
    COLUMNS,
    ROWS,
    Square,
    column_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "COLUMNS",
    "ROWS",
    "Square",
    "column_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardView",
    "Effect",
    "IconSet",
    "MoveOutcome",
    "Piece",
    # Rules
    "EN_PASSANT_ROWS",
    "PROMOTION_ROWS",
    "classify_move",
    "is_valid_move",
    "legal_targets",
    "resolve_move",
    # Setup / notation
    "SETUP_SQUARES",
    "board_from_text",
    "board_to_text",
    "populate_board",
    "random_board",
]
