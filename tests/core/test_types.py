"""Tests for square helpers."""

import pytest

from battlechess.core.types import (
    SQUARE_COUNT,
    column_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquareHelpers:
    def test_grid_size(self) -> None:
        assert SQUARE_COUNT == 60

    def test_make_square_round_trip(self) -> None:
        sq = make_square(3, 10)
        assert column_of(sq) == 3
        assert row_of(sq) == 10

    def test_corners(self) -> None:
        assert make_square(0, 0) == 0
        assert make_square(4, 11) == 59

    @pytest.mark.parametrize("column,row", [(-1, 0), (5, 0), (0, -1), (0, 12)])
    def test_off_board_rejected(self, column: int, row: int) -> None:
        with pytest.raises(ValueError, match="off board"):
            make_square(column, row)

    def test_square_names(self) -> None:
        assert square_name(0) == "a1"
        assert square_name(make_square(2, 1)) == "c2"
        assert square_name(59) == "e12"

    def test_parse_square(self) -> None:
        assert parse_square("c2") == make_square(2, 1)
        assert parse_square("e12") == 59

    @pytest.mark.parametrize("name", ["f1", "a0", "a13", "c", "cc"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)
