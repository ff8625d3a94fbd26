"""Tests for Square and knight-move generation."""

import chess
import pytest

from knightpath.errors import InvalidSquareError
from knightpath.squares import Square, all_squares, is_knight_move, knight_moves


class TestSquareLabels:
    def test_corners(self) -> None:
        assert Square.from_label("A1") == Square(0, 0)
        assert Square.from_label("H8") == Square(7, 7)
        assert Square.from_label("H1") == Square(7, 0)
        assert Square.from_label("A8") == Square(0, 7)

    def test_lowercase_accepted_and_rendered_upper(self) -> None:
        assert Square.from_label("e4").label == "E4"

    def test_label_roundtrip_all_squares(self) -> None:
        squares = list(all_squares())
        assert len(squares) == 64
        assert len(set(squares)) == 64
        for sq in squares:
            assert Square.from_label(sq.label) == sq

    @pytest.mark.parametrize("label", ["Z9", "A0", "A9", "I1", "", "A", "A10", " A1", "1A", "AA"])
    def test_invalid_labels_rejected(self, label: str) -> None:
        with pytest.raises(InvalidSquareError):
            Square.from_label(label)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidSquareError):
            Square.from_label(None)  # type: ignore[arg-type]

    def test_invalid_square_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Square.from_label("Z9")

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_range_coordinates_rejected(self, x: int, y: int) -> None:
        with pytest.raises(InvalidSquareError):
            Square(x, y)


class TestKnightMoves:
    def test_corner_has_two_moves_in_offset_order(self) -> None:
        assert [sq.label for sq in knight_moves(Square.from_label("A1"))] == ["C2", "B3"]

    def test_center_has_eight_moves(self) -> None:
        assert len(list(knight_moves(Square.from_label("D4")))) == 8

    def test_moves_match_python_chess_attacks(self) -> None:
        for sq in all_squares():
            index = chess.square(sq.x, sq.y)
            expected = set(chess.SquareSet(chess.BB_KNIGHT_ATTACKS[index]))
            got = {chess.square(n.x, n.y) for n in knight_moves(sq)}
            assert got == expected, f"Mismatch at {sq}"

    def test_is_knight_move(self) -> None:
        a1 = Square.from_label("A1")
        assert is_knight_move(a1, Square.from_label("B3"))
        assert is_knight_move(Square.from_label("B3"), a1)
        assert not is_knight_move(a1, Square.from_label("B2"))
        assert not is_knight_move(a1, a1)
