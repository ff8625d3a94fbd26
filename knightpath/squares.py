"""
Board squares: label/coordinate conversion and knight-move generation.

A square has two interchangeable forms:
    - a two-character label, file A-H followed by rank 1-8 ("E4")
    - integer coordinates (x, y), x = file index, y = rank index, both 0-7

Label parsing and rendering go through python-chess square names so the
labels agree with every other chess tool. python-chess uses lower-case names;
labels are accepted in either case and always rendered upper-case.
"""

from dataclasses import dataclass
from typing import Iterator

import chess

from knightpath.constants import BOARD_SIZE, KNIGHT_OFFSETS
from knightpath.errors import InvalidSquareError


def is_on_board(x: int, y: int) -> bool:
    """Return True if (x, y) lies inside the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(frozen=True)
class Square:
    """
    One of the 64 board positions.

    Attributes:
        x: File index, 0 = A ... 7 = H.
        y: Rank index, 0 = rank 1 ... 7 = rank 8.

    Raises:
        InvalidSquareError: If either coordinate is outside [0, 7].
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if not is_on_board(self.x, self.y):
            raise InvalidSquareError((self.x, self.y))

    @classmethod
    def from_label(cls, label: str) -> "Square":
        """
        Parse a two-character label such as "A1" or "h8".

        Args:
            label: File letter followed by rank digit. Case-insensitive;
                   surrounding whitespace is not accepted.

        Returns:
            The matching Square.

        Raises:
            InvalidSquareError: If the label is not one of the 64 squares.
        """
        if not isinstance(label, str):
            raise InvalidSquareError(label)
        try:
            index = chess.parse_square(label.lower())
        except ValueError as exc:
            raise InvalidSquareError(label) from exc
        return cls(chess.square_file(index), chess.square_rank(index))

    @property
    def label(self) -> str:
        return chess.square_name(chess.square(self.x, self.y)).upper()

    def __str__(self) -> str:
        return self.label


def all_squares() -> Iterator[Square]:
    """Yield all 64 squares, A1 first, in python-chess index order."""
    for index in chess.SQUARES:
        yield Square(chess.square_file(index), chess.square_rank(index))


def knight_moves(square: Square) -> Iterator[Square]:
    """
    Yield the on-board squares a knight can reach from `square`.

    Neighbors come out in KNIGHT_OFFSETS order, which is the tie-break order
    used by the shortest-path search.
    """
    for dx, dy in KNIGHT_OFFSETS:
        x, y = square.x + dx, square.y + dy
        if is_on_board(x, y):
            yield Square(x, y)


def is_knight_move(origin: Square, destination: Square) -> bool:
    """Return True if `destination` is one knight move away from `origin`."""
    return (destination.x - origin.x, destination.y - origin.y) in KNIGHT_OFFSETS
