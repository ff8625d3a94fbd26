#!/usr/bin/env python3
"""
Print the knight-distance table from one square.

Shows, for every square on the board, the minimum number of knight moves
needed to reach it from the given origin, computed with the same BFS the
service uses. Handy for eyeballing results returned by the API.

Usage: python3 tools/distance_table.py [SQUARE]     (default: A1)
"""
import sys

from knightpath.constants import BOARD_SIZE
from knightpath.errors import InvalidSquareError
from knightpath.search import knight_distances
from knightpath.squares import Square

FILES = "ABCDEFGH"


def render_table(origin: Square) -> str:
    """Return the distance grid with rank 8 at the top, like a diagram."""
    distances = knight_distances(origin)
    lines = []
    for y in reversed(range(BOARD_SIZE)):
        cells = [f"{distances[Square(x, y)]:>2}" for x in range(BOARD_SIZE)]
        lines.append(f"{y + 1}  " + " ".join(cells))
    lines.append("   " + " ".join(f"{f:>2}" for f in FILES))
    return "\n".join(lines)


def main() -> None:
    label = sys.argv[1] if len(sys.argv) > 1 else "A1"
    try:
        origin = Square.from_label(label)
    except InvalidSquareError as exc:
        print(exc, file=sys.stderr)
        sys.exit(2)

    print(f"Knight distances from {origin}")
    print()
    print(render_table(origin))


if __name__ == "__main__":
    main()
