"""
Shortest knight path: breadth-first search over the knight-move graph.

Each of the 64 squares is a node; two squares are connected when a knight can
jump between them. The graph is unweighted, so BFS visits squares in
non-decreasing distance from the source and the first time it dequeues the
target, the path it carries is a shortest one.

Tie-break:
    Several shortest paths usually exist (A1 -> H8 has many 6-move routes).
    Neighbors are enqueued in KNIGHT_OFFSETS order and each square is marked
    visited the first time it is enqueued, so the returned path is fully
    determined by that order. The same inputs always produce the same path.

Complexity:
    At most 64 nodes with at most 8 edges each, so every call is bounded and
    fast regardless of input.
"""

from collections import deque
from dataclasses import dataclass

from knightpath.constants import PATH_DELIMITER
from knightpath.errors import UnreachableError
from knightpath.squares import Square, knight_moves


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest-path search.

    Attributes:
        path: Squares from source to target, both inclusive.
    """

    path: tuple[Square, ...]

    @property
    def number_of_moves(self) -> int:
        return len(self.path) - 1

    @property
    def labels(self) -> list[str]:
        return [square.label for square in self.path]

    def render(self, delimiter: str = PATH_DELIMITER) -> str:
        """Join the square labels, e.g. "A1:B3"."""
        return delimiter.join(self.labels)


def find_shortest_path(source: Square, target: Square) -> PathResult:
    """
    Find a shortest sequence of knight moves from `source` to `target`.

    Inputs are trusted to be valid squares; label validation belongs to the
    caller (see Square.from_label).

    Args:
        source: Starting square.
        target: Destination square.

    Returns:
        PathResult whose path starts at `source` and ends at `target`.
        When source == target the path is [source] with 0 moves.

    Raises:
        UnreachableError: If the queue empties before reaching `target`.
                          Impossible on the 8x8 board; treated as an
                          invariant violation.
    """
    frontier: deque[tuple[Square, tuple[Square, ...]]] = deque([(source, (source,))])
    visited = {source}

    while frontier:
        current, path = frontier.popleft()
        if current == target:
            return PathResult(path)

        for neighbor in knight_moves(current):
            if neighbor not in visited:
                visited.add(neighbor)
                frontier.append((neighbor, path + (neighbor,)))

    raise UnreachableError(f"No knight path from {source} to {target}")


def knight_distances(source: Square) -> dict[Square, int]:
    """
    Minimum number of knight moves from `source` to every square.

    Same traversal as find_shortest_path without early exit, tracking only
    depths. Used as ground truth by tools/distance_table.py and the tests.
    """
    distances = {source: 0}
    frontier = deque([source])
    while frontier:
        current = frontier.popleft()
        for neighbor in knight_moves(current):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                frontier.append(neighbor)
    return distances
