"""
Submit / retrieve operations.

Submission is compute-then-poll: submit() stores the result and hands back
only the operation identifier; the caller fetches the path with retrieve().
compute() is a synchronous shortcut that skips persistence.
"""

import logging
from typing import Callable

from knightpath.records import PathRecord, new_operation_id
from knightpath.search import PathResult, find_shortest_path
from knightpath.squares import Square
from knightpath.store import ResultStore

_log = logging.getLogger(__name__)


class KnightPathService:
    """
    Validates square labels, runs the search, and persists the results.

    Attributes:
        store:    Where records are saved and looked up.
        new_id:   Factory for operation identifiers (UUID4 by default).
    """

    def __init__(
        self,
        store: ResultStore,
        new_id: Callable[[], str] = new_operation_id,
    ) -> None:
        self.store = store
        self.new_id = new_id

    def submit(self, source: str, target: str) -> str:
        """
        Compute the shortest path between two labels and persist it.

        Both labels are validated before the search runs, so an invalid
        square never reaches the search or the store.

        Args:
            source: Starting square label, e.g. "A1".
            target: Destination square label, e.g. "H8".

        Returns:
            The operation identifier under which the result was saved.

        Raises:
            InvalidSquareError: Either label is not a board square.
            CorruptStoreError, StorageIOError: The result could not be saved.
        """
        origin = Square.from_label(source)
        destination = Square.from_label(target)

        result = find_shortest_path(origin, destination)
        record = PathRecord.from_result(self.new_id(), origin, destination, result)
        self.store.save(record)

        _log.info(
            "Operation %s: %s -> %s in %d moves",
            record.operation_id,
            record.starting,
            record.ending,
            record.number_of_moves,
        )
        return record.operation_id

    def retrieve(self, operation_id: str) -> PathRecord:
        """Return the saved record; raises RecordNotFoundError if unknown."""
        return self.store.load(operation_id)

    def compute(self, source: str, target: str) -> PathResult:
        return find_shortest_path(Square.from_label(source), Square.from_label(target))
