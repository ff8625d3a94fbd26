"""Exceptions raised by the knight path core."""


class KnightPathError(Exception):
    """Base class for every error raised by this package."""


class InvalidSquareError(KnightPathError, ValueError):
    """A square label or coordinate pair is not on the 8x8 board."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid square {value!r}: expected a chess position from A1 to H8"
        )


class RecordNotFoundError(KnightPathError, LookupError):
    """No persisted record carries the requested operation identifier."""

    def __init__(self, operation_id: str) -> None:
        self.operation_id = operation_id
        super().__init__(f"OperationId {operation_id!r} not found")


class CorruptStoreError(KnightPathError):
    """The persisted collection exists but cannot be decoded."""


class StorageIOError(KnightPathError):
    """Reading or writing the persisted collection failed at the OS level."""


class UnreachableError(KnightPathError):
    """BFS exhausted the board without reaching the target.

    Cannot happen on the connected 8x8 knight graph; raised as an invariant
    violation rather than returned as a normal result.
    """


class DuplicateRecordError(KnightPathError):
    """A record with the same operation identifier is already stored."""

    def __init__(self, operation_id: str) -> None:
        self.operation_id = operation_id
        super().__init__(f"OperationId {operation_id!r} already exists")
