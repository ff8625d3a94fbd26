"""
Persisted path records.

A PathRecord is created once per submission and never modified afterwards.
On disk it uses camelCase keys so the stored collection reads the same as
the HTTP payloads:

    {"operationId": "...", "starting": "A1", "ending": "B3",
     "shortestPath": "A1:B3", "numberOfMoves": 1}

Loading re-validates every field. A record with an unknown square label or a
path that does not start and end where it claims is rejected, which lets the
store report a corrupt collection instead of serving bad data.
"""

import uuid

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from knightpath.constants import PATH_DELIMITER
from knightpath.search import PathResult
from knightpath.squares import Square, is_knight_move


def new_operation_id() -> str:
    """Return a fresh random (UUID4) operation identifier."""
    return str(uuid.uuid4())


class PathRecord(BaseModel):
    """
    One computed knight path, keyed by its operation identifier.

    Fields:
        operation_id:    Opaque unique identifier handed back on submission.
        starting:        Source square label.
        ending:          Target square label.
        shortest_path:   Square labels joined by PATH_DELIMITER.
        number_of_moves: Length of the path minus one.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    operation_id: str
    starting: str
    ending: str
    shortest_path: str
    number_of_moves: int

    @field_validator("starting", "ending")
    @classmethod
    def check_square_label(cls, v: str) -> str:
        """Reject labels that are not on the board; store them upper-case."""
        return Square.from_label(v).label

    @model_validator(mode="after")
    def check_path_consistency(self) -> "PathRecord":
        """The stored path must be a chain of knight moves from `starting` to `ending`."""
        labels = self.path_labels
        if len(labels) != self.number_of_moves + 1:
            raise ValueError("numberOfMoves does not match shortestPath length")
        if labels[0] != self.starting or labels[-1] != self.ending:
            raise ValueError("shortestPath does not run from starting to ending")
        squares = [Square.from_label(label) for label in labels]
        for origin, destination in zip(squares, squares[1:]):
            if not is_knight_move(origin, destination):
                raise ValueError(f"{origin}->{destination} is not a knight move")
        return self

    @property
    def path_labels(self) -> list[str]:
        return self.shortest_path.split(PATH_DELIMITER)

    @classmethod
    def from_result(
        cls,
        operation_id: str,
        source: Square,
        target: Square,
        result: PathResult,
    ) -> "PathRecord":
        """Wrap a search result for persistence."""
        return cls(
            operation_id=operation_id,
            starting=source.label,
            ending=target.label,
            shortest_path=result.render(),
            number_of_moves=result.number_of_moves,
        )
