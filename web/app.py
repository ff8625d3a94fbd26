"""
FastAPI web application for the knight path service.

Endpoints:
    POST /api/knightpath           — compute and store a path, return its id
    GET  /api/knightpath           — fetch a stored path by operation id
    GET  /api/knightpath/shortest  — compute a path without storing it

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool.
  The search is CPU-bound and the store does blocking file I/O, so neither
  belongs on the event loop.
- Compute-then-poll: POST returns only the operation id. Clients read the
  result back with GET, which is why results are persisted at all.
- Missing or blank query parameters are answered with 400 rather than
  FastAPI's default 422, so every client-side mistake maps to one status.
- Domain errors are raised by the knightpath package and translated to
  HTTPException here, at the route boundary only.
"""

import logging
from functools import lru_cache

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from knightpath.config import get_settings
from knightpath.errors import (
    CorruptStoreError,
    DuplicateRecordError,
    InvalidSquareError,
    RecordNotFoundError,
    StorageIOError,
    UnreachableError,
)
from knightpath.records import PathRecord
from knightpath.service import KnightPathService
from knightpath.store import ResultStore

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=get_settings().log_level)
_log = logging.getLogger(__name__)

app = FastAPI(title="Knight Path", version="1.0.0")


@lru_cache
def get_service() -> KnightPathService:
    """Build the process-wide service on first use (one store, one lock)."""
    settings = get_settings()
    _log.info("Persisting knight paths to %s", settings.data_file)
    return KnightPathService(ResultStore(settings.data_file))


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SubmitResponse(BaseModel):
    """
    Acknowledgement of a submitted path request.

    Fields:
        operation_id: Handle to pass to GET /api/knightpath.
        message:      Human-readable confirmation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    operation_id: str
    message: str


class ShortestPathResponse(BaseModel):
    """Synchronous result: same fields as a stored record, minus the id."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    starting: str
    ending: str
    shortest_path: str
    number_of_moves: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise HTTPException(status_code=400, detail=message)
    return value


def _internal_error(exc: Exception, context: str) -> HTTPException:
    _log.exception("%s failed", context)
    return HTTPException(status_code=500, detail=f"{context} failed: {exc}")


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/knightpath", response_model=SubmitResponse)
def submit_knight_path(
    source: str | None = Query(default=None),
    target: str | None = Query(default=None),
    service: KnightPathService = Depends(get_service),
) -> SubmitResponse:
    """
    Compute the shortest knight path and store it under a new operation id.

    Raises:
        HTTPException 400: Missing or invalid square.
        HTTPException 500: The result could not be persisted.
    """
    message = "Source and target positions are required."
    source = _require(source, message)
    target = _require(target, message)

    try:
        operation_id = service.submit(source, target)
    except InvalidSquareError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (CorruptStoreError, DuplicateRecordError, StorageIOError, UnreachableError) as exc:
        raise _internal_error(exc, "Saving knight path") from exc

    return SubmitResponse(
        operation_id=operation_id,
        message=(
            f"Operation Id {operation_id} was created. "
            "Please query it to find your results."
        ),
    )


@app.get("/api/knightpath", response_model=PathRecord)
def get_knight_path(
    operation_id: str | None = Query(default=None, alias="operationId"),
    service: KnightPathService = Depends(get_service),
) -> PathRecord:
    """
    Return the stored path for an operation id.

    Raises:
        HTTPException 400: Missing operation id.
        HTTPException 404: Unknown operation id.
        HTTPException 500: The store is unreadable.
    """
    operation_id = _require(operation_id, "OperationId is required.")

    try:
        return service.retrieve(operation_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail="OperationId not found.") from exc
    except (CorruptStoreError, StorageIOError) as exc:
        raise _internal_error(exc, "Loading knight path") from exc


@app.get("/api/knightpath/shortest", response_model=ShortestPathResponse)
def get_shortest_path(
    source: str | None = Query(default=None),
    target: str | None = Query(default=None),
    service: KnightPathService = Depends(get_service),
) -> ShortestPathResponse:
    """Compute a path synchronously without persisting it."""
    message = "Source and target positions are required."
    source = _require(source, message)
    target = _require(target, message)

    try:
        result = service.compute(source, target)
    except InvalidSquareError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UnreachableError as exc:
        raise _internal_error(exc, "Computing knight path") from exc

    return ShortestPathResponse(
        starting=result.path[0].label,
        ending=result.path[-1].label,
        shortest_path=result.render(),
        number_of_moves=result.number_of_moves,
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
