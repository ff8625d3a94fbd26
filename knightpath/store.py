"""
ResultStore: the persisted collection of PathRecord objects.

Persistence model:
    The whole collection is one JSON array in one file. Every save reads the
    array, appends the new record, and writes the complete array back. This
    keeps the format trivial to inspect but costs O(n) per save, so it is only
    suitable for low request volume.

Concurrency:
    - Saves are serialized by a per-store lock, so two concurrent saves can
      never both read the old array and lose one append.
    - The new array is written to a unique temp file in the same directory and
      moved into place with os.replace. Readers see either the old or the new
      document, never a partial one, so loads take no lock.
    - The lock is process-local. Several server processes sharing one file are
      not supported; run a single worker.

Corruption:
    A file that exists but does not decode to a valid collection raises
    CorruptStoreError on load and on save. It is never read as an empty
    collection, and save refuses to overwrite it.
"""

import logging
import os
import threading
from pathlib import Path
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from knightpath.errors import (
    CorruptStoreError,
    DuplicateRecordError,
    RecordNotFoundError,
    StorageIOError,
)
from knightpath.records import PathRecord

_log = logging.getLogger(__name__)

_COLLECTION = TypeAdapter(list[PathRecord])


def _atomic_temp_path(target_path: Path) -> Path:
    """Create a unique temp path next to the target for atomic replacement."""
    return target_path.parent / f".{target_path.name}.{uuid4().hex}.tmp"


class ResultStore:
    """
    Identifier-indexed store of computed knight paths backed by a JSON file.

    Attributes:
        path: Location of the JSON collection. Created on the first save.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def save(self, record: PathRecord) -> None:
        """
        Append `record` to the persisted collection.

        Raises:
            CorruptStoreError:    The existing file cannot be decoded; it is left
                                  untouched.
            DuplicateRecordError: A record with the same identifier is already
                                  stored. Identifiers stay unique so every
                                  record remains retrievable.
            StorageIOError:       Reading or writing the file failed.
        """
        with self._lock:
            records = self._read_all()
            if any(r.operation_id == record.operation_id for r in records):
                raise DuplicateRecordError(record.operation_id)
            records.append(record)
            self._write_all(records)
        _log.debug("Saved operation %s (%d records)", record.operation_id, len(records))

    def load(self, operation_id: str) -> PathRecord:
        """
        Return the first record whose identifier equals `operation_id`.

        Raises:
            RecordNotFoundError: No such record, or nothing saved yet.
            CorruptStoreError:   The file cannot be decoded.
            StorageIOError:      Reading the file failed.
        """
        for record in self._read_all():
            if record.operation_id == operation_id:
                return record
        raise RecordNotFoundError(operation_id)

    def records(self) -> list[PathRecord]:
        """All saved records in insertion order."""
        return self._read_all()

    # -----------------------------------------------------------------------
    # File access
    # -----------------------------------------------------------------------

    def _read_all(self) -> list[PathRecord]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageIOError(f"Cannot read {self.path}: {exc}") from exc

        try:
            return _COLLECTION.validate_json(data)
        except ValidationError as exc:
            raise CorruptStoreError(
                f"{self.path} does not hold a valid path collection: "
                f"{exc.error_count()} error(s)"
            ) from exc

    def _write_all(self, records: list[PathRecord]) -> None:
        payload = _COLLECTION.dump_json(records, by_alias=True, indent=2)
        temp_path = _atomic_temp_path(self.path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(payload)
            os.replace(temp_path, self.path)
        except OSError as exc:
            raise StorageIOError(f"Cannot write {self.path}: {exc}") from exc
        finally:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                _log.warning("Could not remove temp file %s", temp_path, exc_info=True)
