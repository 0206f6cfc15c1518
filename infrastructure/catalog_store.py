"""Catalog store: the in-memory photo collection and its data file.

The store loads the data file once at construction and writes a full
snapshot after every successful mutation. Expected failures (duplicate id,
unknown id, failed save, corrupt file) are reported through `StoreResult`
or `load_warning` and logged; only caller misuse raises.

Known asymmetry: a failed save rolls back `add` but not `delete`. After a
delete whose save failed, memory no longer holds the record while the data
file still does.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from pathlib import Path

from loguru import logger

from core.errors import CorruptStateError, InvalidArgumentError, PersistenceError
from core.models import PhotoRecord
from core.services import query_service
from core.services.interfaces import FailureReason, PhotoRepository, StoreResult
from infrastructure.csv_repository import CsvPhotoRepository

_SAVE_FAILURE_LABELS = {
    "serialization": "Serialization error",
    "permission": "Access error",
    "io": "I/O error",
}


class CatalogStore:
    """Owns the photo catalog and keeps it in step with the data file."""

    def __init__(self, file_path: str | Path, repository: PhotoRepository | None = None) -> None:
        """Create the store and load `file_path`.

        Args:
            file_path: Location of the data file. It need not exist yet.
            repository: Storage backend (defaults to `CsvPhotoRepository`).

        Raises:
            InvalidArgumentError: `file_path` is None or empty.
        """
        if file_path is None or not str(file_path).strip():
            raise InvalidArgumentError("file_path must be a non-empty path")
        self._file_path = str(file_path)
        self._repo: PhotoRepository = repository or CsvPhotoRepository()
        self.load_warning: str | None = None
        self._photos: list[PhotoRecord] = self._load()

    @property
    def file_path(self) -> str:
        """Path of the backing data file."""
        return self._file_path

    def _load(self) -> list[PhotoRecord]:
        path = Path(self._file_path)
        if not path.exists():
            self._warn(
                f"Data file '{path}' not found. A new empty catalog will be created on first save."
            )
            return []

        try:
            if path.stat().st_size == 0:
                self._warn(f"Data file '{path}' is empty. Loaded an empty catalog.")
                return []
            photos = list(self._repo.load(self._file_path))
        except CorruptStateError as ex:
            self._warn(
                f"Cannot parse data file '{path}': {ex}. "
                "The file may be damaged or incompatible; starting with an empty catalog."
            )
            return []
        except OSError as ex:
            self._warn(
                f"I/O error reading data file '{path}': {ex}. Starting with an empty catalog."
            )
            return []
        except Exception as ex:  # pylint: disable=broad-exception-caught
            self._warn(
                f"Unexpected error loading data file '{path}': {ex}. "
                "Starting with an empty catalog."
            )
            return []

        logger.info("Loaded {} photos from {}", len(photos), path)
        return photos

    def _warn(self, message: str) -> None:
        self.load_warning = message
        logger.warning(message)

    def _save(self) -> StoreResult:
        try:
            self._repo.save(self._file_path, list(self._photos))
        except PersistenceError as ex:
            label = _SAVE_FAILURE_LABELS.get(ex.kind, "Unexpected error")
            message = f"{label} while saving '{self._file_path}': {ex}"
            logger.error(message)
            return StoreResult(False, FailureReason.PERSISTENCE_FAILURE, message)
        except OSError as ex:
            message = f"I/O error while saving '{self._file_path}': {ex}"
            logger.error(message)
            return StoreResult(False, FailureReason.PERSISTENCE_FAILURE, message)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            message = f"Unexpected error while saving '{self._file_path}': {ex}"
            logger.exception(message)
            return StoreResult(False, FailureReason.PERSISTENCE_FAILURE, message)
        return StoreResult(True)

    def add(self, record: PhotoRecord) -> StoreResult:
        """Append `record` and persist the catalog.

        The record is removed again if the save fails.

        Raises:
            InvalidArgumentError: `record` is None.
        """
        if record is None:
            raise InvalidArgumentError("record must not be None")

        if any(p.id == record.id for p in self._photos):
            message = f"A photo with ID={record.id} already exists in the catalog."
            logger.warning(message)
            return StoreResult(False, FailureReason.DUPLICATE_KEY, message)

        self._photos.append(replace(record))
        saved = self._save()
        if not saved:
            self._photos.pop()
            message = (
                f"Photo '{record.file_name}' was not added: the catalog could not be saved."
            )
            logger.warning("{} Rolled back. ({})", message, saved.message)
            return StoreResult(False, FailureReason.PERSISTENCE_FAILURE, message)

        message = f"Photo '{record.file_name}' (ID={record.id}) added."
        logger.info(message)
        return StoreResult(True, message=message)

    def delete(self, record_id: int) -> StoreResult:
        """Remove the first record with `record_id` and persist the catalog.

        The removal stays in effect even when the save fails.
        """
        index = next((i for i, p in enumerate(self._photos) if p.id == record_id), None)
        if index is None:
            message = f"Photo with ID={record_id} not found."
            logger.warning(message)
            return StoreResult(False, FailureReason.NOT_FOUND, message)

        del self._photos[index]
        saved = self._save()
        if not saved:
            message = (
                f"Photo with ID={record_id} was removed from memory, "
                "but the change could not be saved to the data file."
            )
            logger.warning("{} ({})", message, saved.message)
            return StoreResult(False, FailureReason.PERSISTENCE_FAILURE, message)

        message = f"Photo with ID={record_id} deleted."
        logger.info(message)
        return StoreResult(True, message=message)

    def get_all(self) -> list[PhotoRecord]:
        """Snapshot of all records in catalog order."""
        return [replace(p) for p in self._photos]

    def get_by_min_rating(self, min_rating: int) -> list[PhotoRecord]:
        """Records with `rating >= min_rating`, highest rating first."""
        return [replace(p) for p in query_service.by_min_rating(self._photos, min_rating)]

    def get_taken_after(self, date: datetime) -> list[PhotoRecord]:
        """Records with `date_taken > date`, oldest first."""
        return [replace(p) for p in query_service.taken_after(self._photos, date)]

    def get_total_count(self) -> int:
        """Number of records in the catalog."""
        return len(self._photos)

    def get_largest(self) -> PhotoRecord | None:
        """Largest record by file size, or None for an empty catalog."""
        found = query_service.largest(self._photos)
        return replace(found) if found is not None else None

    def get_next_available_id(self) -> int:
        """Id to use for the next new record."""
        return query_service.next_id(self._photos)
