"""ViewModel mediating between the console views and the catalog store."""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from app.viewmodels.photo_vm import PhotoVM
from core.models import PhotoRecord
from core.services.interfaces import StoreResult
from core.validation import RecordValidator
from infrastructure.catalog_store import CatalogStore


class CatalogVM:
    """Catalog view-model.

    Holds the one store instance created at startup and turns store results
    into lines of text for the console.
    """

    def __init__(self, store: CatalogStore, validator: RecordValidator | None = None) -> None:
        """Create a CatalogVM.

        Args:
            store: The catalog store shared by every menu action.
            validator: Record validator (defaults to `RecordValidator`).
        """
        self._store = store
        self._validator = validator or RecordValidator()

    @property
    def store(self) -> CatalogStore:
        """The underlying catalog store."""
        return self._store

    def next_id(self) -> int:
        """Id the next added photo will receive."""
        return self._store.get_next_available_id()

    def catalog_lines(self) -> list[str]:
        """Every record, or a note that the catalog is empty."""
        return self._render(self._store.get_all(), "The catalog is empty.")

    def add_photo(
        self,
        file_name: str,
        description: str | None,
        date_taken: datetime,
        file_size_mb: float,
        rating: int,
    ) -> str:
        """Validate and add a photo under the next free id; return a status line."""
        result = self._validator.build(
            self.next_id(), file_name, description, date_taken, file_size_mb, rating
        )
        if not result.ok:
            logger.info("Rejected photo input: {}", result.errors)
            return "Input error: " + " ".join(result.errors)
        return self._status(self._store.add(result.record))

    def delete_photo(self, record_id: int) -> str:
        """Delete the photo with `record_id`; return a status line."""
        return self._status(self._store.delete(record_id))

    def min_rating_lines(self, min_rating: int) -> list[str]:
        """Query result block for photos rated `min_rating` or higher."""
        title = f"--- Photos rated {min_rating} or higher: ---"
        return [title] + self._render(self._store.get_by_min_rating(min_rating))

    def taken_after_lines(self, date: datetime) -> list[str]:
        """Query result block for photos taken after `date`."""
        title = f"--- Photos taken after {date.strftime('%d.%m.%Y')}: ---"
        return [title] + self._render(self._store.get_taken_after(date))

    def total_count_line(self) -> str:
        """Line reporting the number of photos."""
        return f"Total photos in the catalog: {self._store.get_total_count()}"

    def largest_lines(self) -> list[str]:
        """The largest photo, or a note that the catalog is empty."""
        largest = self._store.get_largest()
        if largest is None:
            return ["The catalog is empty, nothing to search."]
        return ["Photo with the largest file size:", PhotoVM(largest).display_text()]

    @staticmethod
    def _render(
        records: list[PhotoRecord], empty_text: str = "Nothing matched your query."
    ) -> list[str]:
        if not records:
            return [empty_text]
        return [PhotoVM(r).display_text() for r in records]

    @staticmethod
    def _status(result: StoreResult) -> str:
        if result:
            return result.message
        return f"Error: {result.message}"
