"""Lightweight view model wrapper around `PhotoRecord`."""

from __future__ import annotations

from dataclasses import dataclass

from app.views.constants import INPUT_DATETIME_FMT, RECORD_SEPARATOR
from core.models import PhotoRecord


@dataclass
class PhotoVM:
    """Expose display-ready values for console output."""

    record: PhotoRecord

    @property
    def date_text(self) -> str:
        """Capture date as `dd.MM.yyyy HH:mm`."""
        return self.record.date_taken.strftime(INPUT_DATETIME_FMT)

    @property
    def size_text(self) -> str:
        """File size with two decimals."""
        return f"{self.record.file_size_mb:.2f}"

    @property
    def rating_text(self) -> str:
        """Rating out of five, e.g. `4/5`."""
        return f"{self.record.rating}/5"

    def display_text(self) -> str:
        """Multi-line block used when listing records."""
        r = self.record
        return "\n".join(
            [
                f"ID: {r.id}",
                f"  File name:   {r.file_name}",
                f"  Description: {r.description}",
                f"  Date taken:  {self.date_text}",
                f"  Size (MB):   {self.size_text}",
                f"  Rating:      {self.rating_text}",
                RECORD_SEPARATOR,
            ]
        )
