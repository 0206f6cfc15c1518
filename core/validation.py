"""Field-level validation for candidate photo records.

The validator is the only place where field constraints are checked. It
never raises for bad input; it returns a `ValidationResult` carrying either
the constructed record or the list of problems found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.models import PhotoRecord

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class ValidationResult:
    """Outcome of building a record.

    Attributes:
        record: The valid record, or None when validation failed.
        errors: Human-readable problems; empty on success.
    """

    record: PhotoRecord | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when a record was produced."""
        return self.record is not None and not self.errors


class RecordValidator:
    """Builds `PhotoRecord` instances from raw field values."""

    def build(
        self,
        record_id: int,
        file_name: Any,
        description: Any,
        date_taken: Any,
        file_size_mb: Any,
        rating: Any,
    ) -> ValidationResult:
        """Validate the given values and construct a record when all pass."""
        errors: list[str] = []

        if isinstance(record_id, bool) or not isinstance(record_id, int):
            errors.append("Id must be an integer.")

        if file_name is None:
            errors.append("File name must not be missing.")
        elif not isinstance(file_name, str) or not file_name.strip():
            errors.append("File name must not be empty or whitespace.")

        if description is None:
            description = ""
        elif not isinstance(description, str):
            errors.append("Description must be text.")

        if not isinstance(date_taken, datetime):
            errors.append("Date taken must be a date-time value.")

        if isinstance(file_size_mb, bool) or not isinstance(file_size_mb, (int, float)):
            errors.append("File size must be a number.")
        elif file_size_mb < 0:
            errors.append("File size must not be negative.")

        if isinstance(rating, bool) or not isinstance(rating, int):
            errors.append("Rating must be an integer.")
        elif not MIN_RATING <= rating <= MAX_RATING:
            errors.append(f"Rating must be between {MIN_RATING} and {MAX_RATING}.")

        if errors:
            return ValidationResult(errors=errors)

        return ValidationResult(
            record=PhotoRecord(
                id=record_id,
                file_name=file_name,
                description=description,
                date_taken=date_taken,
                file_size_mb=float(file_size_mb),
                rating=rating,
            )
        )
