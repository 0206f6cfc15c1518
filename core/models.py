"""Core domain model for photo catalog records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class PhotoRecord:
    """A single photo entry held by the catalog.

    Field constraints (non-empty name, non-negative size, rating 1-5) are
    enforced by `core.validation.RecordValidator` before a record reaches
    the store; the store itself only guarantees `id` uniqueness.
    """

    id: int
    file_name: str
    description: str
    date_taken: datetime
    file_size_mb: float
    rating: int
