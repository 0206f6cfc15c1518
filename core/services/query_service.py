"""Read-only queries over a sequence of photo records.

All functions are pure: they never mutate the input and return new lists.
Sorting relies on `sorted` being stable, so records that tie on the sort key
keep their catalog order.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from core.models import PhotoRecord


def by_min_rating(records: Iterable[PhotoRecord], min_rating: int) -> list[PhotoRecord]:
    """Records rated `min_rating` or higher, best rated first."""
    matched = [r for r in records if r.rating >= min_rating]
    return sorted(matched, key=lambda r: r.rating, reverse=True)


def taken_after(records: Iterable[PhotoRecord], date: datetime) -> list[PhotoRecord]:
    """Records taken strictly after `date`, oldest first."""
    matched = [r for r in records if r.date_taken > date]
    return sorted(matched, key=lambda r: r.date_taken)


def largest(records: Iterable[PhotoRecord]) -> PhotoRecord | None:
    """Record with the biggest file size; the first one wins a tie."""
    best: PhotoRecord | None = None
    for record in records:
        if best is None or record.file_size_mb > best.file_size_mb:
            best = record
    return best


def next_id(records: Iterable[PhotoRecord]) -> int:
    """`max(id) + 1`, or 1 for no records."""
    ids = [r.id for r in records]
    return max(ids) + 1 if ids else 1
