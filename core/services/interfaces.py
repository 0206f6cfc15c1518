"""Core service interfaces and shared data structures.

This module defines the outcome type returned by catalog mutations and the
storage protocol the catalog store persists through.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from core.models import PhotoRecord


class FailureReason(Enum):
    """Why a catalog mutation did not succeed."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILURE = "persistence_failure"


@dataclass
class StoreResult:
    """Outcome of a catalog mutation.

    Truthy exactly when `success` is True, so callers that only need the
    boolean can test the result directly.

    Attributes:
        success: Whether the mutation is in effect and durable.
        reason: Failure tag, None on success.
        message: Human-readable status text for logs and the console.
    """

    success: bool
    reason: FailureReason | None = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.success


class PhotoRepository(Protocol):
    """Whole-file snapshot storage for photo records."""

    def load(self, path: str) -> list[PhotoRecord]:
        """Return records stored at `path` in saved order.

        Raises:
            CorruptStateError: Content cannot be parsed.
            OSError: The file cannot be read.
        """
        raise NotImplementedError

    def save(self, path: str, records: Sequence[PhotoRecord]) -> None:
        """Replace the file at `path` with `records`.

        Raises:
            PersistenceError: Serialization or writing failed.
        """
        raise NotImplementedError
