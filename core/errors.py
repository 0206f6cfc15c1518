"""Exception hierarchy for the photo catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidArgumentError(CatalogError, ValueError):
    """A required argument to a catalog operation was missing or empty."""


class CorruptStateError(CatalogError):
    """The data file exists but its content cannot be parsed."""


class PersistenceError(CatalogError):
    """Writing the data file failed.

    Attributes:
        kind: One of "serialization", "permission" or "io".
    """

    def __init__(self, message: str, kind: str = "io") -> None:
        super().__init__(message)
        self.kind = kind
