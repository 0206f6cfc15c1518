"""CSV persistence for the photo catalog.

The whole catalog is stored as one CSV snapshot with a header row. Loading is
strict: any unreadable row makes the file corrupt, because a partially
loaded catalog would be silently overwritten by the next save. Saving goes
through a temporary file in the target directory and `os.replace`, so the
data file is either the old snapshot or the new one.
"""

from __future__ import annotations

from collections.abc import Sequence
import csv
from datetime import datetime
import os
from pathlib import Path
import tempfile

from loguru import logger

from core.errors import CorruptStateError, PersistenceError
from core.models import PhotoRecord

CSV_HEADERS = [
    "Id",
    "FileName",
    "Description",
    "DateTaken",
    "FileSizeMB",
    "Rating",
]

CSV_DT_FMT = "%Y-%m-%d %H:%M:%S"


def _parse_datetime(value: str) -> datetime:
    """Parse `DateTaken` using `CSV_DT_FMT`."""
    try:
        return datetime.strptime(value, CSV_DT_FMT)
    except (ValueError, TypeError) as ex:
        raise CorruptStateError(f"Invalid DateTaken: {value!r}") from ex


def _parse_int(value: str, column: str) -> int:
    try:
        return int(value)
    except (ValueError, TypeError) as ex:
        raise CorruptStateError(f"Invalid {column}: {value!r}") from ex


def _parse_float(value: str, column: str) -> float:
    try:
        return float(value)
    except (ValueError, TypeError) as ex:
        raise CorruptStateError(f"Invalid {column}: {value!r}") from ex


def _format_datetime(value: datetime) -> str:
    """Format `DateTaken`; the year is zero-padded so `strptime("%Y")` reads it back."""
    return f"{value.year:04d}-" + value.strftime("%m-%d %H:%M:%S")


def _format_row(record: PhotoRecord) -> dict[str, object]:
    return {
        "Id": record.id,
        "FileName": record.file_name,
        "Description": record.description,
        "DateTaken": _format_datetime(record.date_taken),
        # repr keeps every digit so the float round-trips exactly
        "FileSizeMB": repr(float(record.file_size_mb)),
        "Rating": record.rating,
    }


class CsvPhotoRepository:
    """Load and save photo records in CSV format."""

    def load(self, path: str) -> list[PhotoRecord]:
        """Return records from the CSV at `path` in file order.

        Raises:
            CorruptStateError: Headers are missing, a value cannot be parsed,
                or two rows share an id.
            OSError: The file cannot be opened or read.
        """
        records: list[PhotoRecord] = []
        seen_ids: set[int] = set()
        try:
            with Path(path).open("r", encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                fieldnames = reader.fieldnames or []
                missing = [h for h in CSV_HEADERS if h not in fieldnames]
                if missing:
                    raise CorruptStateError(f"CSV missing required headers: {missing}")

                for line_no, row in enumerate(reader, start=2):
                    if None in row or any(row.get(h) is None for h in CSV_HEADERS):
                        raise CorruptStateError(f"Malformed row at line {line_no}")
                    record = PhotoRecord(
                        id=_parse_int(row["Id"], "Id"),
                        file_name=row["FileName"],
                        description=row["Description"],
                        date_taken=_parse_datetime(row["DateTaken"]),
                        file_size_mb=_parse_float(row["FileSizeMB"], "FileSizeMB"),
                        rating=_parse_int(row["Rating"], "Rating"),
                    )
                    if record.id in seen_ids:
                        raise CorruptStateError(f"Duplicate Id {record.id} at line {line_no}")
                    seen_ids.add(record.id)
                    records.append(record)
        except (UnicodeDecodeError, csv.Error) as ex:
            raise CorruptStateError(f"Unreadable CSV content: {ex}") from ex

        logger.debug("Loaded {} records from {}", len(records), path)
        return records

    def save(self, path: str, records: Sequence[PhotoRecord]) -> None:
        """Replace the CSV at `path` with `records`, creating parent folders.

        Raises:
            PersistenceError: With `kind` "serialization", "permission" or "io".
        """
        target = Path(path)
        try:
            rows = [_format_row(r) for r in records]
        except (AttributeError, TypeError, ValueError) as ex:
            raise PersistenceError(f"Cannot serialize records: {ex}", kind="serialization") from ex

        tmp_name: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
                writer.writeheader()
                writer.writerows(rows)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
            tmp_name = None
        except (UnicodeError, ValueError, csv.Error) as ex:
            raise PersistenceError(
                f"Cannot encode records for {target}: {ex}", kind="serialization"
            ) from ex
        except PermissionError as ex:
            raise PersistenceError(
                f"Permission denied writing {target}: {ex}", kind="permission"
            ) from ex
        except OSError as ex:
            raise PersistenceError(f"I/O error writing {target}: {ex}", kind="io") from ex
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file {}", tmp_name)
