"""Tests for the CSV snapshot format."""

from __future__ import annotations

from datetime import datetime
import os
from pathlib import Path

import pytest

from core.errors import CorruptStateError, PersistenceError
from infrastructure.csv_repository import CSV_HEADERS, CsvPhotoRepository

HEADER_LINE = ",".join(CSV_HEADERS)


def test_empty_catalog_is_header_only(tmp_path: Path) -> None:
    path = tmp_path / "c.csv"
    repo = CsvPhotoRepository()

    repo.save(str(path), [])

    assert path.read_text(encoding="utf-8").strip() == HEADER_LINE
    assert repo.load(str(path)) == []


def test_row_layout(tmp_path: Path, make_record) -> None:
    path = tmp_path / "c.csv"
    record = make_record(
        4,
        file_name="dog.png",
        description="Park",
        date_taken=datetime(2023, 1, 2, 3, 4),
        file_size_mb=1.25,
        rating=4,
    )

    CsvPhotoRepository().save(str(path), [record])

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [HEADER_LINE, "4,dog.png,Park,2023-01-02 03:04:00,1.25,4"]


def test_save_replaces_previous_content(tmp_path: Path, make_record) -> None:
    path = tmp_path / "c.csv"
    repo = CsvPhotoRepository()
    repo.save(str(path), [make_record(1), make_record(2)])
    repo.save(str(path), [make_record(3)])

    assert [r.id for r in repo.load(str(path))] == [3]


def test_save_leaves_no_temp_files(tmp_path: Path, make_record) -> None:
    CsvPhotoRepository().save(str(tmp_path / "c.csv"), [make_record(1)])
    assert sorted(os.listdir(tmp_path)) == ["c.csv"]


def test_float_precision_survives(tmp_path: Path, make_record) -> None:
    path = tmp_path / "c.csv"
    repo = CsvPhotoRepository()
    size = 1 / 3
    repo.save(str(path), [make_record(1, file_size_mb=size)])
    assert repo.load(str(path))[0].file_size_mb == size


def test_unicode_text_survives(tmp_path: Path, make_record) -> None:
    path = tmp_path / "c.csv"
    repo = CsvPhotoRepository()
    record = make_record(1, file_name="закат.jpg", description="море, солнце")
    repo.save(str(path), [record])
    loaded = repo.load(str(path))[0]
    assert loaded.file_name == "закат.jpg"
    assert loaded.description == "море, солнце"


@pytest.mark.parametrize(
    "content",
    [
        "Id,FileName\n1,a.jpg\n",
        f"{HEADER_LINE}\nx,a.jpg,,2024-01-01 00:00:00,1.0,3\n",
        f"{HEADER_LINE}\n1,a.jpg,,01.01.2024,1.0,3\n",
        f"{HEADER_LINE}\n1,a.jpg,,2024-01-01 00:00:00,big,3\n",
        f"{HEADER_LINE}\n1,a.jpg,,2024-01-01 00:00:00,1.0\n",
        f"{HEADER_LINE}\n1,a.jpg,,2024-01-01 00:00:00,1.0,3,extra\n",
    ],
    ids=["missing-headers", "bad-id", "bad-date", "bad-size", "short-row", "long-row"],
)
def test_unparseable_content_is_corrupt(tmp_path: Path, content: str) -> None:
    path = tmp_path / "c.csv"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CorruptStateError):
        CsvPhotoRepository().load(str(path))


def test_duplicate_ids_are_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "c.csv"
    path.write_text(
        f"{HEADER_LINE}\n"
        "1,a.jpg,,2024-01-01 00:00:00,1.0,3\n"
        "1,b.jpg,,2024-01-02 00:00:00,2.0,4\n",
        encoding="utf-8",
    )
    with pytest.raises(CorruptStateError, match="Duplicate"):
        CsvPhotoRepository().load(str(path))


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        CsvPhotoRepository().load(str(tmp_path / "absent.csv"))


def test_unserializable_record_raises_serialization_error(tmp_path: Path, make_record) -> None:
    bad = make_record(1, date_taken="not a datetime")
    with pytest.raises(PersistenceError) as info:
        CsvPhotoRepository().save(str(tmp_path / "c.csv"), [bad])
    assert info.value.kind == "serialization"


def test_unwritable_target_raises_io_error(tmp_path: Path, make_record) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a folder", encoding="utf-8")
    with pytest.raises(PersistenceError) as info:
        CsvPhotoRepository().save(str(blocker / "c.csv"), [make_record(1)])
    assert info.value.kind in {"io", "permission"}


def test_years_before_1000_round_trip(tmp_path: Path, make_record) -> None:
    path = tmp_path / "c.csv"
    repo = CsvPhotoRepository()
    when = datetime(999, 1, 1, 10, 0)

    repo.save(str(path), [make_record(1, date_taken=when)])

    assert "0999-01-01 10:00:00" in path.read_text(encoding="utf-8")
    assert repo.load(str(path))[0].date_taken == when


def test_unencodable_text_raises_serialization_error(tmp_path: Path, make_record) -> None:
    path = tmp_path / "c.csv"
    repo = CsvPhotoRepository()
    repo.save(str(path), [make_record(1)])

    with pytest.raises(PersistenceError) as info:
        repo.save(str(path), [make_record(1), make_record(2, file_name="IMG\udcff.jpg")])

    assert info.value.kind == "serialization"
    assert [r.id for r in repo.load(str(path))] == [1]
    assert sorted(os.listdir(tmp_path)) == ["c.csv"]
