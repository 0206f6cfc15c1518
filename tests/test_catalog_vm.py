from __future__ import annotations

from datetime import datetime
from pathlib import Path

from app.viewmodels.catalog_vm import CatalogVM
from app.viewmodels.photo_vm import PhotoVM
from core.errors import PersistenceError
from infrastructure.catalog_store import CatalogStore
from infrastructure.csv_repository import CsvPhotoRepository


class FailingRepository(CsvPhotoRepository):
    def save(self, path, records):
        raise PersistenceError("read-only medium", kind="permission")


def test_invalid_input_is_not_added(data_file: Path) -> None:
    vm = CatalogVM(CatalogStore(data_file))

    status = vm.add_photo("  ", None, datetime(2024, 1, 1), -2.0, 7)

    assert status.startswith("Input error:")
    assert vm.store.get_total_count() == 0


def test_failed_save_is_reported(data_file: Path) -> None:
    vm = CatalogVM(CatalogStore(data_file, repository=FailingRepository()))

    status = vm.add_photo("a.jpg", "", datetime(2024, 1, 1), 1.0, 3)

    assert status.startswith("Error: Photo 'a.jpg' was not added")
    assert vm.store.get_total_count() == 0


def test_next_id_follows_store(data_file: Path, make_record) -> None:
    store = CatalogStore(data_file)
    store.add(make_record(12))
    assert CatalogVM(store).next_id() == 13


def test_photo_display_text(make_record) -> None:
    record = make_record(
        3,
        file_name="beach.jpg",
        description="Sunset",
        date_taken=datetime(2024, 7, 1, 19, 45),
        file_size_mb=4.2,
        rating=5,
    )
    assert PhotoVM(record).display_text().splitlines() == [
        "ID: 3",
        "  File name:   beach.jpg",
        "  Description: Sunset",
        "  Date taken:  01.07.2024 19:45",
        "  Size (MB):   4.20",
        "  Rating:      5/5",
        "-" * 35,
    ]
