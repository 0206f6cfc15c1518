from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger
import pytest

from infrastructure.logging import find_latest_log_file, init_logging


@pytest.fixture()
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_init_logging_writes_to_log_dir(tmp_path: Path, restore_logger) -> None:
    log_dir = tmp_path / "logs"

    returned = init_logging(str(log_dir), level="INFO")
    logger.info("hello from the catalog")
    logger.complete()

    assert returned == log_dir
    latest = find_latest_log_file(str(log_dir))
    assert latest is not None
    assert latest.name.startswith("catalog_")
    assert "hello from the catalog" in latest.read_text(encoding="utf-8")


def test_find_latest_log_file_handles_missing_or_empty_dir(tmp_path: Path) -> None:
    assert find_latest_log_file(str(tmp_path / "nope")) is None
    assert find_latest_log_file(str(tmp_path)) is None
