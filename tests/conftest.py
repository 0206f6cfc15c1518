"""Shared fixtures for the photo catalog tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

from loguru import logger
import pytest

from core.models import PhotoRecord


@pytest.fixture()
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages (level name + text) emitted during a test."""
    messages: list[str] = []
    sink_id = logger.add(
        lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}")
    )
    yield messages
    logger.remove(sink_id)


@pytest.fixture()
def make_record() -> Callable[..., PhotoRecord]:
    """Factory producing valid records with overridable fields."""

    def _make(record_id: int = 1, **overrides) -> PhotoRecord:
        fields = {
            "file_name": f"IMG_{record_id:04d}.jpg",
            "description": "",
            "date_taken": datetime(2024, 5, 1, 12, 30),
            "file_size_mb": 2.5,
            "rating": 3,
        }
        fields.update(overrides)
        return PhotoRecord(id=record_id, **fields)

    return _make


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "catalog" / "photocatalog.csv"


class ScriptedConsole:
    """Feeds canned answers to prompts and records what was printed."""

    def __init__(self, *answers: str) -> None:
        self._answers = list(answers)
        self.asked: list[str] = []
        self.printed: list[str] = []

    def input(self, prompt: str) -> str:
        self.asked.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def output(self, text: str) -> None:
        self.printed.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.printed)


@pytest.fixture()
def script() -> type[ScriptedConsole]:
    return ScriptedConsole
