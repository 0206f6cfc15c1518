"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_DATA_FILE = "photocatalog.csv"
DEFAULT_LOG_LEVEL = "INFO"


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access.

    A missing settings file is treated as an empty configuration so the
    application can start with defaults.
    """

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        self._data: dict[str, Any] = {}
        if not self._path.exists():
            return
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as ex:
            raise ValueError(f"settings.json is not valid JSON: {self._path} ({ex})") from ex
        if not isinstance(data, dict):
            raise ValueError(f"settings.json must contain an object: {self._path}")
        self._data = data

    @property
    def path(self) -> Path:
        """Location of the settings file."""
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def data_file_path(self) -> Path:
        """Catalog data file; relative paths resolve against the settings folder."""
        raw = self.get("catalog.data_file") or DEFAULT_DATA_FILE
        path = Path(str(raw)).expanduser()
        if not path.is_absolute():
            path = self._path.parent / path
        return path

    def log_dir(self) -> str | None:
        """Configured log directory, or None for the default location."""
        raw = self.get("logging.dir")
        return str(Path(str(raw)).expanduser()) if raw else None

    def log_level(self) -> str:
        """Configured file log level."""
        return str(self.get("logging.level") or DEFAULT_LOG_LEVEL).upper()
