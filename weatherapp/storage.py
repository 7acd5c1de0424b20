"""JSON-file backed search history."""
from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from .config import DEFAULT_HISTORY_PATH
from .entities import City


class StorageError(RuntimeError):
    """Base error for the history document."""


class StorageReadError(StorageError):
    """The history file is missing, unreadable or malformed."""


class StorageWriteError(StorageError):
    """The history file could not be rewritten."""


class HistoryStore:
    """Read-modify-write access to ``searchHistory.json``.

    The document is a single JSON array of ``{"name": ..., "id": ...}``
    objects.  Every mutation rewrites the whole file; the new content is
    written to a sibling temporary file and moved over the original, so a
    reader sees either the old or the new document.

    There is no locking.  Two processes mutating the same file at once can
    lose an update.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_HISTORY_PATH) -> None:
        self.path = Path(path)
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def list(self) -> List[City]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._log.error("Failed to read %s: %s", self.path, exc)
            raise StorageReadError(f"cannot read {self.path}") from exc
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            self._log.error("Invalid JSON in %s", self.path, exc_info=exc)
            raise StorageReadError(f"{self.path} is not valid JSON") from exc
        return self._parse(payload)

    def append(self, name: str) -> City:
        cities = self.list()
        city = City(id=self._next_id(cities), name=name)
        cities.append(city)
        self._write(cities)
        return city

    def remove(self, city_id: str) -> None:
        cities = self.list()
        remaining = [city for city in cities if city.id != city_id]
        self._write(remaining)

    # Helpers ------------------------------------------------------------
    def _parse(self, payload: object) -> List[City]:
        if not isinstance(payload, list):
            raise StorageReadError(f"{self.path} must contain a JSON array")
        cities: List[City] = []
        for item in payload:
            if not isinstance(item, dict) or "name" not in item or "id" not in item:
                raise StorageReadError(f"{self.path} contains a malformed entry: {item!r}")
            cities.append(City(id=str(item["id"]), name=str(item["name"])))
        return cities

    @staticmethod
    def _next_id(cities: Sequence[City]) -> str:
        # Ids are decimal strings; max+1 keeps them unique after removals.
        numeric = [int(city.id) for city in cities if city.id.isdecimal()]
        return str(max(numeric, default=0) + 1)

    def _write(self, cities: Sequence[City]) -> None:
        document = json.dumps([city.as_dict() for city in cities], indent=2, ensure_ascii=False)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        except OSError as exc:
            self._log.error("Failed to create temporary file next to %s: %s", self.path, exc)
            raise StorageWriteError(f"cannot write {self.path}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(document)
            if self.path.exists():
                os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except OSError as exc:
            self._log.error("Failed to write %s: %s", self.path, exc)
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageWriteError(f"cannot write {self.path}") from exc


__all__ = ["HistoryStore", "StorageError", "StorageReadError", "StorageWriteError"]
