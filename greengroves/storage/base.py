"""Key-value storage backends for persisted client state.

The browser client kept its state in localStorage. Here the same three keys
live behind a tiny async key-value protocol so the backend can be swapped:

- MemoryStorage: process-local dict (tests, short-lived scripts)
- JsonFileStorage: one JSON object on disk (CLI sessions survive restarts)
- RedisStorage: shared across processes (see redis_storage.py)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Async string key-value store."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __repr__(self) -> str:
        return f"MemoryStorage(keys={sorted(self._data)!r})"


class JsonFileStorage:
    """Storage backed by a single JSON object file.

    The file is re-read on every access so writes made by another process
    (another CLI invocation, another "tab") are picked up.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning("Storage file %s is corrupt, starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object, starting empty", self.path)
            return {}
        return data

    def _dump(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")

    async def get(self, key: str) -> str | None:
        return self._load().get(key)

    async def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    async def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)

    def __repr__(self) -> str:
        return f"JsonFileStorage(path={str(self.path)!r})"
