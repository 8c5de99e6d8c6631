"""JSON-file key-value store — the durable home of the joke cache.

One JSON object on disk, loaded lazily on first access and rewritten
atomically (temp file + replace) on every change.  A file that is not a
JSON object is moved aside to ``<name>.corrupt`` and the store starts
empty.  Thread-safe, because the joke service performs store I/O from
worker threads.
"""

from __future__ import annotations

import copy
import json
import logging
import tempfile
import threading
from pathlib import Path
from typing import Any

from jokebox.core.errors import StoreError
from jokebox.core.interfaces import KeyValueStore

_log = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Key-value store persisted as a single JSON object at *path*."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._data: dict[str, Any] | None = None

    # ------------------------------------------------------------------
    # KeyValueStore
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            data = self._ensure_loaded()
            if key not in data:
                return default
            return copy.deepcopy(data[key])

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            data = dict(self._ensure_loaded())
            data[key] = copy.deepcopy(value)
            self._write(data)
            self._data = data

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._ensure_loaded()
            if key not in data:
                return
            data = {k: v for k, v in data.items() if k != key}
            self._write(data)
            self._data = data

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _ensure_loaded(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data
        if not self._path.is_file():
            _log.debug("Store file %s absent — starting empty", self._path)
            self._data = {}
            return self._data
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Cannot read store {self._path}: {exc}") from exc
        try:
            raw = json.loads(text)
        except ValueError:
            raw = None
        if not isinstance(raw, dict):
            self._quarantine()
            raw = {}
        self._data = raw
        return self._data

    def _quarantine(self) -> None:
        """Move an unparseable store file aside so the next write starts clean."""
        corrupt = self._path.with_name(self._path.name + ".corrupt")
        try:
            self._path.replace(corrupt)
        except OSError as exc:
            _log.warning("Store %s is not a JSON object (%s) — starting empty", self._path, exc)
            return
        _log.warning(
            "Store %s is not a JSON object — moved to %s, starting empty", self._path, corrupt
        )

    def _write(self, payload: dict[str, Any]) -> None:
        try:
            _atomic_write_json(self._path, payload)
        except OSError as exc:
            raise StoreError(f"Cannot write store {self._path}: {exc}") from exc


def _atomic_write_json(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with open(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True, ensure_ascii=False)
            handle.write("\n")
        Path(tmp_name).replace(path)
    finally:
        tmp_path = Path(tmp_name)
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
