"""Abstract collaborators of the joke service (ABCs).

Production backends live in :mod:`jokebox.storage` and :mod:`jokebox.net`;
tests substitute in-memory fakes implementing the same interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """Durable local key → JSON-value store (one writer)."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under *key*, or *default* if absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Overwrite *key* with *value* and persist."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key* if present and persist."""


class ConnectivityInterface(ABC):
    """Point-in-time internet reachability probe."""

    @abstractmethod
    def has_connection(self) -> bool:
        """Return ``True`` if the internet looks reachable right now."""
