"""Persistence adapter: the joke list ⇄ the ``cached_jokes`` store key.

The stored value is a list of strings, each a compact JSON object
``{"setup": ..., "punchline": ...}``.  Every save is a full snapshot.
"""

from __future__ import annotations

import logging
from typing import Iterable

from jokebox.core.errors import MalformedRecord
from jokebox.core.interfaces import KeyValueStore
from jokebox.core.models.joke import Joke

_log = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "cached_jokes"


class JokeCache:
    """Reads and writes the cached joke list under a single key.

    Args:
        store: Backing key-value store.
        key: Store key holding the serialised list.
        skip_malformed: When ``True``, unreadable entries are logged and
            skipped; when ``False`` the first one fails the whole load.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_CACHE_KEY,
        skip_malformed: bool = True,
    ) -> None:
        self._store = store
        self._key = key
        self._skip_malformed = skip_malformed

    @property
    def key(self) -> str:
        return self._key

    def load_all(self) -> list[Joke]:
        """Return the cached jokes in stored order (``[]`` if none cached).

        Raises:
            MalformedRecord: If the stored value is not a list of strings, or
                (strict mode) if any entry does not parse.
            StoreError: If the backing store cannot be read.
        """
        entries = self._store.get(self._key)
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise MalformedRecord(f"Cache key {self._key!r} does not hold a list")

        jokes: list[Joke] = []
        for pos, entry in enumerate(entries):
            try:
                if not isinstance(entry, str):
                    raise MalformedRecord(f"Cached entry is a {type(entry).__name__}, not text")
                jokes.append(Joke.from_entry(entry))
            except MalformedRecord as exc:
                if not self._skip_malformed:
                    raise
                _log.warning("Skipping malformed cached joke #%d: %s", pos, exc)
        _log.debug("Loaded %d cached joke(s)", len(jokes))
        return jokes

    def save_all(self, records: Iterable[Joke]) -> None:
        """Overwrite the cached list with *records*.

        Raises:
            StoreError: If the backing store cannot be written.
        """
        entries = [joke.to_entry() for joke in records]
        self._store.set(self._key, entries)
        _log.debug("Cached %d joke(s)", len(entries))

    def clear(self) -> None:
        self._store.remove(self._key)
