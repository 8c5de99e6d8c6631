"""Joke service — owns the joke list and drives fetch → cache → display.

The presentation layer reads :attr:`JokeService.jokes`, ``is_loading`` and
``is_online`` and calls :meth:`fetch_joke` / :meth:`delete_joke`.  Changes
are announced on the event bus:

* ``jokes.state.changed`` — something in the read-only state moved.
* ``jokes.notice`` — a user-facing message (``{"message": str}``).

Blocking I/O (socket probe, HTTP, store file) runs in worker threads via
:func:`asyncio.to_thread`.  At most one fetch is in flight; a second
``fetch_joke()`` while loading is rejected.  List mutations share one
:class:`asyncio.Lock`, so a delete never interleaves with a fetch's
prepend-and-persist step.
"""

from __future__ import annotations

import asyncio
import logging

from jokebox.core import events
from jokebox.core.errors import (
    IndexOutOfRange,
    MalformedRecord,
    MalformedResponse,
    NonSuccessStatus,
    StaleJokeIndex,
    StoreError,
    TransportFailure,
)
from jokebox.core.event_bus import EventBus
from jokebox.core.interfaces import ConnectivityInterface
from jokebox.core.models.joke import Joke
from jokebox.net.joke_api import JokeApiClient
from jokebox.storage.joke_cache import JokeCache

_log = logging.getLogger(__name__)

DEFAULT_MAX_JOKES = 5

NOTICE_OFFLINE = "No internet connection. Using cached jokes."
NOTICE_FETCH_FAILED = "Failed to fetch a joke. Please try again!"
NOTICE_UNAVAILABLE = "Unable to fetch jokes. Displaying cached jokes."
NOTICE_CACHE_UNREADABLE = "Unable to load cached jokes."


class JokeService:
    """Explicit owner of the in-memory joke list and its cached copy.

    Args:
        cache: Persistence adapter for the ``cached_jokes`` key.
        api: Remote joke client.
        connectivity: Reachability probe.
        event_bus: Bus used to announce state changes and notices.
        max_jokes: Cap on the list length; older jokes fall off the end.
    """

    def __init__(
        self,
        cache: JokeCache,
        api: JokeApiClient,
        connectivity: ConnectivityInterface,
        event_bus: EventBus,
        max_jokes: int = DEFAULT_MAX_JOKES,
    ) -> None:
        if max_jokes < 1:
            raise ValueError("max_jokes must be at least 1")
        self._cache = cache
        self._api = api
        self._connectivity = connectivity
        self._bus = event_bus
        self._max_jokes = max_jokes

        self._jokes: list[Joke] = []
        self._is_loading = False
        self._is_online = False
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def jokes(self) -> tuple[Joke, ...]:
        """Snapshot of the current list, most recent first."""
        return tuple(self._jokes)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_online(self) -> bool:
        return self._is_online

    @property
    def max_jokes(self) -> int:
        return self._max_jokes

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Seed the list from the cache, then probe connectivity.

        When the probe says offline the cache is read once more, so the list
        shows whatever was last persisted.
        """
        await self._load_cached(notify=True)
        if not await self.check_connectivity():
            await self._load_cached(notify=False)
        _log.info(
            "Joke service ready (%d cached, online=%s)", len(self._jokes), self._is_online
        )

    async def check_connectivity(self) -> bool:
        """Probe reachability once and update ``is_online``."""
        online = await asyncio.to_thread(self._connectivity.has_connection)
        if online != self._is_online:
            _log.info("Connectivity changed: online=%s", online)
        self._is_online = online
        await self._publish_state()
        return online

    async def fetch_joke(self) -> bool:
        """Fetch one joke and put it at the top of the list.

        Returns:
            ``True`` if a joke was added.  ``False`` if the call was rejected
            because a fetch is already running, or if the fetch failed (a
            notice has been published in that case).
        """
        if self._is_loading:
            _log.debug("Fetch already in flight — rejecting overlapping request")
            return False

        self._is_loading = True
        await self._publish_state()
        try:
            if not self._is_online:
                await self._notify(NOTICE_OFFLINE)
                return False

            try:
                joke = await asyncio.to_thread(self._api.fetch_joke)
            except NonSuccessStatus as exc:
                _log.warning("Joke API returned %s", exc)
                await self._notify(NOTICE_FETCH_FAILED)
                return False
            except (TransportFailure, MalformedResponse) as exc:
                _log.warning("Joke fetch failed: %s", exc)
                await self._notify(NOTICE_UNAVAILABLE)
                return False

            async with self._lock:
                self._jokes.insert(0, joke)
                del self._jokes[self._max_jokes :]
                await self._persist()
            _log.info("Added joke (%d in list)", len(self._jokes))
            return True
        finally:
            self._is_loading = False
            await self._publish_state()

    async def delete_joke(self, index: int, expected: Joke | None = None) -> Joke:
        """Remove and return the joke at *index*, then persist the list.

        Args:
            index: Position in :attr:`jokes`.
            expected: The joke the caller believes is at *index* (e.g. the row
                a user clicked).  When given and different, nothing is deleted.

        Raises:
            IndexOutOfRange: If ``index`` is not an ``int`` in
                ``[0, len(jokes))``.  The list is left untouched.
            StaleJokeIndex: If *expected* no longer sits at *index*.
        """
        async with self._lock:
            length = len(self._jokes)
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < length:
                raise IndexOutOfRange(index, length)
            if expected is not None and self._jokes[index] != expected:
                raise StaleJokeIndex(index, length)
            removed = self._jokes.pop(index)
            await self._persist()
        _log.info("Deleted joke #%d (%d left)", index, len(self._jokes))
        await self._publish_state()
        return removed

    async def clear_jokes(self) -> None:
        """Empty the list and drop the cached copy."""
        async with self._lock:
            self._jokes.clear()
            try:
                await asyncio.to_thread(self._cache.clear)
            except StoreError as exc:
                _log.error("Failed to clear joke cache: %s", exc)
        _log.info("Cleared all jokes")
        await self._publish_state()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _load_cached(self, *, notify: bool) -> None:
        try:
            cached = await asyncio.to_thread(self._cache.load_all)
        except (MalformedRecord, StoreError) as exc:
            _log.warning("Could not load cached jokes: %s", exc)
            if notify:
                await self._notify(NOTICE_CACHE_UNREADABLE)
            return
        async with self._lock:
            self._jokes = cached[: self._max_jokes]
        await self._publish_state()

    async def _persist(self) -> None:
        """Write the full list to the cache; failures are logged, not raised."""
        try:
            await asyncio.to_thread(self._cache.save_all, list(self._jokes))
        except StoreError as exc:
            _log.error("Failed to persist joke cache: %s", exc)

    async def _notify(self, message: str) -> None:
        _log.info("Notice: %s", message)
        await self._bus.publish(events.JOKES_NOTICE, {"message": message})

    async def _publish_state(self) -> None:
        await self._bus.publish(
            events.JOKES_STATE_CHANGED,
            {
                "count": len(self._jokes),
                "is_loading": self._is_loading,
                "is_online": self._is_online,
            },
        )
