"""Async event bus for joke-service → UI traffic.

The service publishes ``jokes.*`` events; each connected browser client
subscribes a small group of handlers and drops the whole group again on
disconnect.  Publishing only enqueues, so notices stay fire-and-forget.

Key behaviours:
* Handlers may be sync or async; coroutine results are awaited.
* A handler that raises is **auto-unsubscribed** (logged + removed).
* Bounded queue — on overflow the oldest event is dropped with a warning.
* :meth:`EventBus.stop` gives queued events a short grace period to be
  delivered before the consumer is cancelled.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Callable, Iterable, Mapping

from jokebox.core.models.event import Event

_log = logging.getLogger(__name__)

Handler = Callable[[Event], Any]


class EventBus:
    """Queue-backed pub/sub; one consumer task dispatches in publish order.

    Args:
        queue_size: Maximum number of undelivered events.
        flush_timeout: Seconds :meth:`stop` waits for queued events.
    """

    def __init__(self, queue_size: int = 100, flush_timeout: float = 1.0) -> None:
        self._queue_size = queue_size
        self._flush_timeout = flush_timeout
        self._queue: asyncio.Queue[Event] | None = None
        self._consumer: asyncio.Task[None] | None = None
        # event_type → {sub_id: handler}; insertion order is dispatch order
        self._handlers: dict[str, dict[str, Handler]] = {}
        self._sub_types: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._consumer = asyncio.create_task(self._consume(), name="event-bus-consumer")
        _log.info("Event bus started (queue_size=%d)", self._queue_size)

    async def stop(self) -> None:
        """Flush what is queued (bounded by ``flush_timeout``), then shut down."""
        if self._consumer is not None:
            try:
                await asyncio.wait_for(self.join(), self._flush_timeout)
            except asyncio.TimeoutError:
                _log.warning("Event bus stopped with undelivered events")
            self._consumer.cancel()
            try:
                await self._consumer
            except asyncio.CancelledError:
                pass
            self._consumer = None
        self._queue = None
        self._handlers.clear()
        self._sub_types.clear()
        _log.info("Event bus stopped")

    async def join(self) -> None:
        """Wait until every event published so far has been dispatched."""
        if self._queue is not None:
            await self._queue.join()

    # ------------------------------------------------------------------
    # Publish
    # ------------------------------------------------------------------

    async def publish(self, event_type: str, payload: dict[str, Any] | None = None) -> None:
        """Enqueue an event.  Without a started bus the event is dropped."""
        queue = self._queue
        if queue is None:
            _log.debug("Event bus not started — dropping %s", event_type)
            return
        if queue.full():
            dropped = queue.get_nowait()
            queue.task_done()
            _log.warning("Event bus queue overflow — dropped %s", dropped.event_type)
        queue.put_nowait(Event(event_type=event_type, payload=payload or {}))

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, event_type: str, handler: Handler) -> str:
        """Register *handler* for *event_type*; returns a subscription id."""
        sub_id = uuid.uuid4().hex
        self._handlers.setdefault(event_type, {})[sub_id] = handler
        self._sub_types[sub_id] = event_type
        return sub_id

    def subscribe_many(self, handlers: Mapping[str, Handler]) -> list[str]:
        """Subscribe one handler per event type, e.g. everything a page needs."""
        return [self.subscribe(event_type, h) for event_type, h in handlers.items()]

    def unsubscribe(self, sub_id: str) -> None:
        event_type = self._sub_types.pop(sub_id, None)
        if event_type is not None:
            self._handlers.get(event_type, {}).pop(sub_id, None)

    def unsubscribe_all(self, sub_ids: Iterable[str]) -> None:
        for sub_id in sub_ids:
            self.unsubscribe(sub_id)

    # ------------------------------------------------------------------
    # Consumer
    # ------------------------------------------------------------------

    async def _consume(self) -> None:
        assert self._queue is not None
        queue = self._queue
        while True:
            event = await queue.get()
            try:
                await self._dispatch(event)
            finally:
                queue.task_done()

    async def _dispatch(self, event: Event) -> None:
        for sub_id, handler in list(self._handlers.get(event.event_type, {}).items()):
            if sub_id not in self._sub_types:
                continue
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                _log.exception(
                    "Handler %s for '%s' raised — auto-unsubscribing", handler, event.event_type
                )
                self.unsubscribe(sub_id)
