"""Main page layout — single-page NiceGUI application.

Provides the ``@ui.page('/')`` route with:
* Light / dark / auto theme from config
* Online/offline badge
* Joke list (spinner while loading, placeholder when empty)
* "Fetch Joke" and "Clear" buttons, per-joke delete buttons

Every connected client gets its own containers and its own event-bus
subscriptions, removed again on disconnect.
"""

from __future__ import annotations

import logging as _logging
from functools import partial

from nicegui import ui

from jokebox.core import events
from jokebox.core.errors import IndexOutOfRange
from jokebox.core.event_bus import EventBus
from jokebox.core.joke_service import JokeService
from jokebox.core.models.config import JokeboxConfig
from jokebox.core.models.event import Event
from jokebox.core.models.joke import Joke

_log = _logging.getLogger(__name__)

EMPTY_MESSAGE = "No jokes available. Please fetch some jokes!"

_ACCENT = "rgba(103, 58, 183, {alpha})"
_THEMES: dict[str, bool | None] = {"auto": None, "dark": True, "light": False}


class JokesLayout:
    """Builds the jokes page on top of a :class:`JokeService`.

    Args:
        service: The joke service (sole owner of the list).
        event_bus: Bus carrying ``jokes.*`` events from the service.
        config: Application configuration.
    """

    def __init__(
        self,
        service: JokeService,
        event_bus: EventBus,
        config: JokeboxConfig,
    ) -> None:
        self._service = service
        self._bus = event_bus
        self._config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def setup_page(self) -> None:
        """Register the ``@ui.page('/')`` route."""

        @ui.page("/", title=self._config.system.title)
        def index():
            self._build_page()

    def _build_page(self) -> None:
        ui.dark_mode(_THEMES.get(self._config.system.theme))

        with ui.column().classes("w-full items-center").style(
            "max-width: 720px; margin: 0 auto; padding: 20px; gap: 16px;"
        ):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label(self._config.system.title).classes("text-h5")
                status = ui.label(self._status_text())

            with ui.column().classes("w-full items-center") as jokes_box:
                pass

            with ui.row().classes("items-center"):
                ui.button("Fetch Joke", icon="refresh", on_click=self._on_fetch).props(
                    "outline color=deep-purple"
                )
                ui.button("Clear", icon="delete_sweep", on_click=self._on_clear).props(
                    "flat color=red-4"
                )

        self._render_jokes(jokes_box)

        async def on_state(_event: Event) -> None:
            status.text = self._status_text()
            self._render_jokes(jokes_box)

        async def on_notice(event: Event) -> None:
            with jokes_box:
                ui.notify(event.payload.get("message", ""))

        sub_ids = self._bus.subscribe_many(
            {events.JOKES_STATE_CHANGED: on_state, events.JOKES_NOTICE: on_notice}
        )

        def on_disconnect() -> None:
            self._bus.unsubscribe_all(sub_ids)
            _log.debug("Client disconnected — removed %d subscription(s)", len(sub_ids))

        ui.context.client.on_disconnect(on_disconnect)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_jokes(self, container: ui.element) -> None:
        container.clear()
        with container:
            if self._service.is_loading:
                ui.spinner(size="xl", color="deep-purple")
                return

            jokes = self._service.jokes
            if not jokes:
                ui.label(EMPTY_MESSAGE).classes("text-h6 text-center").style(
                    f"background: {_ACCENT.format(alpha=0.4)}; border-radius: 12px; padding: 16px;"
                )
                return

            for index, joke in enumerate(jokes):
                with ui.card().classes("w-full").style(
                    f"background: {_ACCENT.format(alpha=0.2)}; border-radius: 8px;"
                ):
                    with ui.row().classes("w-full items-center no-wrap"):
                        ui.label(joke.display_text()).classes("grow").style("font-size: 13px;")
                        ui.button(
                            icon="delete", on_click=partial(self._on_delete, index, joke)
                        ).props("flat round color=red-4")

    def _status_text(self) -> str:
        return "● Online" if self._service.is_online else "○ Offline"

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def _on_fetch(self) -> None:
        await self._service.fetch_joke()

    async def _on_delete(self, index: int, joke: Joke) -> None:
        try:
            await self._service.delete_joke(index, expected=joke)
        except IndexOutOfRange as exc:
            # Row rendered before a concurrent change; the next state event re-renders.
            _log.warning("Ignoring delete from stale view: %s", exc)

    async def _on_clear(self) -> None:
        await self._service.clear_jokes()
