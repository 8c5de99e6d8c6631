"""Jokebox — application entry point (NiceGUI composition root).

Wires together: Config → logging → store / cache / clients → EventBus →
JokeService → UI.  NiceGUI owns the event loop; ``app.on_startup`` /
``app.on_shutdown`` handle lifecycle.
"""

from __future__ import annotations

from nicegui import app, ui

from jokebox.config.config_manager import load_config
from jokebox.core.event_bus import EventBus
from jokebox.core.joke_service import JokeService
from jokebox.core.models.config import JokeboxConfig
from jokebox.log_config.logger import get_logger, setup_logging
from jokebox.net.connectivity import ConnectivityChecker
from jokebox.net.joke_api import JokeApiClient
from jokebox.storage.joke_cache import JokeCache
from jokebox.storage.kv_store import JsonFileStore

_log = get_logger(__name__)


def build_service(config: JokeboxConfig, bus: EventBus) -> JokeService:
    """Assemble a :class:`JokeService` from *config*."""
    store = JsonFileStore(config.cache.store_path)
    cache = JokeCache(store, key=config.cache.key, skip_malformed=config.cache.skip_malformed)
    api = JokeApiClient(config.api.joke_url, timeout=config.api.request_timeout_seconds)
    connectivity = ConnectivityChecker(
        config.connectivity.addresses, timeout=config.connectivity.timeout_seconds
    )
    return JokeService(cache, api, connectivity, bus, max_jokes=config.cache.max_jokes)


def main() -> None:
    """Synchronous entry point — bootstraps and starts NiceGUI."""
    config = load_config()
    setup_logging(config.system.log_level, config.system.log_dir)
    _log.info("Starting Jokebox")

    bus = EventBus()
    service = build_service(config, bus)

    from jokebox.ui.layout import JokesLayout

    JokesLayout(service=service, event_bus=bus, config=config).setup_page()

    async def on_startup() -> None:
        await bus.start()
        await service.initialize()
        _log.info("Jokebox running on http://localhost:%d", config.system.webui_port)

    async def on_shutdown() -> None:
        await bus.stop()
        _log.info("Jokebox stopped")

    app.on_startup(on_startup)
    app.on_shutdown(on_shutdown)

    ui.run(
        port=config.system.webui_port,
        title=config.system.title,
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
