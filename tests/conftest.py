"""Shared pytest fixtures for Jokebox tests."""

from __future__ import annotations

import pytest

from jokebox.core.event_bus import EventBus
from jokebox.core.joke_service import JokeService
from jokebox.core.models.config import JokeboxConfig
from jokebox.storage.joke_cache import JokeCache
from tests.helpers.fakes import EventRecorder, FakeConnectivity, FakeJokeApi, InMemoryStore


@pytest.fixture
async def event_bus():
    """Provide a started EventBus that is stopped after the test."""
    bus = EventBus(queue_size=100)
    await bus.start()
    yield bus
    await bus.stop()


@pytest.fixture
def recorder(event_bus: EventBus) -> EventRecorder:
    """Collects every ``jokes.*`` event published on the bus."""
    return EventRecorder(event_bus)


@pytest.fixture(scope="session")
def jokebox_config() -> JokeboxConfig:
    """Session-scoped default config (no file I/O)."""
    return JokeboxConfig()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def cache(store: InMemoryStore) -> JokeCache:
    return JokeCache(store)


@pytest.fixture
def api() -> FakeJokeApi:
    return FakeJokeApi()


@pytest.fixture
def connectivity() -> FakeConnectivity:
    return FakeConnectivity(online=True)


@pytest.fixture
def service(cache, api, connectivity, event_bus) -> JokeService:
    """JokeService wired to in-memory fakes, cap 5."""
    return JokeService(cache, api, connectivity, event_bus, max_jokes=5)
