"""Pydantic models for jokes, configuration, and events."""
from jokebox.core.models.config import (
    ApiConfig,
    CacheConfig,
    ConnectivityConfig,
    JokeboxConfig,
    SystemConfig,
)
from jokebox.core.models.event import Event
from jokebox.core.models.joke import Joke

__all__ = [
    "ApiConfig",
    "CacheConfig",
    "ConnectivityConfig",
    "JokeboxConfig",
    "SystemConfig",
    "Event",
    "Joke",
]
