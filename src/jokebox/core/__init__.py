"""Core: models, errors, event bus, and the joke service."""

from jokebox.core.event_bus import EventBus
from jokebox.core.joke_service import JokeService

__all__ = ["EventBus", "JokeService"]
