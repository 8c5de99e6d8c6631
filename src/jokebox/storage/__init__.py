"""Local persistence: key-value store and joke cache."""

from jokebox.storage.joke_cache import DEFAULT_CACHE_KEY, JokeCache
from jokebox.storage.kv_store import JsonFileStore

__all__ = ["DEFAULT_CACHE_KEY", "JokeCache", "JsonFileStore"]
