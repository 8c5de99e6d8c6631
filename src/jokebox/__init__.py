"""Jokebox: fetch short jokes, list them, keep a local offline cache."""

__version__ = "1.0.0"
