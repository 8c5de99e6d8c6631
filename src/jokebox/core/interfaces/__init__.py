"""Collaborator interfaces."""

from jokebox.core.interfaces.collaborators import ConnectivityInterface, KeyValueStore

__all__ = ["ConnectivityInterface", "KeyValueStore"]
