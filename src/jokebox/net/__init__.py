"""Network collaborators: joke API client and connectivity probe."""

from jokebox.net.connectivity import ConnectivityChecker
from jokebox.net.joke_api import JokeApiClient

__all__ = ["ConnectivityChecker", "JokeApiClient"]
