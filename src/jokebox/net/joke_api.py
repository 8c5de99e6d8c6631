"""Client for the public random-joke endpoint."""

from __future__ import annotations

import logging

from jokebox.core.errors import MalformedRecord, MalformedResponse
from jokebox.core.models.config import DEFAULT_JOKE_URL
from jokebox.core.models.joke import Joke
from jokebox.net.http_helpers import fetch_json

_log = logging.getLogger(__name__)


class JokeApiClient:
    """Fetches one joke per call from *url*."""

    def __init__(self, url: str = DEFAULT_JOKE_URL, timeout: float = 6.0) -> None:
        self._url = url
        self._timeout = timeout

    def fetch_joke(self) -> Joke:
        """GET a random joke.

        Raises:
            TransportFailure: Network-level failure.
            NonSuccessStatus: Status other than 200.
            MalformedResponse: Body is not a ``{setup, punchline}`` object.
        """
        data = fetch_json(self._url, timeout=self._timeout)
        try:
            joke = Joke.from_interchange(data)
        except MalformedRecord as exc:
            raise MalformedResponse(f"Unexpected joke payload: {exc}") from exc
        _log.debug("Fetched joke: %r", joke.setup)
        return joke
