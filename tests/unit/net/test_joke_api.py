"""Tests for the joke API client."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from jokebox.core.errors import MalformedResponse, NonSuccessStatus
from jokebox.core.models.config import DEFAULT_JOKE_URL
from jokebox.core.models.joke import Joke
from jokebox.net.joke_api import JokeApiClient


def _ok(body) -> MagicMock:
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = body
    return resp


@patch("jokebox.net.http_helpers.requests.get")
def test_fetch_joke_parses_api_payload(mock_get):
    mock_get.return_value = _ok(
        {"type": "general", "setup": "Why?", "punchline": "Because.", "id": 7}
    )

    joke = JokeApiClient().fetch_joke()

    assert joke == Joke(setup="Why?", punchline="Because.")
    args, kwargs = mock_get.call_args
    assert args[0] == DEFAULT_JOKE_URL
    assert kwargs["timeout"] == 6.0


@patch("jokebox.net.http_helpers.requests.get")
def test_custom_url_and_timeout(mock_get):
    mock_get.return_value = _ok({"setup": "a", "punchline": "b"})

    JokeApiClient("https://jokes.test/one", timeout=2.5).fetch_joke()

    args, kwargs = mock_get.call_args
    assert args[0] == "https://jokes.test/one"
    assert kwargs["timeout"] == 2.5


@pytest.mark.parametrize(
    "body",
    [
        {"setup": "no punchline"},
        {"setup": 1, "punchline": 2},
        [{"setup": "a", "punchline": "b"}],
        "just a string",
    ],
)
@patch("jokebox.net.http_helpers.requests.get")
def test_bad_payload_is_malformed_response(mock_get, body):
    mock_get.return_value = _ok(body)
    with pytest.raises(MalformedResponse):
        JokeApiClient().fetch_joke()


@patch("jokebox.net.http_helpers.requests.get")
def test_status_error_propagates(mock_get):
    resp = MagicMock()
    resp.status_code = 500
    resp.reason = "Internal Server Error"
    mock_get.return_value = resp

    with pytest.raises(NonSuccessStatus):
        JokeApiClient().fetch_joke()
