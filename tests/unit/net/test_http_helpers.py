"""Tests for jokebox.net.http_helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests as req

from jokebox.core.errors import MalformedResponse, NonSuccessStatus, TransportFailure
from jokebox.net.http_helpers import fetch_json


def _response(status: int = 200, body=None, json_error: bool = False) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.reason = "Service Unavailable" if status == 503 else ""
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = body
    return resp


class TestFetchJson:
    @patch("jokebox.net.http_helpers.requests.get")
    def test_success(self, mock_get):
        mock_get.return_value = _response(body={"key": "value"})

        assert fetch_json("https://example.com/api") == {"key": "value"}
        mock_get.assert_called_once()

    @patch("jokebox.net.http_helpers.requests.get")
    def test_passes_params_headers_timeout(self, mock_get):
        mock_get.return_value = _response(body={})

        fetch_json(
            "https://example.com/api",
            params={"q": "test"},
            headers={"X-Key": "abc"},
            timeout=3.0,
        )
        _, kwargs = mock_get.call_args
        assert kwargs["params"] == {"q": "test"}
        assert kwargs["timeout"] == 3.0
        assert kwargs["headers"]["X-Key"] == "abc"
        assert kwargs["headers"]["User-Agent"] == "Jokebox/1.0"

    @patch("jokebox.net.http_helpers.requests.get")
    def test_transport_failure_not_retried(self, mock_get):
        mock_get.side_effect = req.exceptions.ConnectTimeout("fail")

        with pytest.raises(TransportFailure, match="Connect timeout"):
            fetch_json("https://example.com")
        assert mock_get.call_count == 1

    @pytest.mark.parametrize("status", [201, 204, 301, 404, 503])
    @patch("jokebox.net.http_helpers.requests.get")
    def test_non_200_status(self, mock_get, status):
        mock_get.return_value = _response(status=status)

        with pytest.raises(NonSuccessStatus) as info:
            fetch_json("https://example.com")
        assert info.value.status_code == status

    @patch("jokebox.net.http_helpers.requests.get")
    def test_reason_in_message(self, mock_get):
        mock_get.return_value = _response(status=503)
        with pytest.raises(NonSuccessStatus, match="HTTP 503 Service Unavailable"):
            fetch_json("https://example.com")

    @patch("jokebox.net.http_helpers.requests.get")
    def test_non_json_body(self, mock_get):
        mock_get.return_value = _response(json_error=True)
        with pytest.raises(MalformedResponse):
            fetch_json("https://example.com")
