"""Tests for the socket-based connectivity checker."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from jokebox.net.connectivity import ConnectivityChecker


@patch("jokebox.net.connectivity.socket.create_connection")
def test_first_reachable_address_means_online(mock_connect):
    mock_connect.return_value = MagicMock()
    checker = ConnectivityChecker(["1.1.1.1:53", "8.8.4.4:53"], timeout=0.5)

    assert checker.has_connection() is True
    mock_connect.assert_called_once_with(("1.1.1.1", 53), timeout=0.5)


@patch("jokebox.net.connectivity.socket.create_connection")
def test_falls_through_to_next_address(mock_connect):
    mock_connect.side_effect = [OSError("unreachable"), MagicMock()]
    checker = ConnectivityChecker(["10.0.0.1:53", "8.8.4.4:53"])

    assert checker.has_connection() is True
    assert mock_connect.call_count == 2


@patch("jokebox.net.connectivity.socket.create_connection")
def test_all_unreachable_means_offline(mock_connect):
    mock_connect.side_effect = TimeoutError("timed out")
    checker = ConnectivityChecker(["1.1.1.1:53", "8.8.4.4:53", "208.67.222.222:53"])

    assert checker.has_connection() is False
    assert mock_connect.call_count == 3


def test_no_addresses_means_offline():
    assert ConnectivityChecker([]).has_connection() is False
