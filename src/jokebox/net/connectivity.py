"""Internet reachability probe.

Tries a plain TCP connect to a handful of well-known DNS resolvers; the
first one that answers means "online".  This is a point-in-time check, not
a monitor — the answer can be stale a moment later.
"""

from __future__ import annotations

import logging
import socket
from typing import Iterable

from jokebox.core.interfaces import ConnectivityInterface

_log = logging.getLogger(__name__)

DEFAULT_ADDRESSES: tuple[str, ...] = ("1.1.1.1:53", "8.8.4.4:53", "208.67.222.222:53")


def _split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    return host, int(port)


class ConnectivityChecker(ConnectivityInterface):
    """Socket-based :class:`ConnectivityInterface`.

    Args:
        addresses: ``host:port`` strings tried in order.
        timeout: Connect timeout per address, in seconds.
    """

    def __init__(
        self,
        addresses: Iterable[str] = DEFAULT_ADDRESSES,
        timeout: float = 3.0,
    ) -> None:
        self._targets = [_split_address(a) for a in addresses]
        self._timeout = timeout

    def has_connection(self) -> bool:
        for host, port in self._targets:
            try:
                with socket.create_connection((host, port), timeout=self._timeout):
                    return True
            except OSError as exc:
                _log.debug("Connectivity probe %s:%d failed: %s", host, port, exc)
        return False
