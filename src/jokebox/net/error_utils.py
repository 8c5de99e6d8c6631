"""Short labels for ``requests`` failures, used in log lines and errors.

Classification is table-driven: the first matching exception class wins,
and plain connection errors are narrowed further by message fragments.
"""

from __future__ import annotations

from requests import exceptions as rexc

# Most specific classes first: ConnectTimeout is also a ConnectionError
# and a Timeout, SSLError is also a ConnectionError.
_BY_TYPE: tuple[tuple[type[Exception], str], ...] = (
    (rexc.ConnectTimeout, "Connect timeout"),
    (rexc.ReadTimeout, "Read timeout"),
    (rexc.Timeout, "Timeout"),
    (rexc.SSLError, "TLS/SSL error"),
    (rexc.TooManyRedirects, "Too many redirects"),
    (rexc.InvalidURL, "Invalid URL"),
)

_CONNECTION_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("Name or service not known", "Temporary failure", "nodename nor servname"), "DNS failure"),
    (("Connection refused",), "Connection refused"),
    (("Failed to establish", "NewConnectionError"), "Connection failed"),
)


def _classify(err: Exception) -> str:
    for exc_type, label in _BY_TYPE:
        if isinstance(err, exc_type):
            return label
    if isinstance(err, rexc.ConnectionError):
        raw = str(err)
        for fragments, label in _CONNECTION_HINTS:
            if any(fragment in raw for fragment in fragments):
                return label
        return "Connection error"
    return str(err) or type(err).__name__


def summarize_error(err: Exception, max_len: int = 60) -> str:
    """Return a concise human-readable summary for a network exception."""
    msg = _classify(err)
    if len(msg) > max_len:
        msg = msg[: max_len - 3] + "..."
    return msg
