"""Exception hierarchy for the joke fetch / cache / display flow.

Everything raised by Jokebox code derives from :class:`JokeboxError`, so the
service can recover all of it locally and turn it into a user notice.
"""

from __future__ import annotations


class JokeboxError(Exception):
    """Base class for all Jokebox errors."""


class MalformedRecord(JokeboxError):
    """A joke record (from the cache or the API) has the wrong shape."""


class MalformedResponse(MalformedRecord):
    """The joke API answered 200 but the body is not a usable joke."""


class TransportFailure(JokeboxError):
    """Network-level failure: timeout, DNS, refused connection, TLS …"""


class NonSuccessStatus(JokeboxError):
    """The joke API answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code} {reason}".strip())


class IndexOutOfRange(JokeboxError, IndexError):
    """``delete_joke`` was called with an index outside the current list."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Joke index {index} out of range (list has {length} entries)")


class StoreError(JokeboxError):
    """The local key-value store could not be read or written."""


class StaleJokeIndex(IndexOutOfRange):
    """The index is in range but no longer holds the joke the caller saw."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(index, length)
        self.args = (f"Joke at index {index} changed since it was displayed",)
