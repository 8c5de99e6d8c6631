"""Joke record model and its interchange / cache-entry forms."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jokebox.core.errors import MalformedRecord


class Joke(BaseModel):
    """A setup/punchline pair.  Immutable; updates create a new record."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    setup: str = Field(description="Question or lead-in line")
    punchline: str = Field(description="Answer line")

    @classmethod
    def from_interchange(cls, data: Any) -> "Joke":
        """Build a :class:`Joke` from a ``{setup, punchline}`` mapping.

        Extra keys (the API also sends ``id`` and ``type``) are ignored.

        Raises:
            MalformedRecord: If *data* is not a mapping, a key is missing, or
                a value is not a string.
        """
        if not isinstance(data, Mapping):
            raise MalformedRecord(f"Expected a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            raise MalformedRecord(f"Invalid joke record ({fields or 'shape'})") from exc

    def to_interchange(self) -> dict[str, str]:
        return {"setup": self.setup, "punchline": self.punchline}

    @classmethod
    def from_entry(cls, entry: str) -> "Joke":
        """Parse one cached entry (a JSON object encoded as a string)."""
        try:
            data = json.loads(entry)
        except (TypeError, ValueError) as exc:
            raise MalformedRecord("Cached entry is not valid JSON") from exc
        return cls.from_interchange(data)

    def to_entry(self) -> str:
        """Encode as a compact JSON string for the ``cached_jokes`` list."""
        return json.dumps(self.to_interchange(), ensure_ascii=False, separators=(",", ":"))

    def display_text(self) -> str:
        return f"{self.setup} - {self.punchline}"
