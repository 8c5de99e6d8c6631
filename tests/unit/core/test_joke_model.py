"""Tests for the Joke record and its interchange / entry forms."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from jokebox.core.errors import MalformedRecord
from jokebox.core.models.joke import Joke


class TestFromInterchange:
    def test_valid_mapping(self):
        joke = Joke.from_interchange({"setup": "Why?", "punchline": "Because."})
        assert joke.setup == "Why?"
        assert joke.punchline == "Because."

    def test_extra_api_fields_ignored(self):
        joke = Joke.from_interchange(
            {"id": 42, "type": "general", "setup": "Knock knock", "punchline": "Who's there?"}
        )
        assert joke.to_interchange() == {"setup": "Knock knock", "punchline": "Who's there?"}

    def test_empty_strings_allowed(self):
        assert Joke.from_interchange({"setup": "", "punchline": ""}).setup == ""

    @pytest.mark.parametrize(
        "data",
        [
            {"setup": "only setup"},
            {"punchline": "only punchline"},
            {},
            {"setup": 123, "punchline": "x"},
            {"setup": "x", "punchline": None},
            {"setup": ["a"], "punchline": "b"},
        ],
    )
    def test_bad_shape_raises(self, data):
        with pytest.raises(MalformedRecord):
            Joke.from_interchange(data)

    @pytest.mark.parametrize("data", [None, "text", 7, ["setup", "punchline"]])
    def test_non_mapping_raises(self, data):
        with pytest.raises(MalformedRecord, match="Expected a mapping"):
            Joke.from_interchange(data)


class TestInterchange:
    def test_round_trip(self):
        joke = Joke(setup="Où est la bibliothèque?", punchline="Ici 📚")
        assert Joke.from_interchange(joke.to_interchange()) == joke

    def test_immutable(self):
        joke = Joke(setup="a", punchline="b")
        with pytest.raises(ValidationError):
            joke.setup = "c"

    def test_equality_by_value(self):
        assert Joke(setup="a", punchline="b") == Joke(setup="a", punchline="b")
        assert Joke(setup="a", punchline="b") != Joke(setup="a", punchline="c")


class TestEntry:
    def test_entry_is_compact_json_object(self):
        entry = Joke(setup="Why?", punchline="Because.").to_entry()
        assert entry == '{"setup":"Why?","punchline":"Because."}'
        assert json.loads(entry) == {"setup": "Why?", "punchline": "Because."}

    def test_from_entry(self):
        joke = Joke.from_entry('{"setup": "a", "punchline": "b"}')
        assert joke == Joke(setup="a", punchline="b")

    def test_from_entry_invalid_json(self):
        with pytest.raises(MalformedRecord, match="not valid JSON"):
            Joke.from_entry("{not json")

    def test_from_entry_wrong_shape(self):
        with pytest.raises(MalformedRecord):
            Joke.from_entry('["a", "b"]')

    def test_display_text(self):
        assert Joke(setup="Why?", punchline="Because.").display_text() == "Why? - Because."
