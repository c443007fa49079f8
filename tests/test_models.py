"""Tests for childes_cleaner.models."""

from __future__ import annotations

import dataclasses

import pytest

import childes_cleaner
from childes_cleaner.models import Dropped, DropReason, Element, Emitted, Transcript, Utterance


class TestElement:
    def test_defaults(self) -> None:
        e = Element("pause")
        assert e.attributes == {}
        assert e.children == ()
        assert e.text == ""
        assert e.text_content() == ""

    def test_text_is_leading_text_only(self) -> None:
        e = Element("w", {}, (Element("shortening", {}, ("be",)), "cause"))
        assert e.text == ""
        assert e.text_content() == "because"

    def test_missing_attribute_is_none(self) -> None:
        e = Element("t", {"type": "p"})
        assert e.get("type") == "p"
        assert e.get("untranscribed") is None
        assert not e.has("untranscribed")

    def test_find_returns_first_match(self) -> None:
        first, second = Element("w", {}, ("going",)), Element("w", {}, ("to",))
        replacement = Element("replacement", {}, (" ", first, second))
        assert replacement.find("w") is first
        assert replacement.elements() == (first, second)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Element("w").tag = "g"  # type: ignore[misc]


class TestResults:
    def test_equality(self) -> None:
        assert Emitted("hi") == Emitted("hi")
        assert Dropped(DropReason.GROUPED) != Dropped(DropReason.RETRACING)

    def test_transcript_defaults(self) -> None:
        doc = Transcript()
        assert doc.utterances == ()
        assert Utterance().who is None


class TestPackage:
    def test_version(self) -> None:
        assert childes_cleaner.__version__ == "0.1.0"

    def test_public_exports(self) -> None:
        for name in childes_cleaner.__all__:
            assert hasattr(childes_cleaner, name), name


class TestHashing:
    def test_elements_are_hashable(self) -> None:
        a = Element("w", {"type": "cmp"}, ("ice",))
        b = Element("w", {"type": "cmp"}, ("ice",))
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_nested_elements_are_hashable(self) -> None:
        e = Element("w", {}, ("wha", Element("shortening", {}, ("t",)), "'s"))
        assert e in {e}

    def test_attributes_still_distinguish(self) -> None:
        assert Element("t", {"type": "p"}) != Element("t", {"type": "q"})
