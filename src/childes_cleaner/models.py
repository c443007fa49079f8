"""Data models for CHILDES transcripts and cleanup results.

Immutable dataclasses giving read-only views over a parsed TalkBank XML
tree. Element content is materialized as a ``children`` tuple mixing
strings (text spans) and nested :class:`Element` objects, so the sibling
that follows ``children[i]`` is simply ``children[i + 1]``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, TypeAlias, Union

# Mixed content: text strings interspersed with child elements.
ChildNode: TypeAlias = Union[str, "Element"]


@dataclass(frozen=True)
class Element:
    """A markup element with its attributes and mixed-content children."""

    tag: str
    # Left out of the hash; equal elements still hash alike.
    attributes: dict[str, str] = field(default_factory=dict, hash=False)
    children: tuple[ChildNode, ...] = ()

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    def has(self, name: str) -> bool:
        return name in self.attributes

    @property
    def text(self) -> str:
        """Literal text preceding the first child element."""
        if self.children and isinstance(self.children[0], str):
            return self.children[0]
        return ""

    def elements(self) -> tuple[Element, ...]:
        return tuple(c for c in self.children if isinstance(c, Element))

    def find(self, tag: str) -> Element | None:
        """Return the first child element named *tag*, or ``None``."""
        for child in self.children:
            if isinstance(child, Element) and child.tag == tag:
                return child
        return None

    def itertext(self) -> Iterator[str]:
        for child in self.children:
            if isinstance(child, str):
                yield child
            else:
                yield from child.itertext()

    def text_content(self) -> str:
        return "".join(self.itertext())


@dataclass(frozen=True)
class Utterance:
    """A ``<u>`` element -- one turn attributed to a speaker."""

    children: tuple[ChildNode, ...] = ()
    who: str | None = None
    uid: str | None = None


@dataclass(frozen=True)
class Transcript:
    """A complete transcript file: its utterances in document order."""

    utterances: tuple[Utterance, ...] = ()
    corpus: str | None = None
    lang: str | None = None
    source: str | None = field(default=None, repr=False)


class DropReason(enum.Enum):
    """Why an utterance was excluded from the cleaned output."""

    RETRACING = "retracing"
    UNTRANSCRIBED = "untranscribed"
    GROUPED = "grouped"


@dataclass(frozen=True)
class Emitted:
    """Cleaned surface text for a word or utterance."""

    text: str


@dataclass(frozen=True)
class Dropped:
    """The owning utterance must not be emitted."""

    reason: DropReason


Result: TypeAlias = Union[Emitted, Dropped]
