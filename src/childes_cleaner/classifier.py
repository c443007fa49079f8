"""Node classification for utterance children and word fragments."""

from __future__ import annotations

import enum
from typing import Iterable, TypeGuard

from .models import ChildNode, Element

PAUSE_TOKEN = ","

_TERMINAL_PUNCTUATION: dict[str, str] = {
    "p": ".",
    "q": "?",
    "e": "!",
}


class NodeKind(enum.Enum):
    WORD = "w"
    PAUSE = "pause"
    TERMINAL = "t"
    GROUPED = "g"
    IGNORED = ""


_KINDS_BY_TAG = {kind.value: kind for kind in NodeKind if kind is not NodeKind.IGNORED}


def classify(node: ChildNode) -> NodeKind:
    """Return the syntactic role of *node*, judged by its tag alone."""
    if isinstance(node, str):
        return NodeKind.IGNORED
    return _KINDS_BY_TAG.get(node.tag, NodeKind.IGNORED)


def filter_children(children: Iterable[ChildNode]) -> list[Element]:
    """Keep only words, pauses, terminal markers and groups, in order."""
    return [c for c in children if isinstance(c, Element) and classify(c) is not NodeKind.IGNORED]


def terminal_punctuation(node: Element) -> str:
    """Map a ``<t type="...">`` marker to its punctuation; unknown -> ``""``."""
    return _TERMINAL_PUNCTUATION.get(node.get("type") or "", "")


# ---------------------------------------------------------------------------
# Word fragment predicates
# ---------------------------------------------------------------------------


def _is(item: ChildNode | None, tag: str, type_: str | None = None) -> TypeGuard[Element]:
    if not isinstance(item, Element) or item.tag != tag:
        return False
    return type_ is None or item.get("type") == type_


def is_compound(item: ChildNode | None) -> TypeGuard[Element]:
    return _is(item, "wk", "cmp")


def is_drawl(item: ChildNode | None) -> TypeGuard[Element]:
    return _is(item, "p", "drawl")


def is_shortening(item: ChildNode | None) -> TypeGuard[Element]:
    return _is(item, "shortening")


def is_replacement(item: ChildNode | None) -> TypeGuard[Element]:
    return _is(item, "replacement")
