"""Utterance building -- assembles one ``<u>`` into a single cleaned line."""

from __future__ import annotations

import logging

from .classifier import PAUSE_TOKEN, NodeKind, classify, filter_children, terminal_punctuation
from .models import Dropped, DropReason, Emitted, Result, Utterance
from .resolver import WordResolver

logger = logging.getLogger(__name__)


class UtteranceBuilder:
    """Turn an utterance into cleaned text, or drop it whole.

    Only words, pauses, terminal markers and groups are examined. A group
    (``<g>``) or a word that resolves to a drop ends processing of the
    utterance at once; nothing produced so far is kept.
    """

    def __init__(self, resolver: WordResolver | None = None) -> None:
        self.resolver = resolver or WordResolver()

    def build(self, utterance: Utterance) -> Result:
        fragments: list[str] = []
        for node in filter_children(utterance.children):
            kind = classify(node)
            if kind is NodeKind.PAUSE:
                fragments.append(PAUSE_TOKEN)
            elif kind is NodeKind.TERMINAL:
                fragments.append(terminal_punctuation(node))
            elif kind is NodeKind.GROUPED:
                return self._drop(utterance, DropReason.GROUPED)
            else:
                result = self.resolver.resolve(node)
                if isinstance(result, Dropped):
                    return self._drop(utterance, result.reason)
                fragments.append(result.text)
        return Emitted("".join(f + " " for f in fragments).strip())

    def _drop(self, utterance: Utterance, reason: DropReason) -> Dropped:
        logger.debug("Dropping utterance %s (%s)", utterance.uid or "?", reason.value)
        return Dropped(reason)


def build_utterance(utterance: Utterance, strict: bool = True) -> Result:
    """Build *utterance* with a default builder."""
    return UtteranceBuilder(WordResolver(strict=strict)).build(utterance)
