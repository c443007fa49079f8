"""Word resolution -- computes the surface text of a single ``<w>`` element.

Rules are applied in a fixed precedence order:

1. ``type="retracing"`` or an ``untranscribed`` attribute drops the
   owning utterance.
2. A ``<replacement>`` child wins outright: its first ``<w>`` is resolved
   recursively and the outer literal text is discarded.
3. Otherwise the word's own leading text is extended, in document order,
   by every compound (``<wk type="cmp">``), drawl (``<p type="drawl">``)
   and ``<shortening>`` fragment, plus any text trailing a shortening.
4. Runs of ``z*_`` become a single space and the result is trimmed.
"""

from __future__ import annotations

import logging
import re

from . import classifier
from .exceptions import MalformedTranscriptError
from .models import ChildNode, Dropped, DropReason, Element, Emitted, Result

logger = logging.getLogger(__name__)

_UNDERSCORE_RE = re.compile(r"z*_")


def clean_text(text: str) -> str:
    """Replace ``z*_`` runs with a space and trim."""
    return _UNDERSCORE_RE.sub(" ", text).strip()


def _sibling_text(children: tuple[ChildNode, ...], index: int) -> str | None:
    """Text content of ``children[index + 1]``, or ``None`` at the end."""
    if index + 1 >= len(children):
        return None
    sibling = children[index + 1]
    if isinstance(sibling, str):
        return sibling
    return sibling.text_content()


def _first_text(element: Element) -> str | None:
    for text in element.itertext():
        if text:
            return text
    return None


class WordResolver:
    """Resolve ``<w>`` elements to cleaned text or a drop signal.

    With ``strict=True`` a fragment missing the material the schema
    guarantees (compound without a following sibling, empty shortening,
    replacement without a ``<w>``) raises
    :class:`~childes_cleaner.exceptions.MalformedTranscriptError`.
    Otherwise a warning is logged and the fragment contributes nothing.
    """

    def __init__(self, strict: bool = True) -> None:
        self.strict = strict

    def resolve(self, word: Element) -> Result:
        if word.get("type") == "retracing":
            return Dropped(DropReason.RETRACING)
        if word.has("untranscribed"):
            return Dropped(DropReason.UNTRANSCRIBED)

        replacement = word.find("replacement")
        if replacement is not None:
            inner = replacement.find("w")
            if inner is None:
                self._malformed("replacement without a <w>", word)
                return Emitted("")
            return self.resolve(inner)

        return Emitted(clean_text(word.text + self._fragments(word)))

    def _fragments(self, word: Element) -> str:
        parts: list[str] = []
        children = word.children
        for i, child in enumerate(children):
            if classifier.is_compound(child):
                text = _sibling_text(children, i)
                if text is None:
                    self._malformed("compound fragment without a following sibling", word)
                else:
                    parts.append(text)
            elif classifier.is_drawl(child):
                text = _sibling_text(children, i)
                if text is not None:
                    parts.append(text)
            elif classifier.is_shortening(child):
                text = _first_text(child)
                if text is None:
                    self._malformed("empty shortening", word)
                else:
                    parts.append(text)
            elif isinstance(child, str) and i > 0 and classifier.is_shortening(children[i - 1]):
                parts.append(child)
        return "".join(parts)

    def _malformed(self, problem: str, word: Element) -> None:
        label = word.text_content()
        if self.strict:
            raise MalformedTranscriptError(problem, word=label)
        logger.warning("Malformed transcript: %s in word %r; ignoring", problem, label)
