"""Transcript parser -- converts TalkBank XML into ``models.Transcript`` objects.

Uses ``lxml.etree`` for XML parsing with recursive descent through the
element tree, constructing immutable model objects. Mixed content (text
interleaved with child elements) is preserved in order via
``element.text`` / ``child.tail``.
"""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from .exceptions import TranscriptParseError
from .models import ChildNode, Element, Transcript, Utterance

_UTTERANCE_TAG = "u"


def _strip_ns(tag: str) -> str:
    """Remove namespace prefix from an element tag if present."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _is_element(node: etree._Element) -> bool:
    # Comments and processing instructions carry a non-string tag.
    return isinstance(node.tag, str)


def _attributes(element: etree._Element) -> dict[str, str]:
    return {_strip_ns(str(k)): v for k, v in element.attrib.items()}


def _collect_children(element: etree._Element) -> tuple[ChildNode, ...]:
    """Walk mixed content of *element*, returning an ordered tuple of
    text strings and parsed child elements.
    """
    children: list[ChildNode] = []

    if element.text:
        children.append(element.text)

    for child_el in element:
        if _is_element(child_el):
            children.append(_parse_element(child_el))
        # Tail text follows comments too.
        if child_el.tail:
            children.append(child_el.tail)

    return tuple(children)


def _parse_element(element: etree._Element) -> Element:
    return Element(
        tag=_strip_ns(element.tag),
        attributes=_attributes(element),
        children=_collect_children(element),
    )


def _parse_utterance(element: etree._Element) -> Utterance:
    return Utterance(
        children=_collect_children(element),
        who=element.get("who"),
        uid=element.get("uID"),
    )


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class TranscriptParser:
    """Parse TalkBank XML into :class:`Transcript` objects."""

    def parse(self, xml: str | bytes, source: str | None = None) -> Transcript:
        """Parse a transcript from an XML string or bytes.

        Every ``<u>`` element is collected in document order, whatever the
        root element is. Raises
        :class:`~childes_cleaner.exceptions.TranscriptParseError` on
        malformed XML.
        """
        data = xml.encode("utf-8") if isinstance(xml, str) else xml
        try:
            root = etree.fromstring(data, _make_parser())  # noqa: S320
        except etree.XMLSyntaxError as exc:
            raise TranscriptParseError(
                str(exc),
                line=getattr(exc, "lineno", None),
                column=exc.position[1] if hasattr(exc, "position") else None,
            ) from exc

        utterances = tuple(
            _parse_utterance(el)
            for el in root.iter()
            if _is_element(el) and _strip_ns(el.tag) == _UTTERANCE_TAG
        )
        return Transcript(
            utterances=utterances,
            corpus=root.get("Corpus"),
            lang=root.get("Lang"),
            source=source,
        )

    def parse_file(self, path: str | Path) -> Transcript:
        """Parse a transcript XML file from disk."""
        p = Path(path)
        try:
            data = p.read_bytes()
        except OSError as exc:
            raise TranscriptParseError(f"Cannot read transcript {p}: {exc}") from exc
        return self.parse(data, source=str(p))
