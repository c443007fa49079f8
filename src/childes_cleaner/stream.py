"""Utterance stream -- lazily yields cleaned lines for one speaker."""

from __future__ import annotations

from typing import Iterator

from .builder import UtteranceBuilder
from .models import Emitted, Transcript
from .resolver import WordResolver

DEFAULT_SPEAKER = "CHI"

# A line holding nothing but a full stop carries no speech.
_BARE_TERMINAL = "."


class UtteranceStream:
    """Iterate over the cleaned utterances of *speaker* in *transcript*.

    The stream is single-pass: once exhausted it stays exhausted. Dropped
    utterances, empty lines and bare ``"."`` lines are skipped.
    """

    def __init__(
        self,
        transcript: Transcript,
        speaker: str = DEFAULT_SPEAKER,
        builder: UtteranceBuilder | None = None,
    ) -> None:
        self.transcript = transcript
        self.speaker = speaker
        self.builder = builder or UtteranceBuilder()
        self._position = 0

    def __iter__(self) -> UtteranceStream:
        return self

    def __next__(self) -> str:
        utterances = self.transcript.utterances
        while self._position < len(utterances):
            utterance = utterances[self._position]
            self._position += 1
            if utterance.who != self.speaker:
                continue
            result = self.builder.build(utterance)
            if not isinstance(result, Emitted):
                continue
            if result.text and result.text != _BARE_TERMINAL:
                return result.text
        raise StopIteration


def iter_utterances(
    transcript: Transcript, speaker: str = DEFAULT_SPEAKER, strict: bool = True
) -> Iterator[str]:
    """Shorthand for an :class:`UtteranceStream` with a default builder."""
    return UtteranceStream(transcript, speaker, UtteranceBuilder(WordResolver(strict=strict)))
