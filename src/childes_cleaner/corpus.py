"""Corpus driver -- cleans every transcript of one corpus directory.

A corpus directory holds one TalkBank XML file per recording session::

    Nina/
    ├── 010100.xml
    ├── 010101.xml
    └── ...

The cleaned utterances of all sessions, in file-name order, are written to
a single text file with one utterance per line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .builder import UtteranceBuilder
from .config import CleanerConfig
from .exceptions import CorpusError
from .parser import TranscriptParser
from .resolver import WordResolver
from .stream import DEFAULT_SPEAKER, UtteranceStream

logger = logging.getLogger(__name__)

_OUTPUT_SUFFIX = ".utterances.txt"


class CorpusCleaner:
    """Clean a directory of transcripts into one utterance file."""

    def __init__(self, config: CleanerConfig) -> None:
        self.config = config
        self._parser = TranscriptParser()
        self._builder = UtteranceBuilder(WordResolver(strict=config.strict))

    @property
    def output_path(self) -> Path:
        """``<name>.utterances.txt``, or ``<name>-<speaker>.utterances.txt``
        for any speaker other than the target child."""
        stem = self.config.name
        if self.config.speaker != DEFAULT_SPEAKER:
            stem += f"-{self.config.speaker.lower()}"
        return self.config.output_dir / f"{stem}{_OUTPUT_SUFFIX}"

    def list_transcripts(self) -> list[Path]:
        input_dir = self.config.input_dir
        if not input_dir.is_dir():
            raise CorpusError(f"Corpus directory does not exist: {input_dir}")
        return sorted(p for p in input_dir.glob("*.xml") if p.is_file())

    def clean_file(self, path: str | Path) -> list[str]:
        transcript = self._parser.parse_file(path)
        lines = list(UtteranceStream(transcript, self.config.speaker, self._builder))
        logger.info(
            "%s: kept %d of %d utterances",
            Path(path).name,
            len(lines),
            len(transcript.utterances),
        )
        return lines

    def clean(self) -> list[str]:
        files = self.list_transcripts()
        if not files:
            logger.warning("No transcripts found in %s", self.config.input_dir)
        lines: list[str] = []
        for path in files:
            lines.extend(self.clean_file(path))
        return lines

    def write(self, lines: list[str]) -> Path:
        out = self.output_path
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return out

    def run(self) -> Path:
        """Clean the whole corpus and write the result; returns the output path."""
        lines = self.clean()
        out = self.write(lines)
        logger.info("Wrote %d utterances to %s", len(lines), out)
        return out
