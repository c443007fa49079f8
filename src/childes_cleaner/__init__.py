"""CHILDES corpus cleaner -- flattens TalkBank XML transcripts into text.

Public API re-exports for convenient access::

    from childes_cleaner import TranscriptParser, UtteranceStream
"""

from ._version import __version__
from .builder import UtteranceBuilder, build_utterance
from .classifier import NodeKind, classify, filter_children, terminal_punctuation
from .config import CleanerConfig, load_config
from .corpus import CorpusCleaner
from .exceptions import (
    ConfigError,
    CorpusCleanerError,
    CorpusError,
    MalformedTranscriptError,
    TranscriptParseError,
)
from .models import (
    Dropped,
    DropReason,
    Element,
    Emitted,
    Transcript,
    Utterance,
)
from .parser import TranscriptParser
from .resolver import WordResolver, clean_text
from .stream import UtteranceStream, iter_utterances

__all__ = [
    "__version__",
    # Core
    "TranscriptParser",
    "UtteranceStream",
    "iter_utterances",
    "UtteranceBuilder",
    "build_utterance",
    "WordResolver",
    "clean_text",
    # Classification
    "NodeKind",
    "classify",
    "filter_children",
    "terminal_punctuation",
    # Models
    "Transcript",
    "Utterance",
    "Element",
    "Emitted",
    "Dropped",
    "DropReason",
    # Corpus
    "CleanerConfig",
    "load_config",
    "CorpusCleaner",
    # Exceptions
    "CorpusCleanerError",
    "TranscriptParseError",
    "MalformedTranscriptError",
    "ConfigError",
    "CorpusError",
]
