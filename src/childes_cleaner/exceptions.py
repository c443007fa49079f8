"""Custom exception hierarchy for the childes_cleaner package."""


class CorpusCleanerError(Exception):
    """Base exception for all childes_cleaner errors."""


class TranscriptParseError(CorpusCleanerError):
    """Raised when transcript XML cannot be parsed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        location = ""
        if line is not None:
            location = f" (line {line}"
            if column is not None:
                location += f", column {column}"
            location += ")"
        super().__init__(f"{message}{location}")


class MalformedTranscriptError(CorpusCleanerError):
    """Raised when a word lacks structure the transcript schema guarantees."""

    def __init__(self, message: str, word: str | None = None) -> None:
        self.word = word
        if word:
            message = f"{message} in word {word!r}"
        super().__init__(message)


class ConfigError(CorpusCleanerError):
    """Raised when a run configuration is invalid."""


class CorpusError(CorpusCleanerError):
    """Raised when a corpus directory cannot be read."""
