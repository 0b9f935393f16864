"""Custom exception hierarchy for wordnet-reader."""


class WordnetReaderError(Exception):
    """Base exception for all wordnet-reader errors."""


class MalformedRecordError(WordnetReaderError):
    """A dataset line violates the positional or counted record layout."""

    def __init__(self, message: str, line: str | None = None):
        self.line = line
        super().__init__(message)


class UnknownCategoryError(WordnetReaderError, ValueError):
    """Unrecognized part-of-speech token."""


class ConfigError(WordnetReaderError):
    """Invalid configuration file or value."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)


class ExportError(WordnetReaderError):
    """Failed to export (unwritable destination, unparseable output)."""
