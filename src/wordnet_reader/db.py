"""Read-only access to the files of a WordNet installation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from wordnet_reader.config import Settings, load_settings
from wordnet_reader.exceptions import MalformedRecordError
from wordnet_reader.models import PartOfSpeech

logger = logging.getLogger(__name__)


class WordnetDB:
    """Locates and reads the index, data and exception files.

    The dataset is treated as static: nothing here caches, and nothing
    writes.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else load_settings()

    @property
    def data_dir(self) -> Path:
        return self.settings.data_dir

    def index_path(self, pos: PartOfSpeech) -> Path:
        return self.data_dir / self.settings.dict_dir / f"index.{pos.file_suffix}"

    def data_path(self, pos: PartOfSpeech) -> Path:
        return self.data_dir / self.settings.dict_dir / f"data.{pos.file_suffix}"

    def exception_path(self, pos: PartOfSpeech) -> Path:
        return (
            self.data_dir / self.settings.exceptions_dir / f"{pos.file_suffix}.exc"
        )

    def iter_lines(self, path: Path) -> Iterator[str]:
        """Yield each line of a text file without its line terminator."""
        _check_exists(path)
        logger.debug("Reading %s", path)
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                yield line.rstrip("\r\n")

    def read_line_at(self, path: Path, offset: int) -> str:
        """Seek to a byte *offset* and read exactly one line."""
        _check_exists(path)
        with open(path, "rb") as f:
            f.seek(offset)
            raw = f.readline()
        try:
            return raw.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise MalformedRecordError(
                f"Line at offset {offset} of {path.name} is not UTF-8: {e}",
                line=repr(raw),
            ) from e


def _check_exists(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(f"WordNet file not found: {path}")
