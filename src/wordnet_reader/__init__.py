__version__ = "0.1.0"

import random as _random
from pathlib import Path

from .exceptions import (
    WordnetReaderError as WordnetReaderError,
    MalformedRecordError as MalformedRecordError,
    UnknownCategoryError as UnknownCategoryError,
    ConfigError as ConfigError,
    ExportError as ExportError,
)

from .models import (
    PartOfSpeech as PartOfSpeech,
    Lemma as Lemma,
    Pointer as Pointer,
    Frame as Frame,
    SynsetAddress as SynsetAddress,
)

from .config import (
    Settings as Settings,
    load_settings as load_settings,
)
from .synset import Synset as Synset
from .wordnet import Wordnet as Wordnet

_default: Wordnet | None = None


def get_default() -> Wordnet:
    """The shared Wordnet used by the module-level functions."""
    global _default
    if _default is None:
        _default = Wordnet()
    return _default


def set_data_dir(data_dir: str | Path | None) -> None:
    """Point the module-level functions at another WordNet installation.

    The shared instance is replaced, so its caches start cold; ``None``
    restores the default resolution order.
    """
    global _default
    _default = Wordnet(data_dir)


def lookup(word: str, pos: PartOfSpeech | str) -> Lemma | None:
    """Find the lemma for an exact word and part of speech."""
    return get_default().lookup(word, pos)


def lookup_all(word: str) -> list[list[Lemma]]:
    """Find the word's lemmas in every part of speech."""
    return get_default().lookup_all(word)


def get(offset: int, pos: PartOfSpeech | str) -> Synset:
    """Decode the synset at *offset* in the data file of *pos*."""
    return get_default().get(offset, pos)


def morphy(form: str, pos: PartOfSpeech | str | None = None) -> list[str]:
    """Base forms of an inflected *form*."""
    return get_default().morphy(form, pos)


def random(
    pos: PartOfSpeech | str | None = None,
    min_length: int | None = None,
    max_length: int | None = None,
    rng: _random.Random | None = None,
) -> Lemma | None:
    """A random lemma, optionally of one part of speech and word length."""
    return get_default().random(pos, min_length, max_length, rng)


def synsets(word: str, pos: PartOfSpeech | str | None = None) -> list[Synset]:
    """Senses of *word*, normalizing inflected forms first."""
    return get_default().synsets(word, pos)


__all__ = [
    # Main class
    "Wordnet",
    "Synset",
    "Settings",
    # Models
    "PartOfSpeech",
    "Lemma",
    "Pointer",
    "Frame",
    "SynsetAddress",
    # Exceptions
    "WordnetReaderError",
    "MalformedRecordError",
    "UnknownCategoryError",
    "ConfigError",
    "ExportError",
    # Module-level API
    "get_default",
    "set_data_dir",
    "load_settings",
    "lookup",
    "lookup_all",
    "get",
    "morphy",
    "random",
    "synsets",
]
