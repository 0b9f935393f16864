"""Wordnet: main entry point for the wordnet-reader library."""

from __future__ import annotations

import random as _random
from pathlib import Path
from typing import Any

from wordnet_reader.config import Settings, load_settings
from wordnet_reader.db import WordnetDB
from wordnet_reader.lemma import LemmaIndex
from wordnet_reader.models import Lemma, PartOfSpeech
from wordnet_reader.morphy import ExceptionTable, Morphy
from wordnet_reader.synset import Synset, SynsetReader


class Wordnet:
    """Read access to one WordNet installation.

    Each instance owns its own lemma index and exception table caches, so
    tests (or hosts juggling several datasets) can create a fresh instance
    instead of sharing hidden global state.
    """

    def __init__(
        self,
        data_dir: str | Path | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        if settings is None:
            settings = load_settings(data_dir)
        self.db = WordnetDB(settings)
        self.index = LemmaIndex(self.db)
        self.exceptions = ExceptionTable(self.db)
        self.normalizer = Morphy(self.index, self.exceptions)
        self.reader = SynsetReader(self.db, self.index, self.normalizer)

    @property
    def data_dir(self) -> Path:
        return self.db.data_dir

    def lookup(self, word: str, pos: PartOfSpeech | str) -> Lemma | None:
        """Find the lemma for an exact word and part of speech."""
        return self.index.find(word, PartOfSpeech.parse(pos))

    def lookup_all(self, word: str) -> list[list[Lemma]]:
        """Find the word's lemmas in every part of speech."""
        return self.index.find_all(word)

    def get(self, offset: int, pos: PartOfSpeech | str) -> Synset:
        """Decode the synset at a byte offset of a part of speech's data file."""
        return self.reader.get(offset, PartOfSpeech.parse(pos))

    def morphy(self, form: str, pos: PartOfSpeech | str | None = None) -> list[str]:
        """Base forms of an inflected *form*."""
        if pos is not None:
            pos = PartOfSpeech.parse(pos)
        return self.normalizer.morphy(form, pos)

    def random(
        self,
        pos: PartOfSpeech | str | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        rng: _random.Random | None = None,
    ) -> Lemma | None:
        """A random lemma, optionally of one part of speech and word length."""
        if pos is not None:
            pos = PartOfSpeech.parse(pos)
        return self.index.random(pos, min_length, max_length, rng)

    def synsets(self, word: str, pos: PartOfSpeech | str | None = None) -> list[Synset]:
        """Senses of *word* (inflected or not), optionally of one part of speech."""
        if pos is None:
            return self.reader.find_all(word)
        return self.reader.find(word, PartOfSpeech.parse(pos))

    def lemma_synsets(self, lemma: Lemma) -> list[Synset]:
        """Senses of a lemma, most frequent first."""
        return self.reader.synsets(lemma)

    def export_lmf(self, destination: str | Path, **options: Any) -> None:
        """Export this WordNet to a WN-LMF XML file."""
        from wordnet_reader.exporter import export_to_lmf

        export_to_lmf(self, destination, **options)
