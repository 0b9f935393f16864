"""In-memory lemma index over the ``index.*`` files."""

from __future__ import annotations

import logging
import random as _random
from collections.abc import Iterator

from wordnet_reader.db import WordnetDB
from wordnet_reader.models import Lemma, PartOfSpeech
from wordnet_reader.records import parse_index_line

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 0
DEFAULT_MAX_LENGTH = 1_000_000


class LemmaIndex:
    """Per-category cache mapping words to their index records.

    Each category's index file is read once, on first use, and kept for the
    lifetime of the object. The cache is built once and then only read;
    callers sharing one instance across threads must serialize the first
    build of each category themselves.
    """

    def __init__(self, db: WordnetDB) -> None:
        self._db = db
        self._cache: dict[PartOfSpeech, dict[str, tuple[str, int]]] = {}
        self._lemmas: dict[PartOfSpeech, dict[str, Lemma]] = {}

    def build_cache(self, pos: PartOfSpeech) -> dict[str, tuple[str, int]]:
        """Load the index file for *pos*, or return the already loaded one.

        Maps each word to its raw line and its 1-based line number. License
        header lines (which start with a space) are skipped but still
        counted.
        """
        pos = PartOfSpeech.parse(pos)
        if pos in self._cache:
            return self._cache[pos]

        entries: dict[str, tuple[str, int]] = {}
        for index, line in enumerate(self._db.iter_lines(self._db.index_path(pos))):
            if not line or line.startswith(" "):
                continue
            word = line.split(" ", 1)[0]
            entries[word] = (line, index + 1)

        logger.debug("Loaded %d %s index entries", len(entries), pos.name.lower())
        self._cache[pos] = entries
        self._lemmas[pos] = {}
        return entries

    def clear(self) -> None:
        """Drop every cached category."""
        self._cache.clear()
        self._lemmas.clear()

    def find(self, word: str, pos: PartOfSpeech) -> Lemma | None:
        """Exact, case-sensitive lookup; None when the word is absent."""
        pos = PartOfSpeech.parse(pos)
        cache = self.build_cache(pos)
        lemmas = self._lemmas[pos]
        if word in lemmas:
            return lemmas[word]
        found = cache.get(word)
        if found is None:
            return None
        lemma = parse_index_line(*found)
        lemmas[word] = lemma
        return lemma

    def find_all(self, word: str) -> list[list[Lemma]]:
        """Find the word in every category, one list per category."""
        results = []
        for pos in PartOfSpeech:
            lemma = self.find(word, pos)
            results.append([lemma] if lemma is not None else [])
        return results

    def lemmas(self, pos: PartOfSpeech) -> Iterator[Lemma]:
        """Iterate every lemma of a category in index file order."""
        pos = PartOfSpeech.parse(pos)
        for word in list(self.build_cache(pos)):
            lemma = self.find(word, pos)
            if lemma is not None:
                yield lemma

    def random(
        self,
        pos: PartOfSpeech | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        rng: _random.Random | None = None,
    ) -> Lemma | None:
        """Pick a lemma uniformly at random, optionally bounded by word length.

        Without *pos*, one candidate is drawn from each category and the
        result is drawn from those candidates.
        """
        if min_length is None:
            min_length = DEFAULT_MIN_LENGTH
        if max_length is None:
            max_length = DEFAULT_MAX_LENGTH
        if rng is None:
            rng = _random.Random()

        if pos is not None:
            pos = PartOfSpeech.parse(pos)
            picked = self._sample(pos, min_length, max_length, rng)
        else:
            candidates = [
                pick
                for pick in (
                    self._sample(p, min_length, max_length, rng)
                    for p in PartOfSpeech
                )
                if pick is not None
            ]
            picked = rng.choice(candidates) if candidates else None

        if picked is None:
            return None
        word, picked_pos = picked
        return self.find(word, picked_pos)

    def _sample(
        self,
        pos: PartOfSpeech,
        min_length: int,
        max_length: int,
        rng: _random.Random,
    ) -> tuple[str, PartOfSpeech] | None:
        items = [
            word
            for word in self.build_cache(pos)
            if min_length <= len(word) <= max_length
        ]
        if not items:
            return None
        return (rng.choice(items), pos)
