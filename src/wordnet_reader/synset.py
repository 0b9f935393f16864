"""Synsets and traversal of the relations between them."""

from __future__ import annotations

import re
from typing import Any

from wordnet_reader.db import WordnetDB
from wordnet_reader.lemma import LemmaIndex
from wordnet_reader.models import (
    LEXNAMES,
    Frame,
    Lemma,
    PartOfSpeech,
    Pointer,
    SynsetAddress,
)
from wordnet_reader.morphy import Morphy
from wordnet_reader.pointers import ANTONYM, HYPERNYM, HYPONYM
from wordnet_reader.records import parse_data_line

_EXAMPLE = re.compile(r'"([^"]*)"')
_DEFINITION_END = re.compile(r';\s*"')


class Synset:
    """A group of synonymous words sharing one gloss.

    Synsets are decoded on demand and never cached: two lookups of the same
    offset produce equal but distinct objects. Related synsets are decoded
    lazily by the relation accessors.
    """

    __slots__ = (
        "_reader", "pos", "pos_offset", "synset_offset", "lex_filenum",
        "synset_type", "word_counts", "pointers", "frames", "gloss",
    )

    def __init__(
        self,
        reader: SynsetReader,
        pos: PartOfSpeech,
        pos_offset: int,
        *,
        synset_offset: str,
        lex_filenum: int,
        synset_type: str,
        word_counts: dict[str, int],
        pointers: tuple[Pointer, ...],
        frames: tuple[Frame, ...],
        gloss: str,
    ) -> None:
        self._reader = reader
        self.pos = pos
        self.pos_offset = pos_offset
        self.synset_offset = synset_offset
        self.lex_filenum = lex_filenum
        self.synset_type = synset_type
        self.word_counts = word_counts
        self.pointers = pointers
        self.frames = frames
        self.gloss = gloss

    @property
    def address(self) -> SynsetAddress:
        return SynsetAddress(self.pos_offset, self.pos)

    @property
    def words(self) -> list[str]:
        return list(self.word_counts)

    @property
    def word_count(self) -> int:
        return len(self.word_counts)

    @property
    def lexname(self) -> str | None:
        if 0 <= self.lex_filenum < len(LEXNAMES):
            return LEXNAMES[self.lex_filenum]
        return None

    @property
    def definition(self) -> str:
        """The gloss without its quoted usage examples."""
        return _DEFINITION_END.split(self.gloss, maxsplit=1)[0].strip()

    @property
    def examples(self) -> list[str]:
        return _EXAMPLE.findall(self.gloss)

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def relation(self, pointer_symbol: str) -> list[Synset]:
        """Synsets reached through every pointer with *pointer_symbol*.

        Targets are decoded from this synset's own data file; the part of
        speech stored on the pointer is not consulted.
        """
        return [
            self._reader.get(pointer.offset, self.pos)
            for pointer in self.pointers
            if pointer.symbol == pointer_symbol
        ]

    def antonyms(self) -> list[Synset]:
        return self.relation(ANTONYM)

    def hypernym(self) -> Synset | None:
        """The first parent synset, if any."""
        parents = self.hypernyms()
        return parents[0] if parents else None

    def hypernyms(self) -> list[Synset]:
        """Parent synsets (more general concepts, e.g. dog -> canine)."""
        return self.relation(HYPERNYM)

    def hyponyms(self) -> list[Synset]:
        """Child synsets (more specific concepts, e.g. dog -> puppy)."""
        return self.relation(HYPONYM)

    def synonyms(self) -> list[Synset]:
        return self.hypernyms() + self.hyponyms()

    def expanded_first_hypernyms(self) -> list[Synset]:
        """Follow the first hypernym of each ancestor up to the root."""
        seen: list[int] = []
        parent = self.hypernym()
        while parent is not None and parent.pos_offset not in seen:
            seen.append(parent.pos_offset)
            parent = parent.hypernym()
        return [self._reader.get(offset, self.pos) for offset in seen]

    def expanded_hypernyms(self) -> list[Synset]:
        """Every ancestor reachable through hypernym pointers.

        The walk uses a last-in-first-out worklist and skips offsets it has
        already visited, so cycles and diamonds terminate. Ancestors come
        back in visit order, re-decoded from this synset's data file.
        """
        worklist = self.hypernyms()
        visited: list[int] = []
        seen: set[int] = set()
        while worklist:
            parent = worklist.pop()
            if parent.pos_offset in seen:
                continue
            seen.add(parent.pos_offset)
            visited.append(parent.pos_offset)
            worklist.extend(parent.hypernyms())
        return [self._reader.get(offset, self.pos) for offset in visited]

    def expanded_hypernyms_depth(self) -> tuple[list[tuple[Synset, int]], int]:
        """Like expanded_hypernyms, with the depth at which each ancestor was
        first visited, plus the maximum depth seen.

        Depths follow the last-in-first-out visit order, so an ancestor
        reachable by several paths gets the depth of the path walked first,
        which is not necessarily the shortest one.
        """
        worklist = [(parent, 1) for parent in self.hypernyms()]
        if not worklist:
            return [], 0

        seen: set[int] = set()
        out: list[tuple[Synset, int]] = []
        max_depth = 1
        while worklist:
            parent, depth = worklist.pop()
            if parent.pos_offset in seen:
                continue
            seen.add(parent.pos_offset)
            out.append((self._reader.get(parent.pos_offset, self.pos), depth))
            worklist.extend((grand, depth + 1) for grand in parent.hypernyms())
            max_depth = max(max_depth, depth)
        return out, max_depth

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Synset):
            return NotImplemented
        return (self.pos, self.pos_offset) == (other.pos, other.pos_offset)

    def __hash__(self) -> int:
        return hash((self.pos, self.pos_offset))

    def __repr__(self) -> str:
        return f"Synset({self.pos.value!r}, {self.pos_offset}, words={self.words!r})"

    def __str__(self) -> str:
        words = ", ".join(word.replace("_", " ") for word in self.words)
        return f"({self.synset_type}) {words} ({self.gloss})"


class SynsetReader:
    """Decodes synsets from the data files and finds them by word."""

    def __init__(self, db: WordnetDB, index: LemmaIndex, morphy: Morphy) -> None:
        self._db = db
        self.index = index
        self.morphy = morphy

    def get(self, offset: int, pos: PartOfSpeech) -> Synset:
        """Decode the synset stored at byte *offset* of the *pos* data file."""
        pos = PartOfSpeech.parse(pos)
        line = self._db.read_line_at(self._db.data_path(pos), offset)
        fields: dict[str, Any] = parse_data_line(line)
        return Synset(self, pos, offset, **fields)

    def synsets(self, lemma: Lemma) -> list[Synset]:
        """Each sense of a lemma, most frequent first."""
        return [self.get(offset, lemma.pos) for offset in lemma.synset_offsets]

    def find(self, word: str, pos: PartOfSpeech) -> list[Synset]:
        """Synsets of every base form of *word* within one category."""
        pos = PartOfSpeech.parse(pos)
        found: list[Synset] = []
        for form in self.morphy.morphy(word.lower(), pos):
            lemma = self.index.find(form, pos)
            if lemma is not None:
                found.extend(self.synsets(lemma))
        return found

    def find_all(self, word: str) -> list[Synset]:
        return [synset for pos in PartOfSpeech for synset in self.find(word, pos)]
