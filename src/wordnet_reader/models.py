"""Domain model dataclasses and enums for wordnet-reader."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wordnet_reader.exceptions import UnknownCategoryError

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PartOfSpeech(str, Enum):
    """The four grammatical categories of a WordNet database."""

    VERB = "v"
    NOUN = "n"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def file_suffix(self) -> str:
        """Suffix of the category's ``index.*``, ``data.*`` and ``*.exc`` files."""
        return _FILE_SUFFIXES[self]

    @classmethod
    def parse(cls, token: str | PartOfSpeech) -> PartOfSpeech:
        """Resolve a full name, short name or letter to a category.

        The adjective-satellite letter ``s`` resolves to ADJECTIVE, since
        satellites live in the adjective files.
        """
        if isinstance(token, PartOfSpeech):
            return token
        try:
            return _POS_ALIASES[token.lower()]
        except (KeyError, AttributeError):
            raise UnknownCategoryError(f"Unknown part of speech {token!r}") from None


_FILE_SUFFIXES: dict[PartOfSpeech, str] = {
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.ADJECTIVE: "adj",
    PartOfSpeech.ADVERB: "adv",
}

_POS_ALIASES: dict[str, PartOfSpeech] = {
    "verb": PartOfSpeech.VERB,
    "v": PartOfSpeech.VERB,
    "noun": PartOfSpeech.NOUN,
    "n": PartOfSpeech.NOUN,
    "adjective": PartOfSpeech.ADJECTIVE,
    "adj": PartOfSpeech.ADJECTIVE,
    "a": PartOfSpeech.ADJECTIVE,
    "s": PartOfSpeech.ADJECTIVE,
    "adverb": PartOfSpeech.ADVERB,
    "adv": PartOfSpeech.ADVERB,
    "r": PartOfSpeech.ADVERB,
}

# Lexicographer file names, indexed by a synset's lex_filenum.
LEXNAMES: tuple[str, ...] = (
    "adj.all", "adj.pert", "adv.all", "noun.Tops", "noun.act",
    "noun.animal", "noun.artifact", "noun.attribute", "noun.body",
    "noun.cognition", "noun.communication", "noun.event", "noun.feeling",
    "noun.food", "noun.group", "noun.location", "noun.motive",
    "noun.object", "noun.person", "noun.phenomenon", "noun.plant",
    "noun.possession", "noun.process", "noun.quantity", "noun.relation",
    "noun.shape", "noun.state", "noun.substance", "noun.time",
    "verb.body", "verb.change", "verb.cognition", "verb.communication",
    "verb.competition", "verb.consumption", "verb.contact",
    "verb.creation", "verb.emotion", "verb.motion", "verb.perception",
    "verb.possession", "verb.social", "verb.stative", "verb.weather",
    "adj.ppl",
)


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Lemma:
    """A word's index entry within one part of speech."""

    word: str
    pos: PartOfSpeech
    tagsense_count: int
    synset_offsets: tuple[int, ...]
    id: int
    pointer_symbols: tuple[str, ...]

    @property
    def synset_count(self) -> int:
        return len(self.synset_offsets)

    def __str__(self) -> str:
        return f"{self.word}, {self.pos.value}"


@dataclass(frozen=True, slots=True)
class SynsetAddress:
    """Where a synset lives: a byte offset into one category's data file."""

    offset: int
    pos: PartOfSpeech


@dataclass(frozen=True, slots=True)
class Pointer:
    """A typed relation from a synset (or one of its words) to another."""

    symbol: str
    offset: int
    pos: str
    source: str

    @property
    def source_index(self) -> int:
        """1-based member word in the source synset; 0 for the whole synset."""
        return int(self.source[:2], 16)

    @property
    def target_index(self) -> int:
        """1-based member word in the target synset; 0 for the whole synset."""
        return int(self.source[2:], 16)

    @property
    def is_lexical(self) -> bool:
        return self.source != "0000"

    @property
    def address(self) -> SynsetAddress:
        return SynsetAddress(self.offset, PartOfSpeech.parse(self.pos))

    @property
    def name(self) -> str | None:
        from wordnet_reader.pointers import relation_name

        return relation_name(self.symbol)


@dataclass(frozen=True, slots=True)
class Frame:
    """A generic verb frame; word_index 0 means all words in the synset."""

    number: int
    word_index: int
