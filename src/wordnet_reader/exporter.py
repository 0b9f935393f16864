"""Export pipeline: WordNet database files to WN-LMF XML."""

from __future__ import annotations

import logging
import re
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wordnet_reader.exceptions import ExportError
from wordnet_reader.models import PartOfSpeech
from wordnet_reader.pointers import (
    SENSE_RELATIONS,
    SYNSET_RELATIONS,
    is_valid_pointer,
)
from wordnet_reader.synset import Synset

if TYPE_CHECKING:
    from wordnet_reader.wordnet import Wordnet

logger = logging.getLogger(__name__)

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_.-]")
# Syntactic marker on adjectives in data files: able(a), galore(ip).
_ADJECTIVE_MARKER = re.compile(r"\([a-z]+\)$")


def export_to_lmf(
    wordnet: Wordnet,
    destination: str | Path,
    *,
    lexicon_id: str = "wnr",
    label: str = "WordNet",
    language: str = "en",
    email: str = "",
    license: str = "https://wordnet.princeton.edu/license-and-commercial-use",
    version: str = "1.0",
    pos: PartOfSpeech | None = None,
    lmf_version: str = "1.4",
) -> None:
    """Export the database (or one part of speech of it) to WN-LMF XML."""
    import wn.lmf

    resource = build_resource(
        wordnet,
        lexicon_id=lexicon_id, label=label, language=language, email=email,
        license=license, version=version, pos=pos, lmf_version=lmf_version,
    )

    try:
        wn.lmf.dump(resource, str(destination))  # type: ignore[arg-type]
    except OSError as e:
        raise ExportError(f"Failed to write {destination}: {e}") from e

    # Validate output
    try:
        wn.lmf.load(str(destination))
    except Exception as e:
        raise ExportError(f"Exported XML does not parse: {e}") from e


def build_resource(
    wordnet: Wordnet,
    *,
    lexicon_id: str,
    label: str,
    language: str,
    email: str,
    license: str,
    version: str,
    pos: PartOfSpeech | None = None,
    lmf_version: str = "1.4",
) -> dict:
    """Build a LexicalResource TypedDict for ``wn.lmf.dump``."""
    categories = [PartOfSpeech.parse(pos)] if pos is not None else list(PartOfSpeech)
    builder = _LexiconBuilder(wordnet, lexicon_id)
    for category in categories:
        builder.add_category(category)

    lexicon: dict[str, Any] = {
        "id": lexicon_id,
        "label": label,
        "language": language,
        "email": email,
        "license": license,
        "version": version,
        "url": "",
        "citation": "",
        "logo": "",
        "meta": None,
        "entries": builder.entries(),
        "synsets": builder.synsets(),
        "requires": [],
        "frames": [],
    }
    builder.report_warnings()
    return {"lmf_version": lmf_version, "lexicons": [lexicon]}


class _LexiconBuilder:
    """Collects entries and synsets while walking the lemma index."""

    def __init__(self, wordnet: Wordnet, lexicon_id: str) -> None:
        self._wordnet = wordnet
        self._lexicon_id = lexicon_id
        self._entries: dict[str, dict[str, Any]] = {}
        self._synsets: dict[tuple[PartOfSpeech, int], Synset] = {}
        self._sense_ids: set[str] = set()
        self._dropped: Counter[str] = Counter()
        self._invalid: Counter[tuple[str, PartOfSpeech]] = Counter()

    def add_category(self, pos: PartOfSpeech) -> None:
        for lemma in self._wordnet.index.lemmas(pos):
            entry_id = f"{self._lexicon_id}-{_safe(lemma.word)}-{pos.value}"
            senses = []
            for n, offset in enumerate(lemma.synset_offsets, start=1):
                synset = self._synset(offset, pos)
                sense_id = self._sense_id(lemma.word, synset)
                self._sense_ids.add(sense_id)
                senses.append({
                    "id": sense_id,
                    "synset": self._synset_id(synset),
                    "n": n,
                    "lexicalized": True,
                    "adjposition": "",
                    "meta": None,
                    "relations": [],
                    "examples": [],
                    "counts": [],
                    "subcat": [],
                })
            self._entries[entry_id] = {
                "id": entry_id,
                "lemma": {
                    "writtenForm": lemma.word.replace("_", " "),
                    "partOfSpeech": pos.value,
                    "script": "",
                    "pronunciations": [],
                    "tags": [],
                },
                "forms": [],
                "senses": senses,
                "meta": None,
            }

    def entries(self) -> list[dict[str, Any]]:
        senses_by_id = {
            sense["id"]: sense
            for entry in self._entries.values()
            for sense in entry["senses"]
        }
        for synset in list(self._synsets.values()):
            for pointer in synset.pointers:
                name = pointer.name
                if not pointer.is_lexical or name not in SENSE_RELATIONS:
                    continue
                target = self._synset(pointer.offset, pointer.address.pos)
                source_id = self._member_sense_id(synset, pointer.source_index)
                target_id = self._member_sense_id(target, pointer.target_index)
                if source_id in senses_by_id and target_id in self._sense_ids:
                    senses_by_id[source_id]["relations"].append({
                        "target": target_id,
                        "relType": name,
                        "meta": None,
                    })
                else:
                    self._dropped[pointer.symbol] += 1
        return list(self._entries.values())

    def synsets(self) -> list[dict[str, Any]]:
        # Building a synset can decode new relation targets; repeat until
        # every decoded synset has been built.
        built: dict[tuple[PartOfSpeech, int], dict[str, Any]] = {}
        while len(built) < len(self._synsets):
            for key, synset in list(self._synsets.items()):
                if key not in built:
                    built[key] = self._build_synset(synset)
        return list(built.values())

    def report_warnings(self) -> None:
        for (symbol, pos), count in sorted(self._invalid.items()):
            logger.warning(
                "Found %d %r pointers not valid on %s synsets",
                count, symbol, pos.name.lower(),
            )
        for symbol, count in sorted(self._dropped.items()):
            logger.warning(
                "Dropped %d %r pointers with no WN-LMF counterpart", count, symbol
            )

    def _build_synset(self, synset: Synset) -> dict[str, Any]:
        relations = []
        for pointer in synset.pointers:
            if not is_valid_pointer(pointer.symbol, synset.pos):
                self._invalid[(pointer.symbol, synset.pos)] += 1
            name = pointer.name
            if pointer.is_lexical and name in SENSE_RELATIONS:
                continue  # emitted as a sense relation
            if name not in SYNSET_RELATIONS:
                self._dropped[pointer.symbol] += 1
                continue
            target = self._synset(pointer.offset, pointer.address.pos)
            relations.append({
                "target": self._synset_id(target),
                "relType": name,
                "meta": None,
            })

        members = [
            sense_id
            for sense_id in (
                self._sense_id(word, synset) for word in synset.words
            )
            if sense_id in self._sense_ids
        ]

        return {
            "id": self._synset_id(synset),
            "partOfSpeech": synset.synset_type,
            "ili": "",
            "lexicalized": True,
            "lexfile": synset.lexname or "",
            "meta": None,
            "definitions": [{"text": synset.definition, "meta": None}],
            "relations": relations,
            "examples": [{"text": text, "meta": None} for text in synset.examples],
            "members": members,
        }

    def _synset(self, offset: int, pos: PartOfSpeech) -> Synset:
        key = (pos, offset)
        if key not in self._synsets:
            self._synsets[key] = self._wordnet.get(offset, pos)
        return self._synsets[key]

    def _synset_id(self, synset: Synset) -> str:
        return f"{self._lexicon_id}-{synset.pos_offset:08d}-{synset.synset_type}"

    def _sense_id(self, word: str, synset: Synset) -> str:
        word = _ADJECTIVE_MARKER.sub("", word)
        return (
            f"{self._lexicon_id}-{_safe(word.lower())}-"
            f"{synset.pos_offset:08d}-{synset.synset_type}"
        )

    def _member_sense_id(self, synset: Synset, index: int) -> str:
        words = synset.words
        if not 1 <= index <= len(words):
            return ""
        return self._sense_id(words[index - 1], synset)


def _safe(word: str) -> str:
    return _UNSAFE_ID_CHARS.sub("_", word)
