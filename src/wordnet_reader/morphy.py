"""Morphological normalization of inflected word forms ("morphy")."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from wordnet_reader.db import WordnetDB
from wordnet_reader.models import Lemma, PartOfSpeech

logger = logging.getLogger(__name__)

# (suffix to strip, replacement to append), tried in this order.
MORPHOLOGICAL_SUBSTITUTIONS: dict[PartOfSpeech, tuple[tuple[str, str], ...]] = {
    PartOfSpeech.NOUN: (
        ("s", ""), ("ses", "s"), ("ves", "f"), ("xes", "x"), ("zes", "z"),
        ("ches", "ch"), ("shes", "sh"), ("men", "man"), ("ies", "y"),
    ),
    PartOfSpeech.VERB: (
        ("s", ""), ("ies", "y"), ("es", "e"), ("es", ""),
        ("ed", "e"), ("ed", ""), ("ing", "e"), ("ing", ""),
    ),
    PartOfSpeech.ADJECTIVE: (
        ("er", ""), ("est", ""), ("er", "e"), ("est", "e"),
    ),
    PartOfSpeech.ADVERB: (),
}


class _LemmaLookup(Protocol):
    def find(self, word: str, pos: PartOfSpeech) -> Lemma | None: ...


class ExceptionTable:
    """Irregular inflections (``mice`` -> ``mouse``) for every category.

    All four exception files are read together on first use. A failed read
    leaves the table unloaded so the next call tries again from scratch.
    """

    def __init__(
        self,
        db: WordnetDB | None = None,
        table: Mapping[PartOfSpeech, Mapping[str, list[str]]] | None = None,
    ) -> None:
        if db is None and table is None:
            raise ValueError("ExceptionTable needs a database or a table")
        self._db = db
        self._table: dict[PartOfSpeech, dict[str, list[str]]] | None = None
        if table is not None:
            self._table = {
                pos: dict(table.get(pos, {})) for pos in PartOfSpeech
            }

    @property
    def loaded(self) -> bool:
        return self._table is not None

    def load(self) -> dict[PartOfSpeech, dict[str, list[str]]]:
        if self._table is None:
            if self._db is None:
                raise ValueError("ExceptionTable needs a database or a table")
            self._table = _read_exception_files(self._db)
        return self._table

    def get(self, form: str, pos: PartOfSpeech) -> list[str] | None:
        """Base forms listed for an irregular *form*, or None."""
        return self.load()[PartOfSpeech.parse(pos)].get(form)


def _read_exception_files(db: WordnetDB) -> dict[PartOfSpeech, dict[str, list[str]]]:
    table: dict[PartOfSpeech, dict[str, list[str]]] = {}
    for pos in PartOfSpeech:
        entries: dict[str, list[str]] = {}
        for line in db.iter_lines(db.exception_path(pos)):
            fields = line.split()
            if fields:
                entries[fields[0]] = fields[1:]
        table[pos] = entries
        logger.debug("Loaded %d %s exceptions", len(entries), pos.name.lower())
    return table


class Morphy:
    """Maps surface forms to the base forms present in the lemma index."""

    def __init__(self, index: _LemmaLookup, exceptions: ExceptionTable) -> None:
        self.index = index
        self.exceptions = exceptions

    def morphy(self, form: str, pos: PartOfSpeech | None = None) -> list[str]:
        """Base forms of *form*, for one category or for all of them.

        Without *pos* the per-category results are merged in category
        order with duplicates removed.
        """
        if pos is None:
            merged: list[str] = []
            for each in PartOfSpeech:
                for base in self._morphy(form, each):
                    if base not in merged:
                        merged.append(base)
            return merged
        return self._morphy(form, PartOfSpeech.parse(pos))

    def _morphy(self, form: str, pos: PartOfSpeech) -> list[str]:
        # 0. Exception lists win outright, even when nothing survives.
        bases = self.exceptions.get(form, pos)
        if bases is not None:
            return self.filter_forms([form, *bases], pos)

        # 1. Apply the rules once, keeping the form itself as a candidate.
        forms = self.apply_rules([form], pos)
        results = self.filter_forms([form, *forms], pos)
        if results:
            return results

        # 2. Keep rewriting the previous round's candidates.
        while forms:
            forms = self.apply_rules(forms, pos)
            results = self.filter_forms(forms, pos)
            if results:
                return results

        return []

    @staticmethod
    def apply_rules(forms: Iterable[str], pos: PartOfSpeech) -> list[str]:
        """Every substitution that applies to every form, in rule order."""
        substitutions = MORPHOLOGICAL_SUBSTITUTIONS[pos]
        return [
            form[:len(form) - len(old)] + new
            for form in forms
            for old, new in substitutions
            if form.endswith(old)
        ]

    def filter_forms(self, forms: Iterable[str], pos: PartOfSpeech) -> list[str]:
        """Forms present in the index, first occurrence order, no repeats."""
        kept: list[str] = []
        for form in forms:
            if form not in kept and self.index.find(form, pos) is not None:
                kept.append(form)
        return kept
