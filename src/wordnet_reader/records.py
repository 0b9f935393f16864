"""Decoding of index and data file records.

Both record kinds are whitespace-delimited and positional, with counted
sections: a count field followed by that many repeated sub-fields.

Index record::

    lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt tagsense_cnt
    synset_offset [synset_offset...]

Data record::

    synset_offset lex_filenum ss_type w_cnt word lex_id [word lex_id...]
    p_cnt [ptr...] [frames...] | gloss

where each ``ptr`` is ``pointer_symbol synset_offset pos source/target`` and
the frames section (verbs only) is ``f_cnt + f_num w_num [+ f_num w_num...]``.
``w_cnt`` and ``lex_id`` are hexadecimal; every other count is decimal.
"""

from __future__ import annotations

from typing import Any

from wordnet_reader.exceptions import MalformedRecordError
from wordnet_reader.models import Frame, Lemma, PartOfSpeech, Pointer

GLOSS_DELIMITER = " | "


class _Tokens:
    """A cursor over the tokens of one record."""

    def __init__(self, line: str, tokens: list[str]) -> None:
        self.line = line
        self.tokens = tokens
        self.pos = 0

    def remaining(self) -> int:
        return len(self.tokens) - self.pos

    def take(self, field: str) -> str:
        if self.pos >= len(self.tokens):
            raise MalformedRecordError(
                f"Record ended before field {field!r}", line=self.line
            )
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def take_int(self, field: str, base: int = 10) -> int:
        token = self.take(field)
        try:
            return int(token, base)
        except ValueError:
            raise MalformedRecordError(
                f"Field {field!r} is not a number: {token!r}", line=self.line
            ) from None

    def take_many(self, count: int, field: str) -> list[str]:
        if count < 0 or self.remaining() < count:
            raise MalformedRecordError(
                f"Expected {count} {field} fields, found {max(self.remaining(), 0)}",
                line=self.line,
            )
        taken = self.tokens[self.pos:self.pos + count]
        self.pos += count
        return taken


def parse_index_line(line: str, id: int) -> Lemma:
    """Decode one line of an ``index.*`` file into a Lemma."""
    cursor = _Tokens(line, line.split())

    word = cursor.take("lemma")
    pos = PartOfSpeech.parse(cursor.take("pos"))
    synset_count = cursor.take_int("synset_cnt")
    pointer_count = cursor.take_int("p_cnt")
    pointer_symbols = cursor.take_many(pointer_count, "ptr_symbol")
    cursor.take_int("sense_cnt")  # redundant with synset_cnt
    tagsense_count = cursor.take_int("tagsense_cnt")

    if synset_count < 1:
        raise MalformedRecordError(
            f"Lemma {word!r} lists no synsets", line=line
        )
    if cursor.remaining() != synset_count:
        raise MalformedRecordError(
            f"Expected {synset_count} synset offsets, found {cursor.remaining()}",
            line=line,
        )
    synset_offsets = tuple(
        _to_offset(token, line)
        for token in cursor.take_many(synset_count, "synset_offset")
    )

    return Lemma(
        word=word,
        pos=pos,
        tagsense_count=tagsense_count,
        synset_offsets=synset_offsets,
        id=id,
        pointer_symbols=tuple(pointer_symbols),
    )


def parse_data_line(line: str) -> dict[str, Any]:
    """Decode one line of a ``data.*`` file into its fields.

    The gloss is everything after the first ``" | "``; it is never split
    further, so it may itself contain pipes and quotes.
    """
    info, sep, gloss = line.partition(GLOSS_DELIMITER)
    if not sep:
        raise MalformedRecordError(
            f"Missing gloss delimiter {GLOSS_DELIMITER!r}", line=line
        )

    cursor = _Tokens(line, info.split())
    synset_offset = cursor.take("synset_offset")
    _to_offset(synset_offset, line)
    lex_filenum = cursor.take_int("lex_filenum")
    synset_type = cursor.take("ss_type")
    PartOfSpeech.parse(synset_type)

    word_counts: dict[str, int] = {}
    word_count = cursor.take_int("w_cnt", base=16)
    for _ in range(word_count):
        word = cursor.take("word")
        word_counts[word] = cursor.take_int("lex_id", base=16)

    pointers = []
    pointer_count = cursor.take_int("p_cnt")
    for _ in range(pointer_count):
        symbol = cursor.take("pointer_symbol")
        offset = _to_offset(cursor.take("synset_offset"), line)
        pos = cursor.take("pos")
        PartOfSpeech.parse(pos)
        source = cursor.take("source/target")
        if len(source) != 4 or not _is_hex(source):
            raise MalformedRecordError(
                f"Bad source/target field {source!r}", line=line
            )
        pointers.append(Pointer(symbol=symbol, offset=offset, pos=pos, source=source))

    frames = []
    if cursor.remaining() and synset_type == PartOfSpeech.VERB.value:
        frame_count = cursor.take_int("f_cnt")
        for _ in range(frame_count):
            if cursor.take("frame marker") != "+":
                raise MalformedRecordError("Frame must start with '+'", line=line)
            number = cursor.take_int("f_num")
            word_index = cursor.take_int("w_num", base=16)
            frames.append(Frame(number=number, word_index=word_index))

    if cursor.remaining():
        raise MalformedRecordError(
            f"{cursor.remaining()} unexpected trailing fields", line=line
        )

    return {
        "synset_offset": synset_offset,
        "lex_filenum": lex_filenum,
        "synset_type": synset_type,
        "word_counts": word_counts,
        "pointers": tuple(pointers),
        "frames": tuple(frames),
        "gloss": gloss.strip(),
    }


def _is_hex(token: str) -> bool:
    try:
        int(token, 16)
    except ValueError:
        return False
    return True


def _to_offset(token: str, line: str) -> int:
    if not token.isdigit():
        raise MalformedRecordError(f"Bad synset offset {token!r}", line=line)
    return int(token)
