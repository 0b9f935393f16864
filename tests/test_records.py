"""Tests for index and data record decoding."""

import pytest

from wordnet_reader import (
    MalformedRecordError,
    PartOfSpeech,
    UnknownCategoryError,
)
from wordnet_reader.models import Frame, Pointer
from wordnet_reader.records import parse_data_line, parse_index_line


class TestParseIndexLine:

    def test_decodes_all_fields(self):
        lemma = parse_index_line("fall v 2 2 vs ! 2 1 00000001 00000002", 5)
        assert lemma.word == "fall"
        assert lemma.pos is PartOfSpeech.VERB
        assert lemma.pointer_symbols == ("vs", "!")
        assert lemma.tagsense_count == 1
        assert lemma.synset_offsets == (1, 2)
        assert lemma.synset_count == 2
        assert lemma.id == 5

    def test_trailing_whitespace_is_ignored(self):
        lemma = parse_index_line("dog n 2 2 @ ~ 2 1 00001099 00001332  ", 16)
        assert lemma.synset_offsets == (1099, 1332)

    def test_no_pointer_symbols(self):
        lemma = parse_index_line("nice a 1 0 1 0 00000538", 7)
        assert lemma.pointer_symbols == ()
        assert lemma.synset_offsets == (538,)

    def test_str(self):
        lemma = parse_index_line("fall v 1 0 1 0 00000319", 3)
        assert str(lemma) == "fall, v"

    def test_too_few_offsets(self):
        with pytest.raises(MalformedRecordError):
            parse_index_line("fall v 3 1 @ 3 0 00000001 00000002", 1)

    def test_too_many_offsets(self):
        with pytest.raises(MalformedRecordError):
            parse_index_line("fall v 1 1 @ 1 0 00000001 00000002", 1)

    def test_pointer_count_exceeds_tokens(self):
        with pytest.raises(MalformedRecordError):
            parse_index_line("fall v 1 9 @", 1)

    def test_unpadded_example_line_is_rejected(self):
        """The sense-count fields are positional: without them the offsets
        are swallowed and the record is short."""
        with pytest.raises(MalformedRecordError):
            parse_index_line("fall v 2 2 vs ! 00000001 00000002", 5)

    def test_non_numeric_count(self):
        with pytest.raises(MalformedRecordError):
            parse_index_line("fall v two 0 1 0 00000001", 1)

    def test_zero_synsets(self):
        with pytest.raises(MalformedRecordError):
            parse_index_line("fall v 0 0 0 0", 1)

    def test_unknown_category(self):
        with pytest.raises(UnknownCategoryError):
            parse_index_line("fall x 1 0 1 0 00000001", 1)

    def test_malformed_error_carries_line(self):
        with pytest.raises(MalformedRecordError) as info:
            parse_index_line("fall v 1 0 1 0", 1)
        assert info.value.line == "fall v 1 0 1 0"


class TestParseDataLine:

    def test_decodes_all_fields(self):
        fields = parse_data_line(
            "00000042 03 n 02 dog 0 canine 1 01 @ 00000099 n 0000 "
            "| a domesticated carnivorous mammal"
        )
        assert fields["synset_offset"] == "00000042"
        assert fields["lex_filenum"] == 3
        assert fields["synset_type"] == "n"
        assert fields["word_counts"] == {"dog": 0, "canine": 1}
        assert list(fields["word_counts"]) == ["dog", "canine"]
        assert fields["pointers"] == (
            Pointer(symbol="@", offset=99, pos="n", source="0000"),
        )
        assert fields["frames"] == ()
        assert fields["gloss"] == "a domesticated carnivorous mammal"

    def test_gloss_keeps_pipes_and_quotes(self):
        fields = parse_data_line(
            '00000001 10 n 01 disjunction 0 000 '
            '| the operation a | b; "a | b is true if either is"'
        )
        assert fields["gloss"] == 'the operation a | b; "a | b is true if either is"'

    def test_hexadecimal_word_count(self):
        words = " ".join(f"w{i} 0" for i in range(10))
        fields = parse_data_line(f"00000001 03 n 0a {words} 000 | gloss")
        assert len(fields["word_counts"]) == 10

    def test_verb_frames(self):
        fields = parse_data_line(
            "00000319 38 v 01 fall 0 001 @ 00000132 v 0000 "
            "02 + 01 00 + 02 01 | descend"
        )
        assert fields["frames"] == (Frame(1, 0), Frame(2, 1))

    def test_frames_rejected_on_nouns(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000001 03 n 01 dog 0 000 01 + 01 00 | gloss")

    def test_missing_delimiter(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000042 03 n 01 dog 0 000 a mammal")

    def test_word_count_exceeds_tokens(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000042 03 n 03 dog 0 canine 1 | gloss")

    def test_pointer_count_exceeds_tokens(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000042 03 n 01 dog 0 002 @ 00000099 n 0000 | gloss")

    def test_trailing_garbage(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000042 03 n 01 dog 0 000 extra | gloss")

    def test_bad_source_target(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000042 03 n 01 dog 0 001 @ 00000099 n 00 | gloss")
        with pytest.raises(MalformedRecordError):
            parse_data_line("00000042 03 n 01 dog 0 001 @ 00000099 n 01zz | gloss")

    def test_unknown_pointer_category(self):
        with pytest.raises(UnknownCategoryError):
            parse_data_line("00000042 03 n 01 dog 0 001 @ 00000099 q 0000 | gloss")

    def test_unknown_synset_type(self):
        with pytest.raises(UnknownCategoryError):
            parse_data_line("00000042 03 q 01 dog 0 000 | gloss")


class TestPointer:

    def test_whole_synset_pointer(self):
        pointer = Pointer(symbol="@", offset=99, pos="n", source="0000")
        assert pointer.source_index == 0
        assert pointer.target_index == 0
        assert not pointer.is_lexical
        assert pointer.name == "hypernym"

    def test_lexical_pointer(self):
        pointer = Pointer(symbol="!", offset=384, pos="a", source="0102")
        assert pointer.source_index == 1
        assert pointer.target_index == 2
        assert pointer.is_lexical
        assert pointer.name == "antonym"

    def test_address_resolves_satellite(self):
        pointer = Pointer(symbol="&", offset=290, pos="s", source="0000")
        assert pointer.address.offset == 290
        assert pointer.address.pos is PartOfSpeech.ADJECTIVE

    def test_unknown_symbol_has_no_name(self):
        assert Pointer(symbol="vs", offset=1, pos="v", source="0000").name is None
