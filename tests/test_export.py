"""Tests for WN-LMF export."""

import logging

import wn.lmf
import pytest

from wordnet_reader import ExportError, PartOfSpeech, Wordnet
from wordnet_reader.exporter import build_resource


def export(wordnet, tmp_path, **options):
    out_path = tmp_path / "export.xml"
    wordnet.export_lmf(out_path, **options)
    return wn.lmf.load(str(out_path))["lexicons"][0]


def senses_by_id(lexicon):
    return {
        sense["id"]: sense
        for entry in lexicon["entries"]
        for sense in entry["senses"]
    }


class TestExportLMF:

    def test_lexicon_metadata(self, wordnet, tmp_path):
        lexicon = export(wordnet, tmp_path, lexicon_id="test-wn", version="3.0")
        assert lexicon["id"] == "test-wn"
        assert lexicon["version"] == "3.0"
        assert lexicon["language"] == "en"

    def test_entries(self, wordnet, tmp_path):
        lexicon = export(wordnet, tmp_path)
        entries = {entry["id"]: entry for entry in lexicon["entries"]}
        dog = entries["wnr-dog-n"]
        assert dog["lemma"]["writtenForm"] == "dog"
        assert [sense["synset"] for sense in dog["senses"]] == [
            "wnr-00001099-n", "wnr-00001332-n",
        ]
        assert entries["wnr-domestic_animal-n"]["lemma"]["writtenForm"] == "domestic animal"
        assert "wnr-fall-v" in entries

    def test_synsets(self, wordnet, tmp_path):
        lexicon = export(wordnet, tmp_path)
        synsets = {synset["id"]: synset for synset in lexicon["synsets"]}
        dog = synsets["wnr-00001099-n"]
        assert dog["definitions"][0]["text"].startswith("a member of the genus Canis")
        assert [ex["text"] for ex in dog["examples"]] == ["the dog barked all night"]
        assert dog["lexfile"] == "noun.animal"
        assert [(rel["relType"], rel["target"]) for rel in dog["relations"]] == [
            ("hypernym", "wnr-00000937-n"),
            ("hypernym", "wnr-00000812-n"),
            ("hyponym", "wnr-00001422-n"),
        ]
        assert dog["members"] == [
            "wnr-dog-00001099-n",
            "wnr-domestic_dog-00001099-n",
            "wnr-canis_familiaris-00001099-n",
        ]

    def test_satellite_keeps_its_type(self, wordnet, tmp_path):
        lexicon = export(wordnet, tmp_path)
        synsets = {synset["id"]: synset for synset in lexicon["synsets"]}
        assert synsets["wnr-00000290-s"]["partOfSpeech"] == "s"
        big = synsets["wnr-00000132-a"]
        assert ("similar", "wnr-00000290-s") in [
            (rel["relType"], rel["target"]) for rel in big["relations"]
        ]

    def test_lexical_antonyms_become_sense_relations(self, wordnet, tmp_path):
        lexicon = export(wordnet, tmp_path)
        senses = senses_by_id(lexicon)
        man = senses["wnr-man-00001771-n"]
        assert [(rel["relType"], rel["target"]) for rel in man["relations"]] == [
            ("antonym", "wnr-woman-00001950-n"),
        ]
        synsets = {synset["id"]: synset for synset in lexicon["synsets"]}
        assert all(
            rel["relType"] != "antonym"
            for rel in synsets["wnr-00001771-n"].get("relations", [])
        )

    def test_single_category(self, wordnet, tmp_path):
        lexicon = export(wordnet, tmp_path, pos=PartOfSpeech.ADVERB)
        assert sorted(entry["id"] for entry in lexicon["entries"]) == [
            "wnr-quickly-r", "wnr-speedily-r", "wnr-well-r",
        ]
        assert sorted(synset["id"] for synset in lexicon["synsets"]) == [
            "wnr-00000132-r", "wnr-00000219-r",
        ]

    def test_unknown_pointers_are_dropped_with_warning(self, tmp_path, caplog):
        dict_dir = tmp_path / "wn" / "dict"
        dict_dir.mkdir(parents=True)
        (dict_dir / "index.noun").write_text("thing n 1 1 ? 1 0 00000000\n")
        (dict_dir / "data.noun").write_text(
            "00000000 03 n 01 thing 0 001 ? 00000000 n 0000 | a thing\n"
        )
        with caplog.at_level(logging.WARNING, logger="wordnet_reader.exporter"):
            lexicon = export(Wordnet(tmp_path / "wn"), tmp_path, pos="n")
        assert lexicon["synsets"][0].get("relations", []) == []
        assert "Dropped 1 '?' pointers" in caplog.text

    def test_pointers_invalid_for_category_are_reported(self, tmp_path, caplog):
        dict_dir = tmp_path / "wn" / "dict"
        dict_dir.mkdir(parents=True)
        (dict_dir / "index.noun").write_text("thing n 1 1 & 1 0 00000000\n")
        (dict_dir / "data.noun").write_text(
            "00000000 03 n 01 thing 0 001 & 00000000 n 0000 | a thing\n"
        )
        with caplog.at_level(logging.WARNING, logger="wordnet_reader.exporter"):
            lexicon = export(Wordnet(tmp_path / "wn"), tmp_path, pos="n")
        relations = lexicon["synsets"][0].get("relations", [])
        assert [rel["relType"] for rel in relations] == ["similar"]
        assert "Found 1 '&' pointers not valid on noun synsets" in caplog.text

    def test_adjective_markers_do_not_break_members(self, tmp_path):
        dict_dir = tmp_path / "wn" / "dict"
        dict_dir.mkdir(parents=True)
        (dict_dir / "index.adj").write_text(
            "able a 1 1 ! 1 0 00000000\nunable a 1 1 ! 1 0 00000053\n"
        )
        (dict_dir / "data.adj").write_text(
            "00000000 00 a 01 able(a) 0 001 ! 00000053 a 0101 | x\n"
            "00000053 00 a 01 unable(p) 0 001 ! 00000000 a 0101 | y\n"
        )
        lexicon = export(Wordnet(tmp_path / "wn"), tmp_path, pos="a")
        synsets = {synset["id"]: synset for synset in lexicon["synsets"]}
        assert synsets["wnr-00000000-a"]["members"] == ["wnr-able-00000000-a"]
        assert synsets["wnr-00000053-a"]["members"] == ["wnr-unable-00000053-a"]
        able = senses_by_id(lexicon)["wnr-able-00000000-a"]
        assert [(rel["relType"], rel["target"]) for rel in able["relations"]] == [
            ("antonym", "wnr-unable-00000053-a"),
        ]

    def test_unwritable_destination(self, wordnet, tmp_path):
        with pytest.raises(ExportError):
            wordnet.export_lmf(tmp_path / "missing" / "export.xml")


class TestBuildResource:

    def test_every_indexed_sense_is_exported(self, wordnet):
        resource = build_resource(
            wordnet, lexicon_id="wnr", label="WordNet", language="en",
            email="", license="", version="1.0",
        )
        lexicon = resource["lexicons"][0]
        expected = sum(
            len(lemma.synset_offsets)
            for pos in PartOfSpeech
            for lemma in wordnet.index.lemmas(pos)
        )
        assert len(senses_by_id(lexicon)) == expected
        assert resource["lmf_version"] == "1.4"

    def test_synset_ids_are_unique(self, wordnet):
        resource = build_resource(
            wordnet, lexicon_id="wnr", label="WordNet", language="en",
            email="", license="", version="1.0",
        )
        ids = [synset["id"] for synset in resource["lexicons"][0]["synsets"]]
        assert len(ids) == len(set(ids))
