"""Pointer symbol constants, per-category tables and relation names."""

from __future__ import annotations

from wordnet_reader.models import PartOfSpeech

ANTONYM = "!"
HYPERNYM = "@"
INSTANCE_HYPERNYM = "@i"
HYPONYM = "~"
INSTANCE_HYPONYM = "~i"
MEMBER_HOLONYM = "#m"
SUBSTANCE_HOLONYM = "#s"
PART_HOLONYM = "#p"
MEMBER_MERONYM = "%m"
SUBSTANCE_MERONYM = "%s"
PART_MERONYM = "%p"
ATTRIBUTE = "="
DERIVATIONALLY_RELATED_FORM = "+"
DOMAIN_OF_SYNSET_TOPIC = ";c"
MEMBER_OF_DOMAIN_TOPIC = "-c"
DOMAIN_OF_SYNSET_REGION = ";r"
MEMBER_OF_DOMAIN_REGION = "-r"
DOMAIN_OF_SYNSET_USAGE = ";u"
MEMBER_OF_DOMAIN_USAGE = "-u"
ENTAILMENT = "*"
CAUSE = ">"
ALSO_SEE = "^"
VERB_GROUP = "$"
SIMILAR_TO = "&"
PARTICIPLE_OF_VERB = "<"
PERTAINYM = "\\"

_DOMAIN_POINTERS = (
    DOMAIN_OF_SYNSET_TOPIC, DOMAIN_OF_SYNSET_REGION, DOMAIN_OF_SYNSET_USAGE,
)

# Valid pointer symbols per part of speech, as listed in wninput(5).
POINTERS: dict[PartOfSpeech, frozenset[str]] = {
    PartOfSpeech.NOUN: frozenset({
        ANTONYM, HYPERNYM, INSTANCE_HYPERNYM, HYPONYM, INSTANCE_HYPONYM,
        MEMBER_HOLONYM, SUBSTANCE_HOLONYM, PART_HOLONYM,
        MEMBER_MERONYM, SUBSTANCE_MERONYM, PART_MERONYM,
        ATTRIBUTE, DERIVATIONALLY_RELATED_FORM,
        MEMBER_OF_DOMAIN_TOPIC, MEMBER_OF_DOMAIN_REGION,
        MEMBER_OF_DOMAIN_USAGE, *_DOMAIN_POINTERS,
    }),
    PartOfSpeech.VERB: frozenset({
        ANTONYM, HYPERNYM, HYPONYM, ENTAILMENT, CAUSE, ALSO_SEE,
        VERB_GROUP, DERIVATIONALLY_RELATED_FORM, *_DOMAIN_POINTERS,
    }),
    PartOfSpeech.ADJECTIVE: frozenset({
        ANTONYM, SIMILAR_TO, PARTICIPLE_OF_VERB, PERTAINYM, ATTRIBUTE,
        ALSO_SEE, *_DOMAIN_POINTERS,
    }),
    PartOfSpeech.ADVERB: frozenset({
        ANTONYM, PERTAINYM, *_DOMAIN_POINTERS,
    }),
}

# Pointer symbol -> WN-LMF relation name (the names used by the wn package).
RELATION_NAMES: dict[str, str] = {
    ANTONYM: "antonym",
    HYPERNYM: "hypernym",
    INSTANCE_HYPERNYM: "instance_hypernym",
    HYPONYM: "hyponym",
    INSTANCE_HYPONYM: "instance_hyponym",
    MEMBER_HOLONYM: "holo_member",
    SUBSTANCE_HOLONYM: "holo_substance",
    PART_HOLONYM: "holo_part",
    MEMBER_MERONYM: "mero_member",
    SUBSTANCE_MERONYM: "mero_substance",
    PART_MERONYM: "mero_part",
    ATTRIBUTE: "attribute",
    DERIVATIONALLY_RELATED_FORM: "derivation",
    DOMAIN_OF_SYNSET_TOPIC: "domain_topic",
    MEMBER_OF_DOMAIN_TOPIC: "has_domain_topic",
    DOMAIN_OF_SYNSET_REGION: "domain_region",
    MEMBER_OF_DOMAIN_REGION: "has_domain_region",
    DOMAIN_OF_SYNSET_USAGE: "exemplifies",
    MEMBER_OF_DOMAIN_USAGE: "is_exemplified_by",
    ENTAILMENT: "entails",
    CAUSE: "causes",
    ALSO_SEE: "also",
    VERB_GROUP: "similar",
    SIMILAR_TO: "similar",
    PARTICIPLE_OF_VERB: "participle",
    PERTAINYM: "pertainym",
}

# Relation names WN-LMF accepts on <SynsetRelation> and <SenseRelation>.
SYNSET_RELATIONS: frozenset[str] = frozenset({
    "hypernym", "instance_hypernym", "hyponym", "instance_hyponym",
    "holo_member", "holo_substance", "holo_part",
    "mero_member", "mero_substance", "mero_part",
    "attribute", "domain_topic", "has_domain_topic",
    "domain_region", "has_domain_region", "exemplifies",
    "is_exemplified_by", "entails", "causes", "also", "similar",
})
SENSE_RELATIONS: frozenset[str] = frozenset({
    "antonym", "also", "derivation", "domain_topic", "has_domain_topic",
    "domain_region", "has_domain_region", "exemplifies",
    "is_exemplified_by", "participle", "pertainym", "similar",
})


def relation_name(symbol: str) -> str | None:
    """Get the relation name of a pointer symbol, or None if unknown."""
    return RELATION_NAMES.get(symbol)


def is_valid_pointer(symbol: str, pos: PartOfSpeech | str) -> bool:
    """Check if a pointer symbol may appear on synsets of a part of speech."""
    return symbol in POINTERS[PartOfSpeech.parse(pos)]
