"""Shared test fixtures for wordnet-reader."""

from pathlib import Path

import pytest

from wordnet_reader import Wordnet

FIXTURES = Path(__file__).parent / "fixtures"
DATA_DIR = FIXTURES / "wordnet"


@pytest.fixture
def data_dir():
    """Root of the small WordNet installation under tests/fixtures."""
    return DATA_DIR


@pytest.fixture
def wordnet():
    """A fresh Wordnet (cold caches) over the fixture dataset."""
    return Wordnet(DATA_DIR)


@pytest.fixture
def dog(wordnet):
    """The first noun sense of 'dog'."""
    return wordnet.get(1099, "n")
