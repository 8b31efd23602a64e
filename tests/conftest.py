"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanatype.nlp.base import UnrecognizedPolicy
from kanatype.nlp.japanese import JapaneseChunker, JapaneseRomanizationTable

@pytest.fixture
def table():
    """Japanese romanization table."""
    return JapaneseRomanizationTable()

@pytest.fixture
def chunker(table):
    """Chunker that skips input it cannot chunk."""
    return JapaneseChunker(table, policy=UnrecognizedPolicy.skip)

@pytest.fixture
def strict_chunker(table):
    """Chunker that raises on input it cannot chunk."""
    return JapaneseChunker(table, policy=UnrecognizedPolicy.raise_)

@pytest.fixture
def sample_texts():
    """Furigana-annotated practice strings."""
    return [
        "京(とかんだと)",
        "おちゃをのむ",
        "11(じゅういち)月(がつ)1日(ついたち)",
        "山(やま)ノ内(うち)町(まち)",
        "ノ内(うち)",
    ]
