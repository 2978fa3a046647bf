# tests/conftest.py
import io

import pytest
from rich.console import Console

from phrase_trie.core.engine import TrieEngine
from phrase_trie.core.phrase_trie import PhraseTrie
from phrase_trie.core.trie import WordTrie


@pytest.fixture
def engine():
    return TrieEngine()


@pytest.fixture
def words():
    return WordTrie()


@pytest.fixture
def phrases():
    return PhraseTrie()


@pytest.fixture
def console():
    # plain text, wide enough that tables never wrap
    return Console(file=io.StringIO(), width=160, no_color=True)
