"""
phrase_trie - dual prefix-tree engine for word and phrase autocomplete.

    from phrase_trie import TrieEngine
    eng = TrieEngine()
    eng.insert_phrase("hello world")
    eng.phrases_with_prefix("hel")   # ['hello world']
"""

from .core import TrieEngine, EngineStats, TrieStats, WordTrie, PhraseTrie
from .context import normalize_text
from .errors import TrieError, ValidationError, EmptyInputError, ConfigError

__all__ = [
    "TrieEngine",
    "EngineStats",
    "TrieStats",
    "WordTrie",
    "PhraseTrie",
    "normalize_text",
    "TrieError",
    "ValidationError",
    "EmptyInputError",
    "ConfigError",
]

__version__ = "0.1.0"
