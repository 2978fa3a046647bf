# engine.py
"""
TrieEngine - application facade over the two indexes.

Purpose:
 - Own one WordTrie and one PhraseTrie (no module-level state; every caller
   builds its own engine)
 - Simple public API for CLI/tests:
     insert_word, insert_phrase, search, search_phrase, starts_with,
     words_with_prefix, phrases_with_prefix, delete_word, delete_phrase,
     word_count, phrase_count, get_stats, clear, load_demo_phrases
 - Blank input on insert raises EmptyInputError; every "not found" is a plain
   False / 0 / [] result, never an exception
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from phrase_trie.errors import ValidationError

from .demo_phrases import FISHING_PHRASES
from .phrase_trie import PhraseTrie
from .stats import EngineStats
from .trie import WordTrie

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class TrieEngine:
    """Dual-trie engine: single words and whole phrases, indexed separately."""

    def __init__(self, default_limit: int = DEFAULT_LIMIT) -> None:
        if default_limit <= 0:
            raise ValidationError("default_limit must be a positive integer")
        self.default_limit = default_limit
        self.words = WordTrie()
        self.phrases = PhraseTrie()

    @classmethod
    def from_config(cls, cfg) -> "TrieEngine":
        """Build an engine from a utils.config_manager.Config."""
        return cls(default_limit=int(cfg.get("default_limit")))

    def _limit(self, limit: Optional[int]) -> int:
        return self.default_limit if limit is None else limit

    # Mutations ---------------------------------------------------------
    def insert_word(self, word: str) -> None:
        self.words.insert(word)

    def insert_phrase(self, phrase: str) -> None:
        self.phrases.insert(phrase)

    def delete_word(self, word: str) -> bool:
        return self.words.delete(word)

    def delete_phrase(self, phrase: str) -> bool:
        return self.phrases.delete(phrase)

    def clear(self) -> None:
        """Reset both tries to just their (empty) roots."""
        self.words.clear()
        self.phrases.clear()
        logger.info("engine cleared")

    def load_demo_phrases(self, phrases: Optional[Iterable[str]] = None) -> int:
        """Insert the bundled demo phrases (or the given ones). Returns how many."""
        items = list(FISHING_PHRASES if phrases is None else phrases)
        for p in items:
            self.phrases.insert(p)
        logger.info("loaded %d demo phrase(s)", len(items))
        return len(items)

    # Lookups -------------------------------------------------------------
    def search(self, word: str) -> bool:
        return self.words.search(word)

    def search_phrase(self, phrase: str) -> bool:
        return self.phrases.search(phrase)

    def starts_with(self, prefix: str) -> bool:
        return self.words.starts_with(prefix)

    def words_with_prefix(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        return self.words.words_with_prefix(prefix, self._limit(limit))

    def phrases_with_prefix(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        return self.phrases.phrases_with_prefix(prefix, self._limit(limit))

    def word_count(self, word: str) -> int:
        return self.words.count(word)

    def phrase_count(self, phrase: str) -> int:
        return self.phrases.count(phrase)

    # Stats ---------------------------------------------------------------
    def get_stats(self) -> EngineStats:
        return EngineStats.combine(self.words.stats(), self.phrases.stats())
