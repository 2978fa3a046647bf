# trie.py
# Word index: a character trie over single normalized words.
# Keeps an occurrence count per word so repeated inserts and partial deletes
# behave like a multiset. Dead branches are pruned on delete.

from __future__ import annotations

import logging
from itertools import islice
from typing import List

from phrase_trie.context.normalizer import normalize_text
from phrase_trie.errors import EmptyInputError

from .node import TrieNode
from .stats import TrieStats, collect_stats
from .traversal import find_node, iter_terminals, prune_path, walk_path

logger = logging.getLogger(__name__)


class WordTrie:
    """
    Trie of words for exact lookup and prefix autocomplete. Used by TrieEngine for:
     - insert / search / delete with occurrence counting
     - starts_with checks (any continuation counts)
     - bounded prefix completion in stable code-point order
    """

    def __init__(self) -> None:
        self.root = TrieNode()

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> int:
        """
        Insert a word (normalized first). Raises EmptyInputError if nothing
        is left after normalization. Returns the word's new count.
        """
        key = normalize_text(word)
        if not key:
            raise EmptyInputError("word")

        node = self.root
        for ch in key:
            node = node.ensure_child(ch)
        cnt = node.increment()
        logger.debug("word insert %r -> count=%d", key, cnt)
        return cnt

    # lookup ---------------------------------------------------------
    def search(self, word: str) -> bool:
        """True only for a word with a live count. Blank input is just False."""
        return self.count(word) > 0

    def count(self, word: str) -> int:
        key = normalize_text(word)
        if not key:
            return 0
        node = find_node(self.root, key)
        return node.count if node is not None else 0

    def starts_with(self, prefix: str) -> bool:
        """True if any stored word continues this prefix (terminal or not)."""
        key = normalize_text(prefix)
        if not key:
            return False
        return find_node(self.root, key) is not None

    def words_with_prefix(self, prefix: str, limit: int = 10) -> List[str]:
        """
        Up to `limit` live words starting with `prefix`, in pre-order
        (shorter words before their extensions, siblings by code point).
        """
        key = normalize_text(prefix)
        if not key or limit <= 0:
            return []

        node = find_node(self.root, key)
        if node is None:
            return []
        return [path for path, _ in islice(iter_terminals(node, key), limit)]

    # deletion -------------------------------------------------------
    def delete(self, word: str) -> bool:
        """
        Remove one occurrence. Once the count reaches zero the word stops
        matching and now-dead nodes along its path are pruned.
        Returns False if the word was not stored.
        """
        key = normalize_text(word)
        if not key:
            return False
        steps = walk_path(self.root, key)
        if not steps or not steps[-1][2].is_terminal:
            return False

        left = steps[-1][2].decrement()
        if left == 0:
            removed = prune_path(steps)
            logger.debug("word delete %r -> gone, pruned %d node(s)", key, removed)
        else:
            logger.debug("word delete %r -> count=%d", key, left)
        return True

    # housekeeping ---------------------------------------------------
    def stats(self) -> TrieStats:
        return collect_stats(self.root)

    def clear(self) -> None:
        self.root.reset()

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        """Number of distinct live words (O(N) walk)."""
        return self.stats().unique_entries
