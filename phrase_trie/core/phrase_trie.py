# phrase_trie.py
# Phrase index: whole multi-word phrases stored as one character path, with
# words joined by WORD_SEPARATOR instead of a space. Every proper leading-word
# prefix of a phrase ("a", "a b" for "a b c") is recorded as a prefix ref on
# the node where it ends, so autocomplete can surface the phrase early and
# pruning knows which nodes are still in use.
#
# Prefix refs are NOT entries: search() only matches complete inserted phrases
# and stats() never counts a bare prefix.

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterator, List, Set, Tuple

from phrase_trie.context.normalizer import normalize_text
from phrase_trie.context.tokenizer import (
    WORD_SEPARATOR,
    encode_phrase,
    leading_prefixes,
    split_words,
)
from phrase_trie.errors import EmptyInputError

from .node import TrieNode
from .stats import TrieStats, collect_stats
from .traversal import find_node, iter_terminals, prune_path, walk_path

logger = logging.getLogger(__name__)


def _prefix_depths(words: List[str]) -> List[Tuple[str, int]]:
    """(prefix text, length of its encoded path) for each proper prefix."""
    return [
        (p, len(WORD_SEPARATOR.join(words[: i + 1])))
        for i, p in enumerate(leading_prefixes(words))
    ]


class PhraseTrie:
    """Trie over encoded phrase paths, plus the prefix chain of every phrase."""

    def __init__(self) -> None:
        self.root = TrieNode()

    # insertion -----------------------------------------------------
    def insert(self, phrase: str) -> int:
        """
        Insert a phrase as a complete entry and record its prefix chain.
        The canonical text is stored once, on first insertion. Returns the
        phrase's new count.
        """
        key = normalize_text(phrase)
        if not key:
            raise EmptyInputError("phrase")

        words = split_words(key)
        path = encode_phrase(key)

        # nodes[d] is the node reached after d characters of the path
        nodes = [self.root]
        node = self.root
        for ch in path:
            node = node.ensure_child(ch)
            nodes.append(node)

        cnt = node.increment(text=key)
        if cnt == 1:
            # first live occurrence: hook the phrase into its prefix chain
            for prefix, depth in _prefix_depths(words):
                nodes[depth].add_prefix_ref(prefix)
        logger.debug("phrase insert %r -> count=%d", key, cnt)
        return cnt

    # lookup ---------------------------------------------------------
    def search(self, phrase: str) -> bool:
        """Exact match on a complete, live phrase. Bare prefixes don't count."""
        return self.count(phrase) > 0

    def count(self, phrase: str) -> int:
        key = normalize_text(phrase)
        if not key:
            return 0
        node = find_node(self.root, encode_phrase(key))
        return node.count if node is not None else 0

    def prefix_refs(self, prefix: str) -> frozenset:
        """Prefix strings currently ending at the node for `prefix` (diagnostics)."""
        key = normalize_text(prefix)
        node = find_node(self.root, encode_phrase(key)) if key else None
        return node.prefix_refs if node is not None else frozenset()

    def _iter_phrases(self, start: TrieNode, path: str) -> Iterator[str]:
        seen: Set[str] = set()
        for _, node in iter_terminals(start, path):
            text = node.original
            if text is None or text in seen:
                continue
            seen.add(text)
            yield text

    def phrases_with_prefix(self, prefix: str, limit: int = 10) -> List[str]:
        """
        Up to `limit` distinct stored phrases that begin with `prefix`.
        The prefix itself comes first when it is a stored phrase; the rest
        follow in pre-order, crossing word boundaries.
        """
        key = normalize_text(prefix)
        if not key or limit <= 0:
            return []

        path = encode_phrase(key)
        node = find_node(self.root, path)
        if node is None:
            return []
        return list(islice(self._iter_phrases(node, path), limit))

    # deletion -------------------------------------------------------
    def delete(self, phrase: str) -> bool:
        """
        Remove one occurrence of a complete phrase. When the last one goes,
        its text is dropped, its prefix refs are released and the path is
        pruned bottom-up until a node that is still in use.
        """
        key = normalize_text(phrase)
        if not key:
            return False
        steps = walk_path(self.root, encode_phrase(key))
        if not steps or not steps[-1][2].is_terminal:
            return False

        left = steps[-1][2].decrement()
        if left > 0:
            logger.debug("phrase delete %r -> count=%d", key, left)
            return True

        for prefix, depth in _prefix_depths(split_words(key)):
            steps[depth - 1][2].drop_prefix_ref(prefix)
        removed = prune_path(steps)
        logger.debug("phrase delete %r -> gone, pruned %d node(s)", key, removed)
        return True

    # housekeeping ---------------------------------------------------
    def stats(self) -> TrieStats:
        return collect_stats(self.root)

    def clear(self) -> None:
        self.root.reset()

    def __contains__(self, phrase: str) -> bool:
        return self.search(phrase)
