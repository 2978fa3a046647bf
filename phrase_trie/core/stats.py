# stats.py - node/entry/occurrence counters over a trie

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List

from .node import TrieNode


@dataclass(frozen=True)
class TrieStats:
    nodes: int = 0
    unique_entries: int = 0
    total_occurrences: int = 0

    def __add__(self, other: "TrieStats") -> "TrieStats":
        return TrieStats(
            self.nodes + other.nodes,
            self.unique_entries + other.unique_entries,
            self.total_occurrences + other.total_occurrences,
        )


@dataclass(frozen=True)
class EngineStats:
    """Word index and phrase index reported side by side."""

    total_nodes: int
    total_words: int
    total_phrases: int
    total_word_occurrences: int
    total_phrase_occurrences: int

    @classmethod
    def combine(cls, words: TrieStats, phrases: TrieStats) -> "EngineStats":
        return cls(
            total_nodes=words.nodes + phrases.nodes,
            total_words=words.unique_entries,
            total_phrases=phrases.unique_entries,
            total_word_occurrences=words.total_occurrences,
            total_phrase_occurrences=phrases.total_occurrences,
        )

    def to_dict(self) -> Dict[str, int]:
        """camelCase keys, matching what callers of getStats expect."""
        d = asdict(self)
        return {
            "totalNodes": d["total_nodes"],
            "totalWords": d["total_words"],
            "totalPhrases": d["total_phrases"],
            "totalWordOccurrences": d["total_word_occurrences"],
            "totalPhraseOccurrences": d["total_phrase_occurrences"],
        }


def collect_stats(root: TrieNode) -> TrieStats:
    """
    One pass over the subtree under root (root included):
    nodes visited, nodes holding a live entry, and the sum of their counts.
    """
    nodes = unique = total = 0
    stack: List[TrieNode] = [root]
    while stack:
        node = stack.pop()
        nodes += 1
        cnt = node.count
        if cnt > 0:
            unique += 1
            total += cnt
        stack.extend(node.children.values())
    return TrieStats(nodes, unique, total)
