"""
phrase_trie.core

The dual prefix-tree engine.
Contains:
 - the node type and its Empty / PartialPrefix / CompleteTerminal marker
 - the word index (WordTrie) and the phrase index (PhraseTrie)
 - shared bounded enumeration and bottom-up pruning
 - the stats aggregator
 - TrieEngine, the facade callers actually use
"""

from .node import TrieNode, Empty, PartialPrefix, CompleteTerminal
from .trie import WordTrie
from .phrase_trie import PhraseTrie
from .stats import TrieStats, EngineStats, collect_stats
from .engine import TrieEngine, DEFAULT_LIMIT

__all__ = [
    "TrieNode",
    "Empty",
    "PartialPrefix",
    "CompleteTerminal",
    "WordTrie",
    "PhraseTrie",
    "TrieStats",
    "EngineStats",
    "collect_stats",
    "TrieEngine",
    "DEFAULT_LIMIT",
]
