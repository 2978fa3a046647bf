# tests/test_stats.py
from phrase_trie.core.node import TrieNode
from phrase_trie.core.stats import EngineStats, TrieStats, collect_stats


def test_empty_root_counts_itself():
    assert collect_stats(TrieNode()) == TrieStats(nodes=1, unique_entries=0, total_occurrences=0)


def test_counts_nodes_entries_and_occurrences(words):
    words.insert("ab")
    words.insert("ab")
    words.insert("abc")
    st = words.stats()
    assert st.nodes == 4
    assert st.unique_entries == 2
    assert st.total_occurrences == 3


def test_trie_stats_add():
    assert TrieStats(1, 2, 3) + TrieStats(10, 20, 30) == TrieStats(11, 22, 33)


def test_engine_stats_combine_and_dict():
    es = EngineStats.combine(TrieStats(4, 2, 3), TrieStats(7, 1, 5))
    assert es.total_nodes == 11
    assert es.to_dict() == {
        "totalNodes": 11,
        "totalWords": 2,
        "totalPhrases": 1,
        "totalWordOccurrences": 3,
        "totalPhraseOccurrences": 5,
    }
