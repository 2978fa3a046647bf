# node.py
# The one cell type both indexes are built from.
# Terminal metadata lives in a small tagged variant (the "marker") so a node
# is always exactly one of: Empty, PartialPrefix, CompleteTerminal.

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Union


@dataclass(frozen=True)
class Empty:
    """No terminal metadata; only here because of its children."""


@dataclass
class PartialPrefix:
    """
    Ends one or more leading-word prefixes of stored phrases, but is not
    itself a stored entry. refs: prefix text -> number of live phrases using it.
    """

    refs: Counter = field(default_factory=Counter)


@dataclass
class CompleteTerminal:
    """
    A live entry.
    count: net insertions, always >= 1 while this marker is attached
    text: canonical phrase text (phrase index); None in the word index
    refs: prefix refs carried along while the entry is live
    """

    count: int = 1
    text: Optional[str] = None
    refs: Counter = field(default_factory=Counter)


Marker = Union[Empty, PartialPrefix, CompleteTerminal]

EMPTY = Empty()


class TrieNode:
    """
    A single node in a trie.
    children: char -> TrieNode (exclusively owned, tree-shaped)
    marker: Empty | PartialPrefix | CompleteTerminal
    """

    __slots__ = ("children", "marker")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.marker: Marker = EMPTY

    def __repr__(self) -> str:
        return f"TrieNode(children={sorted(self.children)!r}, marker={self.marker!r})"

    # read-only views ---------------------------------------------------------
    @property
    def is_terminal(self) -> bool:
        return isinstance(self.marker, CompleteTerminal)

    @property
    def count(self) -> int:
        return self.marker.count if isinstance(self.marker, CompleteTerminal) else 0

    @property
    def original(self) -> Optional[str]:
        return self.marker.text if isinstance(self.marker, CompleteTerminal) else None

    @property
    def prefix_refs(self) -> FrozenSet[str]:
        if isinstance(self.marker, Empty):
            return frozenset()
        return frozenset(self.marker.refs)

    @property
    def is_prunable(self) -> bool:
        """Childless, not a live entry, no prefix refs."""
        return not self.children and isinstance(self.marker, Empty)

    # navigation ---------------------------------------------------------------
    def child(self, ch: str) -> Optional[TrieNode]:
        return self.children.get(ch)

    def ensure_child(self, ch: str) -> TrieNode:
        nxt = self.children.get(ch)
        if nxt is None:
            nxt = self.children[ch] = TrieNode()
        return nxt

    # terminal transitions --------------------------------------------------
    def increment(self, text: Optional[str] = None) -> int:
        """
        Record one more insertion of the entry ending here.
        text is only stored on the first insertion; repeats never overwrite it.
        Returns the new count.
        """
        m = self.marker
        if isinstance(m, CompleteTerminal):
            m.count += 1
            return m.count
        refs = m.refs if isinstance(m, PartialPrefix) else Counter()
        self.marker = CompleteTerminal(count=1, text=text, refs=refs)
        return 1

    def decrement(self) -> int:
        """
        Undo one insertion. At zero the entry (and its text) is dropped and the
        node falls back to PartialPrefix if prefix refs remain, else Empty.
        """
        m = self.marker
        if not isinstance(m, CompleteTerminal):
            raise ValueError("decrement() on a node that is not a live entry")
        m.count -= 1
        if m.count > 0:
            return m.count
        self.marker = PartialPrefix(refs=m.refs) if m.refs else EMPTY
        return 0

    # prefix refs (phrase index) --------------------------------------------------
    def add_prefix_ref(self, prefix: str) -> None:
        m = self.marker
        if isinstance(m, Empty):
            self.marker = PartialPrefix(refs=Counter({prefix: 1}))
        else:
            m.refs[prefix] += 1

    def drop_prefix_ref(self, prefix: str) -> None:
        m = self.marker
        if isinstance(m, Empty) or prefix not in m.refs:
            return
        m.refs[prefix] -= 1
        if m.refs[prefix] <= 0:
            del m.refs[prefix]
        if isinstance(m, PartialPrefix) and not m.refs:
            self.marker = EMPTY

    def reset(self) -> None:
        """Drop every child and all metadata (used on the roots by clear())."""
        self.children.clear()
        self.marker = EMPTY
