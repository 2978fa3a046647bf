# traversal.py
# Shared walking primitives for both indexes:
#  - find_node / walk_path: follow a key character by character
#  - iter_terminals: lazy bounded pre-order enumeration
#  - prune_path: bottom-up removal of dead nodes after a delete
# Everything uses an explicit stack (no recursion): encoded phrase paths can
# get long.

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .node import TrieNode

# (parent, char, child) for one edge followed from the root
Step = Tuple[TrieNode, str, TrieNode]


def find_node(root: TrieNode, key: str) -> Optional[TrieNode]:
    """Node reached by following key from root, or None if any char is missing."""
    node = root
    for ch in key:
        node = node.children.get(ch)
        if node is None:
            return None
    return node


def walk_path(root: TrieNode, key: str) -> Optional[List[Step]]:
    """
    Same walk as find_node, but keep every edge taken so the caller can
    prune on the way back up. None if the key is not present.
    """
    steps: List[Step] = []
    node = root
    for ch in key:
        nxt = node.children.get(ch)
        if nxt is None:
            return None
        steps.append((node, ch, nxt))
        node = nxt
    return steps


def iter_terminals(start: TrieNode, path: str = "") -> Iterator[Tuple[str, TrieNode]]:
    """
    Pre-order DFS from start, yielding (path, node) for every live entry.
    Children are visited in ascending code-point order, so output order is
    stable across runs. The generator is lazy: wrap it in islice(..., limit)
    and nothing past the limit is ever visited.
    """
    stack: List[Tuple[str, TrieNode]] = [(path, start)]
    while stack:
        cur_path, node = stack.pop()
        if node.is_terminal:
            yield cur_path, node
        # reversed so the smallest char is popped first
        for ch in sorted(node.children, reverse=True):
            stack.append((cur_path + ch, node.children[ch]))


def prune_path(steps: List[Step]) -> int:
    """
    Walk steps leaf -> root, detaching each child that is childless, not a
    live entry and has no prefix refs. Stops at the first node that must stay.
    Returns how many nodes were removed.
    """
    removed = 0
    for parent, ch, child in reversed(steps):
        if not child.is_prunable:
            break
        del parent.children[ch]
        removed += 1
    return removed
