# phrase_trie/context/normalizer.py

from __future__ import annotations


def normalize_text(s: str | None) -> str:
    """
    Canonical form used for every lookup and mutation:
    lower-cased, trimmed, whitespace runs collapsed to one space.
    """
    if not s:
        return ""
    # str.split() with no args eats every unicode whitespace run
    return " ".join(s.lower().split())


def is_blank(s: str | None) -> bool:
    return not normalize_text(s)
