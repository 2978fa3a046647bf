# phrase_trie/context/tokenizer.py
# word splitting + the encoded path phrases are stored under

from typing import List

# ASCII unit separator. str.isspace() is True for it, so normalize_text()
# strips it and it can never show up inside normalized text.
WORD_SEPARATOR = "\x1f"


def split_words(normalized: str) -> List[str]:
    """Split already-normalized text into words (no empty tokens)."""
    if not normalized:
        return []
    return normalized.split(" ")


def encode_phrase(normalized: str) -> str:
    """'hello big world' -> 'hello<US>big<US>world'"""
    return WORD_SEPARATOR.join(split_words(normalized))


def decode_path(path: str) -> str:
    return path.replace(WORD_SEPARATOR, " ")


def leading_prefixes(words: List[str]) -> List[str]:
    """
    Proper leading-word prefixes of a word sequence, shortest first.
    ['a', 'b', 'c'] -> ['a', 'a b']
    """
    return [" ".join(words[:i]) for i in range(1, len(words))]
