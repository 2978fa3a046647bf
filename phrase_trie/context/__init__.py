# phrase_trie/context/__init__.py
# text handling shared by both indexes

from .normalizer import normalize_text, is_blank  # canonical lowercase/whitespace form
from .tokenizer import (
    WORD_SEPARATOR,
    split_words,
    encode_phrase,
    decode_path,
    leading_prefixes,
)  # phrase <-> trie path encoding

__all__ = [
    "normalize_text",
    "is_blank",
    "WORD_SEPARATOR",
    "split_words",
    "encode_phrase",
    "decode_path",
    "leading_prefixes",
]
