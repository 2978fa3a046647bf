# errors.py - exception types shared by the engine, config and CLI

from __future__ import annotations


class TrieError(Exception):
    """Base class for everything raised by phrase_trie."""


class ValidationError(TrieError, ValueError):
    """Caller handed us input we refuse to index."""


class EmptyInputError(ValidationError):
    """Word or phrase is empty (or only whitespace) after normalization."""

    def __init__(self, kind: str = "text") -> None:
        self.kind = kind
        super().__init__(f"{kind} must not be empty")


class ConfigError(TrieError):
    """Unknown config option or a value that can't be coerced."""
