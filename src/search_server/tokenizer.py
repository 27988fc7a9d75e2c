from __future__ import annotations

from typing import Iterable

from search_server.errors import MalformedInputError


def is_valid_word(word: str) -> bool:
    """A word is valid if it contains no control characters (codes 0-31)."""
    return not any(ord(c) < 32 for c in word)


def split_into_words(text: str) -> list[str]:
    """
    Splits text on single spaces, dropping the empty tokens produced by runs of spaces.

    Raises:
        MalformedInputError: If the text contains a control character.
    """
    words = [word for word in text.split(" ") if word]
    for word in words:
        if not is_valid_word(word):
            raise MalformedInputError(f"Word {word!r} contains special symbols")
    return words


def make_unique_non_empty_strings(strings: Iterable[str]) -> frozenset[str]:
    """
    Deduplicates a pre-split collection of words and drops empty strings.

    Raises:
        MalformedInputError: If any word contains a control character.
    """
    non_empty_strings = set()
    for string in strings:
        if not string:
            continue
        if not is_valid_word(string):
            raise MalformedInputError(f"Stop word {string!r} contains special symbols")
        non_empty_strings.add(string)
    return frozenset(non_empty_strings)


def normalize_stop_words(stop_words: str | Iterable[str]) -> frozenset[str]:
    """Accepts either a space-separated string or an iterable of words."""
    if isinstance(stop_words, str):
        return make_unique_non_empty_strings(split_into_words(stop_words))
    return make_unique_non_empty_strings(stop_words)


__all__ = [
    "is_valid_word",
    "split_into_words",
    "make_unique_non_empty_strings",
    "normalize_stop_words",
]
