"""
Query parsing: raw query text -> plus/minus word sets.

Syntax:
    cat fluffy        plus words; a document must contain at least one to match
    -collar           minus word; any document containing it is dropped
    --collar          rejected (DoubleMinusError)
    -                 rejected (EmptyMinusWordError)

Stop-words are removed after the minus is stripped, so ``-and`` with ``and``
as a stop-word is silently ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet

from search_server.errors import DoubleMinusError, EmptyMinusWordError
from search_server.tokenizer import split_into_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class Query:
    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


def parse_query_word(text: str, stop_words: AbstractSet[str]) -> QueryWord:
    is_minus = False
    if text.startswith("-"):
        is_minus = True
        text = text[1:]
        if not text:
            raise EmptyMinusWordError("No word after minus")
    if text.startswith("-"):
        raise DoubleMinusError(f"Word {text!r} contains an extra minus")
    return QueryWord(text, is_minus, text in stop_words)


def parse_query(text: str, stop_words: AbstractSet[str]) -> Query:
    """
    Parses a raw query.

    A word may end up in both sets when it is typed both plainly and with a
    minus; the ranking engine lets the minus word win.

    Raises:
        MalformedInputError: If the query contains a control character.
        DoubleMinusError: If a word starts with ``--``.
        EmptyMinusWordError: If a lone ``-`` appears.
    """
    query = Query()
    for word in split_into_words(text):
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            query.minus_words.add(query_word.data)
        else:
            query.plus_words.add(query_word.data)
    logger.debug(
        "Parsed query %r: plus=%s minus=%s",
        text,
        sorted(query.plus_words),
        sorted(query.minus_words),
    )
    return query


__all__ = ["QueryWord", "Query", "parse_query_word", "parse_query"]
