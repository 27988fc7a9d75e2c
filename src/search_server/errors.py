"""
Error types raised by the search server.

Every error derives from SearchServerError (itself a ValueError) and carries an
ErrorKind tag, so callers can branch either on the class or on ``error.kind``:

    try:
        server.add_document(doc_id, text)
    except SearchServerError as error:
        if error.kind is ErrorKind.DUPLICATE_ID:
            ...
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    MALFORMED_INPUT = "malformed_input"
    INVALID_ID = "invalid_id"
    DUPLICATE_ID = "duplicate_id"
    DOUBLE_MINUS = "double_minus"
    EMPTY_MINUS_WORD = "empty_minus_word"
    UNKNOWN_DOCUMENT_ID = "unknown_document_id"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class SearchServerError(ValueError):
    """Base class for all recoverable search server errors."""

    kind: ErrorKind

    def __str__(self) -> str:
        return self.args[0] if self.args else self.kind.value


class MalformedInputError(SearchServerError):
    """Text contains a control character (code below the space character)."""

    kind = ErrorKind.MALFORMED_INPUT


class InvalidIdError(SearchServerError):
    """Document id is negative."""

    kind = ErrorKind.INVALID_ID


class DuplicateIdError(SearchServerError):
    """Document id is already indexed."""

    kind = ErrorKind.DUPLICATE_ID


class DoubleMinusError(SearchServerError):
    """Query word starts with more than one minus."""

    kind = ErrorKind.DOUBLE_MINUS


class EmptyMinusWordError(SearchServerError):
    """Query contains a lone minus with no word after it."""

    kind = ErrorKind.EMPTY_MINUS_WORD


class UnknownDocumentIdError(SearchServerError, KeyError):
    """Lookup of a document id that was never added."""

    kind = ErrorKind.UNKNOWN_DOCUMENT_ID


class IndexOutOfRangeError(SearchServerError, IndexError):
    """Position lookup past the end of the document id registry."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE


__all__ = [
    "ErrorKind",
    "SearchServerError",
    "MalformedInputError",
    "InvalidIdError",
    "DuplicateIdError",
    "DoubleMinusError",
    "EmptyMinusWordError",
    "UnknownDocumentIdError",
    "IndexOutOfRangeError",
]
