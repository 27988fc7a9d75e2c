"""
Document-level data types shared by the index, the ranking engine and callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence


class DocumentStatus(Enum):
    ACTIVE = "active"
    IRRELEVANT = "irrelevant"
    EXCLUDED = "excluded"
    REMOVED = "removed"


@dataclass(frozen=True)
class Document:
    """
    A ranked search result.

    Attributes:
        id: Document id as passed to ``SearchServer.add_document``.
        relevance: Accumulated TF-IDF score over the query's plus words.
        rating: Average rating of the document.
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


@dataclass(frozen=True)
class DocumentData:
    """Per-document metadata kept by the index."""

    rating: int
    status: DocumentStatus


class MatchResult(NamedTuple):
    """Plus words of a query found in one document, and that document's status."""

    words: list[str]
    status: DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Arithmetic mean of the ratings truncated toward zero; 0 for no ratings."""
    if not ratings:
        return 0
    rating_sum = sum(ratings)
    quotient = abs(rating_sum) // len(ratings)
    return quotient if rating_sum >= 0 else -quotient


__all__ = [
    "DocumentStatus",
    "Document",
    "DocumentData",
    "MatchResult",
    "compute_average_rating",
]
