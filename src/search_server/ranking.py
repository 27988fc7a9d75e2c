"""
TF-IDF ranking over the inverted index.

This module provides the pieces SearchServer.find_top_documents is built from:
1. Candidate scoring - accumulate tf * idf over plus words, honouring a predicate
2. Exclusion - drop every candidate containing a minus word
3. Ordering - relevance descending, near-equal relevance broken by rating
4. Truncation - keep the first MAX_RESULT_DOCUMENT_COUNT documents
"""

from __future__ import annotations

import logging
import math
from functools import cmp_to_key
from typing import Callable, Mapping

import numpy as np

from search_server.document import Document, DocumentData, DocumentStatus
from search_server.query import Query

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

# Maximum number of documents returned by a single query
MAX_RESULT_DOCUMENT_COUNT = 5

# Relevance values closer than this are considered equal
EPSILON = 1e-6


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
InvertedIndex = Mapping[str, Mapping[int, float]]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with exactly the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


# =============================================================================
# Scoring
# =============================================================================


def compute_inverse_document_freq(document_count: int, documents_with_word: int) -> float:
    """idf(t) = ln(N / df(t)); only called for words present in the index."""
    return math.log(document_count / documents_with_word)


def find_all_documents(
    query: Query,
    word_to_document_freqs: InvertedIndex,
    documents: Mapping[int, DocumentData],
    document_predicate: DocumentPredicate,
) -> list[Document]:
    """
    Score every document matching at least one plus word and none of the minus words.

    Args:
        query: Parsed query
        word_to_document_freqs: Inverted index (word -> document id -> tf)
        documents: Metadata for every indexed document
        document_predicate: Called as (id, status, rating); rejected documents are not scored

    Returns:
        Unsorted matches in ascending id order
    """
    document_count = len(documents)
    if document_count == 0:
        return []

    candidate_ids: list[np.ndarray] = []
    candidate_weights: list[np.ndarray] = []
    for word in sorted(query.plus_words):
        document_freqs = word_to_document_freqs.get(word)
        if not document_freqs:
            continue
        posting_size = len(document_freqs)
        idf = compute_inverse_document_freq(document_count, posting_size)
        posting_ids = np.fromiter(document_freqs.keys(), dtype=np.int64, count=posting_size)
        accepted = np.fromiter(
            (
                document_predicate(document_id, documents[document_id].status, documents[document_id].rating)
                for document_id in document_freqs
            ),
            dtype=bool,
            count=posting_size,
        )
        # Vectorized tf * idf for the whole posting list
        weights = np.fromiter(document_freqs.values(), dtype=np.float64, count=posting_size) * idf
        candidate_ids.append(posting_ids[accepted])
        candidate_weights.append(weights[accepted])

    if not candidate_ids:
        return []

    # Sum weights per document: unique ids come back sorted
    all_ids = np.concatenate(candidate_ids)
    unique_ids, inverse = np.unique(all_ids, return_inverse=True)
    relevance = np.bincount(inverse.ravel(), weights=np.concatenate(candidate_weights), minlength=len(unique_ids))

    excluded = [
        document_id
        for word in query.minus_words
        for document_id in word_to_document_freqs.get(word, ())
    ]
    keep = ~np.isin(unique_ids, np.array(excluded, dtype=np.int64))

    return [
        Document(document_id, relevance_value, documents[document_id].rating)
        for document_id, relevance_value in zip(unique_ids[keep].tolist(), relevance[keep].tolist())
    ]


# =============================================================================
# Ordering and Top-K
# =============================================================================


def compare_documents(lhs: Document, rhs: Document) -> int:
    """Negative if lhs ranks before rhs."""
    if abs(lhs.relevance - rhs.relevance) < EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def select_top_documents(
    matched_documents: list[Document],
    top_k: int = MAX_RESULT_DOCUMENT_COUNT,
) -> list[Document]:
    """Sorts by relevance (ties by rating) and keeps the first top_k documents."""
    ranked = sorted(matched_documents, key=cmp_to_key(compare_documents))
    logger.debug("Ranked %d matching documents, returning %d", len(ranked), min(len(ranked), top_k))
    return ranked[:top_k]


__all__ = [
    "MAX_RESULT_DOCUMENT_COUNT",
    "EPSILON",
    "DocumentPredicate",
    "status_predicate",
    "compute_inverse_document_freq",
    "find_all_documents",
    "compare_documents",
    "select_top_documents",
]
