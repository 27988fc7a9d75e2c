"""
In-memory full-text search server with TF-IDF ranking.

Usage:
    from search_server.search_server import SearchServer
    from search_server.document import DocumentStatus

    server = SearchServer("and in with")
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTIVE, [7, 2, 7])
    server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTIVE, [8, -3])
    for document in server.find_top_documents("fluffy well-groomed cat"):
        print(document)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from search_server.document import (
    Document,
    DocumentData,
    DocumentStatus,
    MatchResult,
    compute_average_rating,
)
from search_server.errors import (
    DuplicateIdError,
    IndexOutOfRangeError,
    InvalidIdError,
    UnknownDocumentIdError,
)
from search_server.query import Query, parse_query
from search_server.ranking import (
    DocumentPredicate,
    find_all_documents,
    select_top_documents,
    status_predicate,
)
from search_server.tokenizer import normalize_stop_words, split_into_words

logger = logging.getLogger(__name__)

_EMPTY_FREQS: Mapping[str, float] = MappingProxyType({})


class SearchServer:
    """
    Inverted index over short text documents, queried with plus/minus words.

    Documents can only be added; ids are never reused. There is no internal
    locking: callers sharing an instance across threads must hold an exclusive
    lock around add_document, while find_top_documents, match_document and the
    read-only accessors may run concurrently with each other.

    Args:
        stop_words: Space-separated string or iterable of words ignored by
            both indexing and queries.

    Raises:
        MalformedInputError: If a stop-word contains a control character.
    """

    def __init__(self, stop_words: str | Iterable[str] = ()):
        self._stop_words = normalize_stop_words(stop_words)
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def __len__(self) -> int:
        return len(self._document_ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    @property
    def document_count(self) -> int:
        return len(self._document_ids)

    def document_id_at(self, position: int) -> int:
        """Id of the document added at the given position (insertion order)."""
        if not 0 <= position < len(self._document_ids):
            raise IndexOutOfRangeError(
                f"Position {position} is out of range for {len(self._document_ids)} documents"
            )
        return self._document_ids[position]

    def word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Read-only word -> term frequency mapping; empty for unknown ids."""
        word_freqs = self._document_to_word_freqs.get(document_id)
        if word_freqs is None:
            return _EMPTY_FREQS
        return MappingProxyType(word_freqs)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTIVE,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Tokenizes and indexes a document.

        The call is atomic: on any error the index is left untouched.

        Raises:
            InvalidIdError: If document_id is negative.
            DuplicateIdError: If document_id was already added.
            MalformedInputError: If the text contains a control character.
        """
        if document_id < 0:
            raise InvalidIdError(f"Document id {document_id} is negative")
        if document_id in self._documents:
            raise DuplicateIdError(f"Document id {document_id} is already indexed")

        words = self._split_into_words_no_stop(document)

        word_freqs: dict[str, float] = {}
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                word_freqs[word] = word_freqs.get(word, 0.0) + inv_word_count

        for word, term_freq in word_freqs.items():
            self._word_to_document_freqs.setdefault(word, {})[document_id] = term_freq
        self._document_to_word_freqs[document_id] = word_freqs
        self._documents[document_id] = DocumentData(compute_average_rating(ratings), status)
        self._document_ids.append(document_id)
        logger.debug("Added document %d (%d words, status %s)", document_id, len(words), status.name)

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: DocumentPredicate | DocumentStatus | None = None,
        *,
        status: DocumentStatus | None = None,
    ) -> list[Document]:
        """
        Finds the most relevant documents for a query.

        Args:
            raw_query: Query text with plus words and ``-minus`` words.
            document_predicate: Called as (id, status, rating) to decide whether a
                document is eligible. A DocumentStatus is accepted as a shorthand
                for filtering on that status.
            status: Keep only documents with this status. Used when no predicate
                is given; defaults to ACTIVE.

        Returns:
            At most MAX_RESULT_DOCUMENT_COUNT documents, most relevant first.

        Raises:
            MalformedInputError, DoubleMinusError, EmptyMinusWordError: On an
                invalid query.
        """
        if isinstance(document_predicate, DocumentStatus):
            document_predicate, status = None, document_predicate
        if document_predicate is None:
            document_predicate = status_predicate(status or DocumentStatus.ACTIVE)

        query = self._parse_query(raw_query)
        if not query.plus_words:
            return []
        matched_documents = find_all_documents(
            query, self._word_to_document_freqs, self._documents, document_predicate
        )
        return select_top_documents(matched_documents)

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        """
        Lists the query's plus words found in a document.

        The word list is empty if any minus word occurs in the document.

        Raises:
            UnknownDocumentIdError: If document_id was never added.
            MalformedInputError, DoubleMinusError, EmptyMinusWordError: On an
                invalid query.
        """
        query = self._parse_query(raw_query)

        document_data = self._documents.get(document_id)
        if document_data is None:
            raise UnknownDocumentIdError(f"Document id {document_id} is not indexed")
        word_freqs = self._document_to_word_freqs[document_id]

        if any(word in word_freqs for word in query.minus_words):
            return MatchResult([], document_data.status)
        matched_words = sorted(word for word in query.plus_words if word in word_freqs)
        return MatchResult(matched_words, document_data.status)

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        return [word for word in split_into_words(text) if word not in self._stop_words]

    def _parse_query(self, raw_query: str) -> Query:
        return parse_query(raw_query, self._stop_words)


__all__ = ["SearchServer"]
