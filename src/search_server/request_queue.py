"""
Tracks how many of the most recent requests returned no documents.

Each request advances a clock by one "minute"; only the last MIN_IN_DAY
requests are kept.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from search_server.document import Document, DocumentStatus
from search_server.ranking import DocumentPredicate
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)

MIN_IN_DAY = 1440


@dataclass(frozen=True)
class QueryResult:
    timestamp: int
    result_count: int


class RequestQueue:
    """
    Wraps a SearchServer and records the outcome of every find request.

    Requests that raise are not recorded.
    """

    def __init__(self, search_server: SearchServer, window: int = MIN_IN_DAY):
        self._search_server = search_server
        self._window = window
        self._requests: deque[QueryResult] = deque()
        self._no_result_requests = 0
        self._current_time = 0

    def add_find_request(
        self,
        raw_query: str,
        document_predicate: DocumentPredicate | DocumentStatus | None = None,
        *,
        status: DocumentStatus | None = None,
    ) -> list[Document]:
        documents = self._search_server.find_top_documents(raw_query, document_predicate, status=status)
        self._add_request(len(documents))
        return documents

    @property
    def no_result_requests(self) -> int:
        return self._no_result_requests

    def __len__(self) -> int:
        return len(self._requests)

    def _add_request(self, result_count: int) -> None:
        self._current_time += 1
        while self._requests and self._current_time - self._requests[0].timestamp >= self._window:
            if self._requests[0].result_count == 0:
                self._no_result_requests -= 1
            self._requests.popleft()

        self._requests.append(QueryResult(self._current_time, result_count))
        if result_count == 0:
            self._no_result_requests += 1
            logger.debug("Request #%d returned no documents", self._current_time)


__all__ = ["MIN_IN_DAY", "QueryResult", "RequestQueue"]
