"""
Batch query execution.

Queries only read the index, so a batch can be spread over a thread pool as
long as nobody calls add_document while it runs.

Usage:
    from search_server.process_queries import process_queries, process_queries_joined

    results = process_queries(server, ["curly cat", "-nasty rat"])
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import Sequence

from search_server.document import Document
from search_server.search_server import SearchServer


# =============================================================================
# Configuration
# =============================================================================

# Default number of workers for parallel query processing
DEFAULT_NUM_WORKERS = 8

# Minimum queries before enabling parallelism
MIN_QUERIES_FOR_PARALLEL = 10


def process_queries(
    search_server: SearchServer,
    queries: Sequence[str],
    num_workers: int = DEFAULT_NUM_WORKERS,
    min_queries_for_parallel: int = MIN_QUERIES_FOR_PARALLEL,
) -> list[list[Document]]:
    """
    Runs find_top_documents for every query, in parallel for larger batches.

    Args:
        search_server: Server to query; must not be modified during the call
        queries: Raw query strings
        num_workers: Number of parallel workers
        min_queries_for_parallel: Minimum queries before enabling parallelism

    Returns:
        One result list per query, in the order of ``queries``

    Raises:
        The first error raised by any query.
    """
    if not queries:
        return []

    def find_top(query: str) -> list[Document]:
        return search_server.find_top_documents(query)

    # For small batches, run sequentially
    if len(queries) < min_queries_for_parallel:
        return [find_top(query) for query in queries]

    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        results = list(executor.map(find_top, queries))

    return results


def process_queries_joined(
    search_server: SearchServer,
    queries: Sequence[str],
    num_workers: int = DEFAULT_NUM_WORKERS,
) -> list[Document]:
    """Same as process_queries, flattened into one list in query order."""
    return list(chain.from_iterable(process_queries(search_server, queries, num_workers)))


__all__ = [
    "DEFAULT_NUM_WORKERS",
    "MIN_QUERIES_FOR_PARALLEL",
    "process_queries",
    "process_queries_joined",
]
