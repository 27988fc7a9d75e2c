#!/usr/bin/env python3
"""
Line-oriented driver for the search server.

Reads from stdin:
    line 1          stop-words, space-separated
    line 2          number of documents N
    next N lines    documents, ids 0..N-1; an optional " | 7 2 7" suffix gives ratings
    remaining       one query per line

Usage:
    search-server < input.txt
    search-server --page-size 2 --verbose < input.txt
"""

import argparse
import logging
import sys
from typing import TextIO

from search_server.document import DocumentStatus
from search_server.errors import SearchServerError
from search_server.paginator import paginate
from search_server.request_queue import RequestQueue
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)

RATINGS_SEPARATOR = " | "


def read_line(stream: TextIO) -> str:
    """Reads one line without its trailing newline; empty string at EOF."""
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    return int(read_line(stream).strip())


def parse_document_line(line: str) -> tuple[str, list[int]]:
    """Splits ``text | r1 r2 ...`` into the text and its ratings."""
    text, separator, ratings = line.rpartition(RATINGS_SEPARATOR)
    if not separator:
        return line, []
    return text, [int(rating) for rating in ratings.split()]


def build_server(stream: TextIO) -> SearchServer:
    """Reads stop-words and documents; malformed documents are reported and skipped."""
    server = SearchServer(read_line(stream))
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        line = read_line(stream)
        try:
            text, ratings = parse_document_line(line)
            server.add_document(document_id, text, DocumentStatus.ACTIVE, ratings)
        except (SearchServerError, ValueError) as e:
            logger.warning("Document %d skipped: %s", document_id, e)
    return server


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Index documents from stdin and answer queries")
    parser.add_argument("--page-size", type=int, help="Print results in pages of this many documents")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    args = parser.parse_args(argv)

    if args.page_size is not None and args.page_size <= 0:
        parser.error("--page-size must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        server = build_server(sys.stdin)
    except (SearchServerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    request_queue = RequestQueue(server)
    for line in sys.stdin:
        raw_query = line.rstrip("\r\n")
        if not raw_query.strip():
            continue
        try:
            documents = request_queue.add_find_request(raw_query)
        except SearchServerError as e:
            print(f"Error in query {raw_query!r}: {e}", file=sys.stderr)
            continue

        print(f"Results for query: {raw_query}")
        if args.page_size is None:
            for document in documents:
                print(document)
            continue
        for page in paginate(documents, args.page_size):
            for document in page:
                print(document)
            print("Page break")

    print(f"Requests without results: {request_queue.no_result_requests}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
