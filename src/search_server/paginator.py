"""
Fixed-size pagination of result sequences for display.
"""

from __future__ import annotations

from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


class IteratorRange(Generic[T]):
    """A read-only page: a contiguous slice of the paginated sequence."""

    def __init__(self, items: Sequence[T], start: int, stop: int):
        self._items = items
        self._start = start
        self._stop = stop

    def __iter__(self) -> Iterator[T]:
        for index in range(self._start, self._stop):
            yield self._items[index]

    def __len__(self) -> int:
        return self._stop - self._start

    def __str__(self) -> str:
        return "".join(str(item) for item in self)


class Paginator(Generic[T]):
    """
    Splits a sequence into consecutive pages of page_size items; the last page may be shorter.

    Args:
        items: The sequence to paginate. It is not copied.
        page_size: Number of items per page, must be positive.
    """

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._pages = [
            IteratorRange(items, start, min(start + page_size, len(items)))
            for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[IteratorRange[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> IteratorRange[T]:
        return self._pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)


__all__ = ["IteratorRange", "Paginator", "paginate"]
