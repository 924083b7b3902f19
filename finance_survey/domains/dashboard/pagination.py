"""Page slicing and the page-button window of the responses table."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from finance_survey.core.exceptions import InvalidArgumentError

T = TypeVar("T")

WINDOW_SIZE = 5


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a filtered result set."""

    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    window: list[int] = field(default_factory=list)

    @property
    def first_row_number(self) -> int:
        """1-based row number of the first item on this page."""
        return (self.page - 1) * self.page_size + 1

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def total_pages(total_items: int, page_size: int) -> int:
    """Number of pages; always at least 1 so empty data still has a page."""
    if page_size < 1:
        raise InvalidArgumentError("page_size must be positive", details={"page_size": page_size})
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, pages: int) -> int:
    """Pull a requested page back into ``[1, pages]``."""
    return min(max(page, 1), max(pages, 1))


def page_window(page: int, pages: int) -> list[int]:
    """
    Page numbers to show as buttons: at most five consecutive pages.

    All pages when there are five or fewer; otherwise the first five near the
    start, the last five near the end, and ``page`` centred in between.
    """
    if pages <= WINDOW_SIZE:
        return list(range(1, pages + 1))
    if page <= 3:
        first = 1
    elif page >= pages - 2:
        first = pages - WINDOW_SIZE + 1
    else:
        first = page - 2
    return list(range(first, first + WINDOW_SIZE))


def paginate(records: Sequence[T], page_size: int, page: int) -> Page[T]:
    """
    Slice out one page.

    ``page`` is not clamped here: a page past the end yields no items.
    Callers clamp with :func:`clamp_page` when the result set shrinks.

    Raises:
        InvalidArgumentError: If ``page_size`` or ``page`` is below 1
    """
    if page < 1:
        raise InvalidArgumentError("page must be positive", details={"page": page})
    pages = total_pages(len(records), page_size)
    start = (page - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=len(records),
        total_pages=pages,
        window=page_window(page, pages),
    )
