"""Pagination math for page-based display.

Every function here is pure: inputs are trusted numeric values and nothing
is validated. Degenerate inputs (``page_size <= 0``, negative totals) give
mathematically consequent results; ``page_size == 0`` raises
``ZeroDivisionError`` from the division itself. Use
``services.validation_service`` for a checked entry point.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Sequence, Tuple, TypeVar

import pandas as pd

T = TypeVar("T")

_CAMEL_KEYS = {
    "total_items": "totalItems",
    "current_page": "currentPage",
    "page_size": "pageSize",
    "total_pages": "totalPages",
    "start_page": "startPage",
    "end_page": "endPage",
    "start_index": "startIndex",
    "end_index": "endIndex",
    "pages": "pages",
}


class Direction(str, Enum):
    """Navigation direction for ``change_page``."""

    NEXT = "next"
    PREV = "prev"


@dataclass(frozen=True)
class PaginationState:
    """Pagination metadata computed by ``get_pagination``."""

    total_items: int
    current_page: int
    page_size: int
    total_pages: int
    start_page: int
    end_page: int
    start_index: int
    end_index: int
    pages: Tuple[int, ...]

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def to_dict(self) -> dict:
        """Return the fields keyed the way front-end consumers expect them."""
        payload = {_CAMEL_KEYS[name]: value for name, value in asdict(self).items()}
        payload["pages"] = list(self.pages)
        return payload


def get_pagination(
    total_items: int,
    current_page: int = 1,
    page_size: int = 10,
    max_pages: int = 5,
) -> PaginationState:
    """Compute clamped pagination metadata and the visible page window.

    The window starts ``max_pages // 2`` pages before ``current_page`` and is
    cut at ``total_pages`` without being shifted back, so it is asymmetric
    near the last page.

    An empty dataset has ``total_pages == 0`` and the upper clamp then sets
    ``current_page`` to 0. Callers that need page 1 for an empty dataset
    must handle it themselves.
    """
    total_pages = -(-total_items // page_size)

    if current_page < 1:
        current_page = 1
    if current_page > total_pages:
        current_page = total_pages

    start_page = max(1, current_page - max_pages // 2)
    end_page = min(total_pages, start_page + max_pages - 1)

    return PaginationState(
        total_items=total_items,
        current_page=current_page,
        page_size=page_size,
        total_pages=total_pages,
        start_page=start_page,
        end_page=end_page,
        start_index=(current_page - 1) * page_size,
        end_index=min(current_page * page_size - 1, total_items - 1),
        pages=tuple(range(start_page, end_page + 1)),
    )


def paginate(data: Sequence[T], current_page: int = 1, page_size: int = 10) -> Sequence[T]:
    """Return the rows of ``data`` that belong to ``current_page``.

    DataFrames and Series are sliced by position.
    """
    start_index = (current_page - 1) * page_size
    end_index = min(start_index + page_size, len(data))
    if isinstance(data, (pd.DataFrame, pd.Series)):
        return data.iloc[start_index:end_index]
    return data[start_index:end_index]


def change_page(current_page: int, total_pages: int, direction: Direction | str) -> int:
    """Step one page in ``direction``, staying within ``[1, total_pages]``."""
    if Direction(direction) is Direction.NEXT:
        return min(current_page + 1, total_pages)
    return max(current_page - 1, 1)


def go_to(page: int, total_pages: int) -> int:
    """Clamp a target page into ``[1, total_pages]``."""
    if page < 1:
        return 1
    if page > total_pages:
        return total_pages
    return page


def init_page(current_page: int = 1, page_size: int = 10) -> int:
    """Return a valid starting page.

    ``page_size`` is accepted for signature compatibility and is not used.
    """
    del page_size
    if current_page < 1:
        return 1
    return current_page
