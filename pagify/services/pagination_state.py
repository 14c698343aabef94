"""Current-page tracking on top of the pagination calculator.

State lives in a mutable mapping so it can be backed by a plain dict or by
Streamlit's ``st.session_state``, which keeps it across reruns.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, MutableMapping, NamedTuple, Optional

from pagify.config import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE, STATE_KEY
from pagify.services import validation_service
from pagify.utils.pagination import Direction, PaginationState, change_page, get_pagination, go_to

logger = logging.getLogger(__name__)

# Backs controllers created without an explicit store.
DEFAULT_STORE: MutableMapping = {}


class PaginationHandlers(NamedTuple):
    next_page: Callable[[], None]
    prev_page: Callable[[], None]
    go_to_page: Callable[[int], None]
    set_total_items: Callable[[int], None]
    has_next_page: Callable[[], bool]
    has_prev_page: Callable[[], bool]


class PaginationHandle(NamedTuple):
    pagination: PaginationState
    handlers: PaginationHandlers


class PaginationController:
    """Tracks the current page and total item count for one paginated view."""

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
        store: Optional[MutableMapping] = None,
        key: str = STATE_KEY,
    ) -> None:
        self.page_size = page_size
        self.max_pages = max_pages
        self._store = store if store is not None else DEFAULT_STORE
        self._page_key = f"{key}_current_page"
        self._total_key = f"{key}_total_items"
        # Controllers sharing a store and key share one lock.
        self._lock = self._store.setdefault(f"{key}_lock", threading.RLock())
        self._store.setdefault(self._page_key, 1)
        self._store.setdefault(self._total_key, 0)

    @property
    def current_page(self) -> int:
        return self._store[self._page_key]

    @property
    def total_item_count(self) -> int:
        return self._store[self._total_key]

    @property
    def pagination(self) -> PaginationState:
        """Pagination metadata recomputed from the stored snapshot."""
        with self._lock:
            return get_pagination(self.total_item_count, self.current_page, self.page_size, self.max_pages)

    @property
    def handlers(self) -> PaginationHandlers:
        return PaginationHandlers(
            next_page=self.next_page,
            prev_page=self.prev_page,
            go_to_page=self.go_to_page,
            set_total_items=self.set_total_items,
            has_next_page=self.has_next_page,
            has_prev_page=self.has_prev_page,
        )

    def _commit_page(self, page: int) -> None:
        previous = self._store[self._page_key]
        self._store[self._page_key] = page
        if page != previous:
            logger.debug("Page changed from %s to %s", previous, page)

    def next_page(self) -> None:
        with self._lock:
            total_pages = self.pagination.total_pages
            self._commit_page(change_page(self.current_page, total_pages, Direction.NEXT))

    def prev_page(self) -> None:
        with self._lock:
            total_pages = self.pagination.total_pages
            self._commit_page(change_page(self.current_page, total_pages, Direction.PREV))

    def go_to_page(self, page: int) -> None:
        with self._lock:
            self._commit_page(go_to(page, self.pagination.total_pages))

    def set_total_items(self, total: int) -> None:
        """Store a new item count; the current page is clamped on the next read."""
        valid, error_message, total_value = validation_service.validate_total_items(total)
        if not valid:
            raise validation_service.ValidationError(error_message)
        with self._lock:
            self._store[self._total_key] = total_value

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and return to the first page."""
        valid, error_message, size_value = validation_service.validate_page_size(page_size)
        if not valid:
            raise validation_service.ValidationError(error_message)
        with self._lock:
            if size_value != self.page_size:
                self.page_size = size_value
                self._commit_page(1)

    def reset(self) -> None:
        with self._lock:
            self._commit_page(1)

    def has_next_page(self) -> bool:
        with self._lock:
            return self.current_page < self.pagination.total_pages

    def has_prev_page(self) -> bool:
        with self._lock:
            return self.current_page > 1


def use_pagination(
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = DEFAULT_MAX_PAGES,
    store: Optional[MutableMapping] = None,
    key: str = STATE_KEY,
) -> PaginationHandle:
    """Return the current pagination snapshot together with its handlers."""
    controller = PaginationController(page_size, max_pages, store=store, key=key)
    return PaginationHandle(pagination=controller.pagination, handlers=controller.handlers)
