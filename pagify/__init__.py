"""Pagination metadata, dataset slicing and current-page tracking."""

from pagify.services.pagination_state import (
    PaginationController,
    PaginationHandle,
    PaginationHandlers,
    use_pagination,
)
from pagify.services.validation_service import ValidationError, get_pagination_checked
from pagify.utils.pagination import (
    Direction,
    PaginationState,
    change_page,
    get_pagination,
    go_to,
    init_page,
    paginate,
)

__all__ = [
    "Direction",
    "PaginationController",
    "PaginationHandle",
    "PaginationHandlers",
    "PaginationState",
    "ValidationError",
    "change_page",
    "get_pagination",
    "get_pagination_checked",
    "go_to",
    "init_page",
    "paginate",
    "use_pagination",
]
