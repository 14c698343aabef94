"""Validation logic for pagination inputs.

The calculator in ``utils.pagination`` trusts its caller. This module is the
checked layer in front of it: it rejects ``page_size <= 0``,
``max_pages <= 0`` and ``total_items < 0`` instead of letting them turn into
division errors or negative fields.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from pagify.config import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE
from pagify.utils.helpers import normalize_text
from pagify.utils.pagination import PaginationState, get_pagination

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class ValidationError(ValueError):
    """Raised when pagination inputs fail validation."""


def _parse_integer(value: object, field_name: str) -> Tuple[bool, str, Optional[int]]:
    """Parse ints and integer-like strings; reject bools, floats and text."""
    if isinstance(value, bool):
        return False, f"{field_name} must be an integer.", None
    if isinstance(value, int):
        return True, "", value

    raw_value = normalize_text(value)
    if not INTEGER_PATTERN.fullmatch(raw_value):
        return False, f"{field_name} must be an integer.", None
    return True, "", int(raw_value)


def validate_page_size(value: object) -> Tuple[bool, str, Optional[int]]:
    """Validate a page size, which must be at least 1."""
    valid, error, parsed = _parse_integer(value, "page_size")
    if not valid:
        return False, error, None
    if parsed <= 0:
        return False, "page_size must be greater than 0.", None
    return True, "", parsed


def validate_max_pages(value: object) -> Tuple[bool, str, Optional[int]]:
    """Validate the page window size, which must be at least 1."""
    valid, error, parsed = _parse_integer(value, "max_pages")
    if not valid:
        return False, error, None
    if parsed <= 0:
        return False, "max_pages must be greater than 0.", None
    return True, "", parsed


def validate_total_items(value: object) -> Tuple[bool, str, Optional[int]]:
    """Validate a total item count, which cannot be negative."""
    valid, error, parsed = _parse_integer(value, "total_items")
    if not valid:
        return False, error, None
    if parsed < 0:
        return False, "total_items cannot be negative.", None
    return True, "", parsed


def validate_pagination_request(
    total_items: object,
    page_size: object = DEFAULT_PAGE_SIZE,
    max_pages: object = DEFAULT_MAX_PAGES,
) -> Tuple[bool, Optional[str], dict]:
    """Validate a full pagination request and return normalized values."""
    total_valid, total_error, total_value = validate_total_items(total_items)
    if not total_valid:
        return False, total_error, {}

    size_valid, size_error, size_value = validate_page_size(page_size)
    if not size_valid:
        return False, size_error, {}

    window_valid, window_error, window_value = validate_max_pages(max_pages)
    if not window_valid:
        return False, window_error, {}

    normalized = {
        "total_items": total_value,
        "page_size": size_value,
        "max_pages": window_value,
    }
    return True, None, normalized


def require_valid_pagination(
    total_items: object,
    page_size: object = DEFAULT_PAGE_SIZE,
    max_pages: object = DEFAULT_MAX_PAGES,
) -> dict:
    """Return normalized values or raise ``ValidationError``."""
    valid, error_message, normalized = validate_pagination_request(total_items, page_size, max_pages)
    if not valid:
        raise ValidationError(error_message or "Invalid pagination request.")
    return normalized


def get_pagination_checked(
    total_items: object,
    current_page: int = 1,
    page_size: object = DEFAULT_PAGE_SIZE,
    max_pages: object = DEFAULT_MAX_PAGES,
) -> PaginationState:
    """Validate inputs, then compute pagination metadata."""
    normalized = require_valid_pagination(total_items, page_size, max_pages)
    return get_pagination(
        normalized["total_items"],
        current_page,
        normalized["page_size"],
        normalized["max_pages"],
    )
