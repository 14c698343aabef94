"""Pagination control component."""

from __future__ import annotations

from typing import Optional, Tuple

import streamlit as st

from pagify.utils.pagination import Direction, PaginationState


PageRequest = Tuple[Optional[Direction], Optional[int]]


def render_pagination_bar(pagination: PaginationState, key_prefix: str = "pager") -> PageRequest:
    """Render prev/next buttons around the page window and return the clicked request."""
    if pagination.total_pages <= 0:
        return None, None

    slots = st.columns(len(pagination.pages) + 2)
    requested: PageRequest = (None, None)

    with slots[0]:
        if st.button(
            "‹ Prev",
            key=f"{key_prefix}_prev",
            disabled=not pagination.has_prev_page,
            width="stretch",
        ):
            requested = (Direction.PREV, None)

    for slot, page in zip(slots[1:-1], pagination.pages):
        with slot:
            if st.button(
                str(page),
                key=f"{key_prefix}_page_{page}",
                type="primary" if page == pagination.current_page else "secondary",
                width="stretch",
            ):
                requested = (None, page)

    with slots[-1]:
        if st.button(
            "Next ›",
            key=f"{key_prefix}_next",
            disabled=not pagination.has_next_page,
            width="stretch",
        ):
            requested = (Direction.NEXT, None)

    st.caption(f"Page {pagination.current_page} of {pagination.total_pages}")
    return requested
