"""Streamlit app entrypoint for the paginated dataset browser."""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

from pagify.components.pagination_bar import render_pagination_bar
from pagify.components.table import render_table
from pagify.config import (
    DATASET_FILE,
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    SAMPLE_ROW_COUNT,
    STATE_KEY,
)
from pagify.services import data_loader
from pagify.services.pagination_state import PaginationController
from pagify.services.validation_service import ValidationError
from pagify.utils.helpers import configure_logging
from pagify.utils.pagination import Direction, paginate

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Dataset Browser", layout="wide")


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("page_size", DEFAULT_PAGE_SIZE)
    st.session_state.setdefault("sort_column", "")
    st.session_state.setdefault("last_view_signature", tuple())


@st.cache_data(show_spinner=False)
def get_dataset(dataset_path: str, sample_rows: int):
    """Load the dataset once per path and sample size."""
    return data_loader.load_dataset(Path(dataset_path), sample_rows)


def render_view_controls(columns: list[str]) -> tuple[int, str]:
    """Render page-size and sort selectors above the table."""
    size_col, sort_col = st.columns(2)
    with size_col:
        options = sorted(set(PAGE_SIZE_OPTIONS) | {st.session_state["page_size"]})
        page_size = st.selectbox(
            "Rows per page",
            options=options,
            key="page_size",
        )
    with sort_col:
        sort_column = st.selectbox(
            "Sort by",
            options=["", *columns],
            key="sort_column",
            format_func=lambda value: value or "(file order)",
        )
    return int(page_size), sort_column


def apply_page_request(controller: PaginationController, direction: Direction | None, page: int | None) -> bool:
    """Apply a pagination-bar click to the controller; return whether one happened."""
    if direction is Direction.NEXT:
        controller.next_page()
    elif direction is Direction.PREV:
        controller.prev_page()
    elif page is not None:
        controller.go_to_page(page)
    else:
        return False
    return True


def main() -> None:
    """Render and run the dataset browser."""
    configure_logging()
    init_session_state()

    try:
        dataset = get_dataset(str(DATASET_FILE), SAMPLE_ROW_COUNT)
    except FileNotFoundError as exc:
        st.error(str(exc))
        st.stop()
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Dataset loading failed")
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    st.title("Dataset Browser")
    page_size, sort_column = render_view_controls(list(dataset.columns))

    controller = PaginationController(
        page_size=page_size,
        max_pages=DEFAULT_MAX_PAGES,
        store=st.session_state,
        key=STATE_KEY,
    )
    try:
        controller.set_total_items(len(dataset))
    except ValidationError as exc:
        st.error(str(exc))
        st.stop()

    # Controllers are rebuilt on every rerun; a changed view starts from page 1.
    view_signature = (sort_column, page_size, len(dataset))
    if view_signature != st.session_state["last_view_signature"]:
        st.session_state["last_view_signature"] = view_signature
        controller.reset()

    sorted_df = data_loader.sort_dataset(dataset, sort_column)
    pagination = controller.pagination

    render_table(paginate(sorted_df, pagination.current_page, pagination.page_size), pagination)

    direction, page = render_pagination_bar(pagination)
    if apply_page_request(controller, direction, page):
        st.rerun()


if __name__ == "__main__":
    main()
