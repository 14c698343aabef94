"""Table component showing one page of rows."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from pagify.utils.pagination import PaginationState


def format_range_caption(pagination: PaginationState) -> str:
    """Describe which rows of the dataset the current page shows."""
    if pagination.total_items <= 0 or pagination.current_page < 1:
        return "No rows to show."
    first_row = pagination.start_index + 1
    last_row = pagination.end_index + 1
    return f"Showing rows {first_row}-{last_row} of {pagination.total_items}"


def render_table(page_df: pd.DataFrame, pagination: PaginationState) -> None:
    """Render the rows of the current page with a range caption."""
    if page_df.empty:
        st.info("No rows available.")
        return

    st.caption(format_range_caption(pagination))
    st.dataframe(page_df, hide_index=True, width="stretch")
