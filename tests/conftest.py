"""Shared fixtures for pagify tests."""

import pandas as pd
import pytest

from pagify.services.data_loader import build_sample_dataset
from pagify.services.pagination_state import PaginationController


@pytest.fixture
def store():
    """Plain dict standing in for Streamlit session state."""
    return {}


@pytest.fixture
def controller(store):
    """Controller over 95 items, 10 per page, five-page window."""
    pager = PaginationController(page_size=10, max_pages=5, store=store)
    pager.set_total_items(95)
    return pager


@pytest.fixture
def sample_df() -> pd.DataFrame:
    return build_sample_dataset(25)
