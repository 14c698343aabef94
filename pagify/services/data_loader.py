"""Dataset loading for the paginated table view."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from pagify.config import SAMPLE_CATEGORIES, SAMPLE_COLUMNS
from pagify.utils.helpers import read_csv_as_text

logger = logging.getLogger(__name__)


def build_sample_dataset(row_count: int) -> pd.DataFrame:
    """Generate a deterministic sample dataset with ``row_count`` rows."""
    rows = [
        {
            "item_id": index + 1,
            "name": f"Item {index + 1:04d}",
            "category": SAMPLE_CATEGORIES[index % len(SAMPLE_CATEGORIES)],
            "quantity": (index * 7) % 100,
        }
        for index in range(max(row_count, 0))
    ]
    return pd.DataFrame(rows, columns=SAMPLE_COLUMNS)


def load_dataset(dataset_file: Optional[Path], sample_rows: int) -> pd.DataFrame:
    """Load the dataset CSV, falling back to generated sample rows when it is absent."""
    if dataset_file is not None and dataset_file.exists():
        dataframe = read_csv_as_text(dataset_file)
        logger.info("Loaded %d rows from %s", len(dataframe), dataset_file)
        return dataframe.reset_index(drop=True)

    logger.info("Dataset file %s not found; generating %d sample rows", dataset_file, sample_rows)
    return build_sample_dataset(sample_rows)


def sort_dataset(dataframe: pd.DataFrame, column: Optional[str], ascending: bool = True) -> pd.DataFrame:
    """Return rows ordered by ``column`` with a stable sort, or unchanged without one."""
    if not column or column not in dataframe.columns:
        return dataframe
    return dataframe.sort_values(
        by=column,
        ascending=ascending,
        kind="mergesort",
        na_position="last",
    ).reset_index(drop=True)
