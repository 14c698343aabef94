"""Helper utilities for logging setup, text normalization and CSV input."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from pagify.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from ``LOG_LEVEL`` unless a level is given."""
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def read_csv_as_text(file_path: Path) -> pd.DataFrame:
    """Read a CSV with every cell as a string and blanks for missing values."""
    return pd.read_csv(file_path, dtype=str).fillna("")
