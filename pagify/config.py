"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"

DATASET_FILE = Path(os.getenv("PAGIFY_DATASET_FILE", str(DATA_DIR / "dataset.csv")))
SAMPLE_ROW_COUNT = int(os.getenv("PAGIFY_SAMPLE_ROWS", "95"))

DEFAULT_PAGE_SIZE = int(os.getenv("PAGIFY_PAGE_SIZE", "10"))
DEFAULT_MAX_PAGES = int(os.getenv("PAGIFY_MAX_PAGES", "5"))
PAGE_SIZE_OPTIONS = [10, 25, 50, 100]

STATE_KEY = "pagination"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SAMPLE_COLUMNS = ["item_id", "name", "category", "quantity"]
SAMPLE_CATEGORIES = ["alpha", "beta", "gamma", "delta"]
