"""Core utilities for SciJournal Digest."""

from .dates import (
    compare_dates,
    now_iso,
    parse_publication_date,
    sort_by_date,
)
from .io import load_yaml, save_yaml

__all__ = [
    # I/O
    "load_yaml",
    "save_yaml",
    # Dates
    "now_iso",
    "parse_publication_date",
    "compare_dates",
    "sort_by_date",
]
