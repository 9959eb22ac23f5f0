"""
models/category.py
------------------
News categories supported by the AirShorts API.
"""

from typing import Optional

DEFAULT_CATEGORY = "all"

ALLOWED_CATEGORIES: tuple[str, ...] = (
    "all",
    "national",
    "business",
    "sports",
    "world",
    "politics",
    "technology",
    "startup",
    "entertainment",
    "miscellaneous",
    "hatke",
    "science",
    "automobile",
)


def normalize_category(raw: Optional[str]) -> str:
    """Lower-case and trim a user-supplied category; empty input means ``all``."""
    if raw is None:
        return DEFAULT_CATEGORY
    category = raw.lower().strip()
    return category or DEFAULT_CATEGORY


def is_valid_category(category: str) -> bool:
    return category in ALLOWED_CATEGORIES
