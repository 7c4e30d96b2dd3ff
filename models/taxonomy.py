"""Canonical labels for wardrobe categories and outfit weather.

The backend accepts free-form strings for most fields; only the category and
weather selectors are restricted to the labels below.
"""

from typing import List


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower()


CATEGORIES: List[str] = ["top", "bottom", "outerwear", "footwear", "accessory"]
DEFAULT_CATEGORY = "top"

# The empty string is the "unset" choice of the weather selector.
WEATHER_OPTIONS: List[str] = ["cold", "warm", "hot", "chilly", "rainy"]
WEATHER_UNSET = ""

WARMTH_MIN = 0.0
WARMTH_MAX = 10.0


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not one of the selector
    options.
    """

    key = _normalize_key(value or "")
    if key not in CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {CATEGORIES}")
    return key


def validate_weather(value: str | None) -> str:
    """Validate a weather label, mapping blank input to the unset choice."""

    key = _normalize_key(value or "")
    if key == WEATHER_UNSET:
        return WEATHER_UNSET
    if key not in WEATHER_OPTIONS:
        raise ValueError(f"Unsupported weather '{value}'. Allowed: {WEATHER_OPTIONS} or blank")
    return key


__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "WEATHER_OPTIONS",
    "WEATHER_UNSET",
    "WARMTH_MIN",
    "WARMTH_MAX",
    "validate_category",
    "validate_weather",
]
