"""Text-to-value coercion for form input.

None of these helpers raise: input that cannot be interpreted comes back as
``None`` (for numbers) or an empty list (for comma-separated text).
"""

from __future__ import annotations

import math
from typing import List, Optional

from models.taxonomy import WARMTH_MAX, WARMTH_MIN


def split_csv(text: Optional[str]) -> List[str]:
    """Split comma-separated text, trimming entries and dropping empty ones."""

    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_number(
    text: Optional[str],
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> Optional[float]:
    """Parse a numeric field, returning ``None`` for blank or invalid text.

    Whole numbers come back as ``int`` so ``"1299"`` is sent as ``1299``.
    """

    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    if minimum is not None and value < minimum:
        return None
    if maximum is not None and value > maximum:
        return None
    if value.is_integer():
        return int(value)
    return value


def parse_warmth(text: Optional[str]) -> Optional[float]:
    return parse_number(text, minimum=WARMTH_MIN, maximum=WARMTH_MAX)


def resolve_owner(owner: Optional[str], session_email: Optional[str]) -> str:
    """Pick the explicit owner email, falling back to the session email."""

    return (owner or "").strip() or (session_email or "").strip()


__all__ = ["split_csv", "parse_number", "parse_warmth", "resolve_owner"]
