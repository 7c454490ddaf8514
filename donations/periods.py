"""Monthly period timeline: calendar month ↔ integer period index."""

from __future__ import annotations

import re
from typing import NamedTuple

DEFAULT_BASE_YEAR = 2000

MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_MONTH_RE = re.compile(r"^\s*([0-9]{4})-([0-9]{1,2})\s*$", re.ASCII)


class YearMonth(NamedTuple):
    year: int
    month: int


def parse_year_month(text: str) -> YearMonth | None:
    """Split a ``YYYY-MM`` string. Returns None if it does not match
    or the month is outside 1-12."""
    m = _MONTH_RE.match(text or "")
    if m is None:
        return None
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        return None
    return YearMonth(year, month)


def period_index(year: int, month: int, base_year: int = DEFAULT_BASE_YEAR) -> int:
    """(year - base_year) * 12 + month.

    >>> period_index(2025, 1)
    301
    """
    return (year - base_year) * 12 + month


def period_to_year_month(period: int, base_year: int = DEFAULT_BASE_YEAR) -> YearMonth:
    """Inverse of period_index."""
    year_offset, month0 = divmod(period - 1, 12)
    return YearMonth(base_year + year_offset, month0 + 1)


def month_label(month: int) -> str:
    """Short month name; out-of-range numbers render as the bare number."""
    if 1 <= month <= 12:
        return MONTH_LABELS[month - 1]
    return str(month)


def index_to_label(period: int) -> str:
    """Month label straight from a period index (base-year independent)."""
    return MONTH_LABELS[(period + 11) % 12]
