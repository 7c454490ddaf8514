"""Display helpers shared with the chart renderers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from donations.types import Entry


def format_currency(value: float, symbol: str = "€", separator: str = "'") -> str:
    """Whole-unit amount with thousands separators and a trailing symbol.

    Halves round away from zero (2.5 -> 3, -2.5 -> -3).

    >>> format_currency(1234567)
    "1'234'567 €"
    >>> format_currency(-5000)
    "-5'000 €"
    """
    rounded = int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return f"{rounded:,d}".replace(",", separator) + f" {symbol}"


def axis_label(entry: Entry, *, first: bool = False) -> str:
    """Month label, annotated with the year at year boundaries."""
    if first or entry.month == 1:
        return f"{entry.label} {entry.year}"
    return entry.label


def axis_labels(entries: list[Entry]) -> list[str]:
    return [axis_label(e, first=(i == 0)) for i, e in enumerate(entries)]
