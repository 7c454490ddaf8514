"""Row parser: one raw TSV record in, one typed Entry out.

Cumulative and projection fields are left at their defaults; the
aggregator and projector fill them in.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Mapping

from donations.config import ProjectionConfig, resolve
from donations.errors import RowParseError
from donations.periods import month_label, parse_year_month, period_index
from donations.types import Entry, RawRow

# Plain ASCII decimals only; no exponents, underscores or other digit scripts.
_AMOUNT_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?", re.ASCII)
_COUNT_RE = re.compile(r"-?[0-9]+", re.ASCII)


def _cell(row: Mapping[str, object], key: str) -> str:
    value = row.get(key)
    return "" if value is None else str(value).strip()


def _parse_amount(row: Mapping[str, object], key: str, position: int | None,
                  *, required: bool = True) -> float:
    """Finite, non-negative float. Empty optional cells read as 0."""
    raw = _cell(row, key)
    if raw == "":
        if required:
            raise RowParseError(position, key, row.get(key), "missing value")
        return 0.0
    if not _AMOUNT_RE.fullmatch(raw):
        raise RowParseError(position, key, raw, "not a number")
    value = float(raw)
    if not math.isfinite(value):
        raise RowParseError(position, key, raw, "not a finite number")
    if value < 0:
        raise RowParseError(position, key, raw, "negative amount")
    return value


def _parse_count(row: Mapping[str, object], key: str, position: int | None) -> int:
    raw = _cell(row, key)
    if raw == "":
        return 0
    if not _COUNT_RE.fullmatch(raw):
        raise RowParseError(position, key, raw, "not an integer")
    value = int(raw, 10)
    if value < 0:
        raise RowParseError(position, key, raw, "negative count")
    return value


def has_donation(received: float, pledged: float, rule: str) -> bool:
    """Whether a month counts as donation-bearing under ``rule``."""
    if rule == "received_only":
        return received > 0
    return received > 0 or pledged > 0


def parse_row(
    row: RawRow | Mapping[str, object],
    *,
    position: int | None = None,
    config: ProjectionConfig | None = None,
) -> Entry:
    """Parse a single raw row.

    Accepts the rich schema (received + optional pledged) and the legacy
    one (a single ``donated`` column, read as received).

    Raises:
        RowParseError: on an unparseable month or amount.
    """
    cfg = resolve(config)

    month_text = _cell(row, "month")
    ym = parse_year_month(month_text)
    if ym is None:
        raise RowParseError(position, "month", row.get("month"), "expected YYYY-MM")

    if "received" in row or "donated" not in row:
        received = _parse_amount(row, "received", position)
        pledged = _parse_amount(row, "pledged", position, required=False)
    else:
        received = _parse_amount(row, "donated", position)
        pledged = 0.0

    return Entry(
        period=period_index(ym.year, ym.month, cfg.base_year),
        year=ym.year,
        month=ym.month,
        label=month_label(ym.month),
        donors=_parse_count(row, "donors", position),
        received=received,
        pledged=pledged,
        donated=received + pledged,
        needed=_parse_amount(row, "needed", position),
        has_donation=has_donation(received, pledged, cfg.donation_rule),
    )


def parse_rows(
    rows: Iterable[RawRow | Mapping[str, object]],
    config: ProjectionConfig | None = None,
) -> list[Entry]:
    """Parse every row, in input order. The first bad row aborts the batch."""
    cfg = resolve(config)
    return [parse_row(row, position=i, config=cfg) for i, row in enumerate(rows)]
