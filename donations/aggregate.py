"""Aggregator: chronological order and running totals."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from donations.types import Entry


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Ascending by period. ``sorted`` is stable, so ties keep input order."""
    return sorted(entries, key=lambda e: e.period)


def aggregate(entries: Iterable[Entry]) -> list[Entry]:
    """Sort and attach cumulative ``sum_donated`` / ``sum_needed``.

    sum[0] = value[0], sum[i] = sum[i-1] + value[i]. Returns new entries;
    the input objects are left as they were.
    """
    result: list[Entry] = []
    sum_donated = 0.0
    sum_needed = 0.0
    for entry in sort_entries(entries):
        sum_donated += entry.donated
        sum_needed += entry.needed
        result.append(replace(entry, sum_donated=sum_donated, sum_needed=sum_needed))
    return result
