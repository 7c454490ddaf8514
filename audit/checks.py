"""Pure audit check functions for a processed donation dataset.

Each function takes pipeline output and returns a list of check result tuples:
    (section: str, name: str, expected: float, actual: float, delta: float, passed: bool)

All checks read from ``donations`` output (Entry lists, TrendFit), never from
the raw file, so they verify what the renderers will actually draw.
"""

from __future__ import annotations

from typing import Sequence

from donations.types import Entry, TrendFit

TOLERANCE = 0.01  # EUR


# ── Helper ────────────────────────────────────────────────────────

def _check(results: list, section: str, name: str,
           expected: float, actual: float, tolerance: float = TOLERANCE) -> None:
    """Append a single check result to the results list."""
    delta = abs(expected - actual)
    ok = delta <= tolerance
    results.append((section, name, expected, actual, delta, ok))


def _month(e: Entry) -> str:
    return f"{e.year:04d}-{e.month:02d}"


# ── Classification ────────────────────────────────────────────────

def classify_check(section: str, name: str) -> str:
    """Return 'arithmetic' or 'data_quality' for a check.

    Data quality findings describe the input (months missing from the
    file), not errors in the computation.
    """
    if section == "CALENDAR":
        return "data_quality"
    return "arithmetic"


# ── Ordering ──────────────────────────────────────────────────────

def check_ordering(entries: Sequence[Entry]) -> list[tuple]:
    """Periods strictly ascending."""
    results: list[tuple] = []
    for prev, cur in zip(entries, entries[1:]):
        step = cur.period - prev.period
        ok = step >= 1
        results.append(("ORDER", f"{_month(cur)} Order: period > previous",
                        1.0, float(step), 0.0 if ok else float(1 - step), ok))
    return results


def check_calendar(entries: Sequence[Entry]) -> list[tuple]:
    """Consecutive entries one calendar month apart (gaps are reported)."""
    results: list[tuple] = []
    for prev, cur in zip(entries, entries[1:]):
        _check(results, "CALENDAR", f"{_month(cur)} Calendar: follows {_month(prev)}",
               1.0, float(cur.period - prev.period), tolerance=0.0)
    return results


# ── Identities ────────────────────────────────────────────────────

def check_donated(entries: Sequence[Entry]) -> list[tuple]:
    """Donated = Received + Pledged."""
    results: list[tuple] = []
    for e in entries:
        _check(results, "IDENTITY", f"{_month(e)} Donated = Received + Pledged",
               e.received + e.pledged, e.donated)
    return results


def check_cumulative(entries: Sequence[Entry]) -> list[tuple]:
    """Running totals: Sum[i] = Sum[i-1] + value[i]."""
    results: list[tuple] = []
    sum_donated = 0.0
    sum_needed = 0.0
    for e in entries:
        sum_donated += e.donated
        sum_needed += e.needed
        _check(results, "CUMULATIVE", f"{_month(e)} SumDonated = prev + Donated",
               sum_donated, e.sum_donated)
        _check(results, "CUMULATIVE", f"{_month(e)} SumNeeded = prev + Needed",
               sum_needed, e.sum_needed)
    return results


# ── Projection ────────────────────────────────────────────────────

def check_projection(entries: Sequence[Entry], fit: TrendFit | None) -> list[tuple]:
    """Projection present exactly from the window start, on the fitted line."""
    results: list[tuple] = []
    projected = [e for e in entries if e.sum_projected_donations is not None]

    if fit is None:
        _check(results, "PROJECTION", "No window: projected months = 0",
               0.0, float(len(projected)), tolerance=0.0)
        return results

    start = fit.projection_start
    expected_count = sum(1 for e in entries if e.period >= start)
    _check(results, "PROJECTION", "Projected months = months from window start",
           float(expected_count), float(len(projected)), tolerance=0.0)
    _check(results, "PROJECTION", "Projected months before window start = 0",
           0.0, float(sum(1 for e in projected if e.period < start)), tolerance=0.0)

    for e in projected:
        _check(results, "PROJECTION", f"{_month(e)} Projection on trend line",
               fit.value_at(e.period), e.sum_projected_donations)
    return results
