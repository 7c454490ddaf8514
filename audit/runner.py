"""Audit runner -- orchestrates all checks against pipeline output."""

from __future__ import annotations

from pathlib import Path

from donations.config import ProjectionConfig, resolve
from donations.loader import read_rows
from donations.pipeline import build_entries
from donations.projection import fit_trend
from donations.types import Entry
from audit.checks import (
    check_ordering,
    check_calendar,
    check_donated,
    check_cumulative,
    check_projection,
    classify_check,
)


def run_all_checks(
    entries: list[Entry] | None = None,
    path: str | Path | None = None,
    config: ProjectionConfig | None = None,
) -> dict:
    """Run all audit checks. If entries is None, builds them from ``path``.

    Unlike ``load_entries``, an unreadable file raises here.

    Returns dict with:
        results: list of (section, name, expected, actual, delta, passed)
        summary: dict with counts
        entries: the processed entries checked
        fit: the TrendFit (or None)
        config: the ProjectionConfig used (currency format for reports)
    """
    cfg = resolve(config)
    if entries is None:
        if path is None:
            raise ValueError("run_all_checks needs entries or a path")
        entries = build_entries(read_rows(path), cfg)

    fit = fit_trend(entries, cfg)

    all_results: list[tuple] = []
    all_results.extend(check_ordering(entries))
    all_results.extend(check_calendar(entries))
    all_results.extend(check_donated(entries))
    all_results.extend(check_cumulative(entries))
    all_results.extend(check_projection(entries, fit))

    arith = [r for r in all_results
             if classify_check(r[0], r[1]) == "arithmetic"]
    quality = [r for r in all_results
               if classify_check(r[0], r[1]) == "data_quality"]

    return {
        "results": all_results,
        "summary": {
            "total": len(all_results),
            "entries": len(entries),
            "arithmetic_pass": sum(1 for r in arith if r[5]),
            "arithmetic_fail": sum(1 for r in arith if not r[5]),
            "data_quality_pass": sum(1 for r in quality if r[5]),
            "data_quality_fail": sum(1 for r in quality if not r[5]),
        },
        "entries": entries,
        "fit": fit,
        "config": cfg,
    }
