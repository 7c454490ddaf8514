"""Audit report formatter -- JSON + text output."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from donations.config import ProjectionConfig
from donations.formatting import format_currency
from audit.checks import classify_check


def _verdict(summary: dict) -> str:
    return "CONSISTENT" if summary["arithmetic_fail"] == 0 else "ARITHMETIC_ERRORS"


def write_json_report(audit_data: dict, output_path: str | Path) -> Path:
    """Write audit results to JSON file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    results = audit_data["results"]
    summary = audit_data["summary"]
    fit = audit_data.get("fit")

    report = {
        "timestamp": datetime.now().isoformat(),
        "summary": summary,
        "verdict": _verdict(summary),
        "trend": fit.to_dict() if fit is not None else None,
        "checks": [
            {
                "section": r[0],
                "name": r[1],
                "expected": r[2],
                "actual": r[3],
                "delta": r[4],
                "passed": r[5],
                "category": classify_check(r[0], r[1]),
            }
            for r in results
        ],
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)

    return path


def format_text_report(audit_data: dict) -> str:
    """Format audit results as human-readable text.

    Passing checks are only counted; failures are listed one per line.
    """
    summary = audit_data["summary"]
    fit = audit_data.get("fit")
    cfg = audit_data.get("config") or ProjectionConfig.defaults()

    def money(value: float) -> str:
        return format_currency(value, cfg.currency_symbol, cfg.thousands_separator)

    lines = ["DONATION TRENDS - AUDIT REPORT", "=" * 72,
             f"  Months:  {summary['entries']}"]
    if fit is None:
        lines.append("  Trend:   none (no month with donations)")
    else:
        lines.append(
            f"  Trend:   {money(fit.avg_donated)} / month over periods "
            f"{', '.join(str(p) for p in fit.window_periods)} (anchor: {fit.anchor})")
    lines.append("")

    for r in audit_data["results"]:
        if r[5]:
            continue
        if classify_check(r[0], r[1]) == "data_quality":
            lines.append(f"  GAP   {r[1]}: {max(int(r[3]) - 1, 0)} month(s) missing")
        else:
            lines.append(
                f"  FAIL  {r[0]} {r[1]}: expected {r[2]:,.2f}, "
                f"actual {r[3]:,.2f} (delta {r[4]:,.2f})")

    lines.append(
        f"  Checks: {summary['total']} "
        f"({summary['arithmetic_fail']} arithmetic failure(s), "
        f"{summary['data_quality_fail']} calendar gap(s))")
    verdict = ("DATASET IS CONSISTENT" if summary["arithmetic_fail"] == 0
               else "DATASET HAS ARITHMETIC ERRORS")
    lines.append(f"  VERDICT: {verdict}")
    return "\n".join(lines)
