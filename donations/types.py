"""Data shapes for the donation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


# ── Raw input ───────────────────────────────────────────────────

class RawRow(TypedDict, total=False):
    month: str      # "YYYY-MM"
    donors: str
    received: str
    pledged: str
    donated: str    # legacy schema: single amount instead of received/pledged
    needed: str


# ── Entry ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class Entry:
    """One reporting month, enriched step by step by the pipeline.

    Stages never mutate an Entry; they return copies via
    ``dataclasses.replace``.
    """
    period: int
    year: int
    month: int
    label: str
    donors: int
    received: float
    pledged: float
    donated: float
    needed: float
    has_donation: bool
    sum_donated: float = 0.0
    sum_needed: float = 0.0
    sum_projected_donations: float | None = None

    def to_dict(self) -> dict:
        """Convert to plain dict for DataFrame and JSON consumers."""
        return {
            "period": self.period,
            "year": self.year,
            "month": self.month,
            "label": self.label,
            "donors": self.donors,
            "received": self.received,
            "pledged": self.pledged,
            "donated": self.donated,
            "needed": self.needed,
            "has_donation": self.has_donation,
            "sum_donated": self.sum_donated,
            "sum_needed": self.sum_needed,
            "sum_projected_donations": self.sum_projected_donations,
        }


# ── Trend fit ───────────────────────────────────────────────────

@dataclass(frozen=True)
class TrendFit:
    """Linear trend estimated from the trailing donation window."""
    window_periods: tuple[int, ...]
    avg_donated: float
    reference_sum: float
    reference_period: float
    anchor: str

    @property
    def projection_start(self) -> int:
        return self.window_periods[0]

    def value_at(self, period: int) -> float:
        """Projected cumulative donations at a period index."""
        return self.reference_sum + self.avg_donated * (period - self.reference_period)

    def to_dict(self) -> dict:
        return {
            "window_periods": list(self.window_periods),
            "avg_donated": self.avg_donated,
            "reference_sum": self.reference_sum,
            "reference_period": self.reference_period,
            "anchor": self.anchor,
            "projection_start": self.projection_start,
        }
