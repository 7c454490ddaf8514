"""Projector: trend of the last donation-bearing months, extrapolated.

The window is the last ``window_size`` entries with a donation (all of
them if there are fewer). The projected cumulative total is the straight
line with slope = mean monthly donation over the window, passing through
the anchor point:

    window_mean   (mean period, mean sum_donated) of the window
    window_start  (period, sum_donated) of the first window entry

Every entry from the first window period onwards gets
``sum_projected_donations``; earlier entries keep None.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from donations.config import ProjectionConfig, resolve
from donations.types import Entry, TrendFit

logger = logging.getLogger(__name__)


def donation_window(entries: Sequence[Entry], size: int) -> list[Entry]:
    """Last ``size`` donation-bearing entries, chronological."""
    bearing = [e for e in entries if e.has_donation]
    return bearing[-size:]


def fit_trend(
    entries: Sequence[Entry],
    config: ProjectionConfig | None = None,
) -> TrendFit | None:
    """Estimate the trend from aggregated, sorted entries.

    Returns None when no month carries a donation.
    """
    cfg = resolve(config)
    window = donation_window(entries, cfg.window_size)
    if not window:
        return None

    n = len(window)
    avg_donated = sum(e.donated for e in window) / n

    if cfg.anchor == "window_start":
        reference_sum = window[0].sum_donated
        reference_period = float(window[0].period)
    else:
        reference_sum = sum(e.sum_donated for e in window) / n
        reference_period = sum(e.period for e in window) / n

    return TrendFit(
        window_periods=tuple(e.period for e in window),
        avg_donated=avg_donated,
        reference_sum=reference_sum,
        reference_period=reference_period,
        anchor=cfg.anchor,
    )


def apply_trend(entries: Sequence[Entry], fit: TrendFit | None) -> list[Entry]:
    """Copy entries, setting the projection from ``fit.projection_start`` on."""
    if fit is None:
        return [replace(e, sum_projected_donations=None) for e in entries]
    start = fit.projection_start
    return [
        replace(e, sum_projected_donations=fit.value_at(e.period) if e.period >= start else None)
        for e in entries
    ]


def project(
    entries: Sequence[Entry],
    config: ProjectionConfig | None = None,
) -> list[Entry]:
    """Attach ``sum_projected_donations`` to the aggregated sequence."""
    fit = fit_trend(entries, config)
    if fit is None:
        logger.debug("No donation-bearing months in %d entries; projection skipped", len(entries))
    else:
        logger.debug(
            "Trend over periods %s: avg %.2f/month, anchor %s at (%.2f, %.2f)",
            fit.window_periods, fit.avg_donated, fit.anchor,
            fit.reference_period, fit.reference_sum,
        )
    return apply_trend(entries, fit)
