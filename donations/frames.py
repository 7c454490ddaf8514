"""DataFrames handed to the two chart renderers.

Column chart:      label, axis_label, period, received, pledged, donated, needed
Projection chart:  label, axis_label, period, sum_donated, sum_needed,
                   sum_projected_donations, has_donation

Missing projections are NaN; renderers select drawable points with
``df["sum_projected_donations"].notna()``.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from donations.formatting import axis_labels
from donations.types import Entry
from donations.value_tags import tag_dataframe

_ENTRY_COLUMNS = [
    "period", "year", "month", "label", "donors",
    "received", "pledged", "donated", "needed", "has_donation",
    "sum_donated", "sum_needed", "sum_projected_donations",
]

COLUMN_CHART_COLUMNS = [
    "label", "axis_label", "period", "received", "pledged", "donated", "needed",
]
PROJECTION_CHART_COLUMNS = [
    "label", "axis_label", "period", "sum_donated", "sum_needed",
    "sum_projected_donations", "has_donation",
]


def entries_frame(entries: Sequence[Entry]) -> pd.DataFrame:
    """All entry fields, one row per month, in sequence order."""
    df = pd.DataFrame([e.to_dict() for e in entries], columns=_ENTRY_COLUMNS)
    df["sum_projected_donations"] = df["sum_projected_donations"].astype(float)
    df["axis_label"] = axis_labels(list(entries))
    return tag_dataframe(df)


def column_chart_frame(entries: Sequence[Entry]) -> pd.DataFrame:
    return tag_dataframe(entries_frame(entries)[COLUMN_CHART_COLUMNS].copy())


def projection_chart_frame(entries: Sequence[Entry]) -> pd.DataFrame:
    return tag_dataframe(entries_frame(entries)[PROJECTION_CHART_COLUMNS].copy())
