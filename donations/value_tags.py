"""Value type tagging for chart DataFrames.

Each column belongs to one ValueType (what it IS), has a unit and a
human-readable label. Renderers read these from ``df.attrs`` to pick
colors, axis formats and legends without hard-coding column names.

Usage:
    from donations.value_tags import tag_dataframe, VTYPE_COLORS

    df = tag_dataframe(pd.DataFrame([e.to_dict() for e in entries]))
    color = VTYPE_COLORS[df.attrs["col_tags"]["donated"]]
"""

from __future__ import annotations

from enum import Enum

import pandas as pd


class ValueType(str, Enum):
    """Category of a column in a donation frame."""
    PERIOD      = "period"       # period index, year, month
    LABEL       = "label"        # display text
    COUNT       = "count"        # donors
    DONATION    = "donation"     # monthly money in
    NEED        = "need"         # monthly expense target
    CUMULATIVE  = "cumulative"   # running totals
    PROJECTION  = "projection"   # projected running total
    FLAG        = "flag"         # booleans
    OTHER       = "other"


# Dashboard palette.
COLOR_RED = "#AD4848"
COLOR_GREEN = "#48AD9C"
COLOR_DARK_GREEN = "#2A7B6D"

VTYPE_COLORS: dict[ValueType, str] = {
    ValueType.DONATION:   COLOR_GREEN,
    ValueType.NEED:       COLOR_RED,
    ValueType.CUMULATIVE: COLOR_DARK_GREEN,
    ValueType.PROJECTION: COLOR_GREEN,
    ValueType.PERIOD:     "#757575",
    ValueType.LABEL:      "#757575",
    ValueType.COUNT:      "#37474f",
    ValueType.FLAG:       "#9e9e9e",
    ValueType.OTHER:      "#9e9e9e",
}


# column → (ValueType, unit, label)
_COLUMN_TAGS: dict[str, tuple[ValueType, str, str]] = {
    "period":                  (ValueType.PERIOD,     "",    "Period"),
    "year":                    (ValueType.PERIOD,     "",    "Year"),
    "month":                   (ValueType.PERIOD,     "",    "Month"),
    "label":                   (ValueType.LABEL,      "",    "Month"),
    "axis_label":              (ValueType.LABEL,      "",    "Month"),
    "donors":                  (ValueType.COUNT,      "",    "Donors"),
    "received":                (ValueType.DONATION,   "EUR", "Received"),
    "pledged":                 (ValueType.DONATION,   "EUR", "Pledged"),
    "donated":                 (ValueType.DONATION,   "EUR", "Donated"),
    "needed":                  (ValueType.NEED,       "EUR", "Needed"),
    "has_donation":            (ValueType.FLAG,       "",    "Has donation"),
    "sum_donated":             (ValueType.CUMULATIVE, "EUR", "Cumulative donations"),
    "sum_needed":              (ValueType.CUMULATIVE, "EUR", "Cumulative needs"),
    "sum_projected_donations": (ValueType.PROJECTION, "EUR", "Projected donations"),
}


def tag_column(col_name: str) -> tuple[ValueType, str, str]:
    return _COLUMN_TAGS.get(col_name, (ValueType.OTHER, "", col_name))


def tag_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """Attach value type tags, units and labels to a DataFrame's attrs.

    Non-destructive: returns the same DataFrame with attrs populated.
    """
    tags = {col: tag_column(col) for col in df.columns}
    df.attrs["col_tags"] = {col: vtype for col, (vtype, _, _) in tags.items()}
    df.attrs["col_units"] = {col: unit for col, (_, unit, _) in tags.items()}
    df.attrs["col_labels"] = {col: label for col, (_, _, label) in tags.items()}
    return df
