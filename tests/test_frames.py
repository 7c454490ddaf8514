import math

from donations.frames import (
    COLUMN_CHART_COLUMNS,
    PROJECTION_CHART_COLUMNS,
    column_chart_frame,
    entries_frame,
    projection_chart_frame,
)
from donations.pipeline import build_entries
from donations.value_tags import VTYPE_COLORS, ValueType


def _entries(cfg):
    rows = [
        {"month": "2024-12", "received": "0", "needed": "100"},
        {"month": "2025-01", "received": "50", "pledged": "10", "needed": "100"},
        {"month": "2025-02", "received": "70", "needed": "100"},
    ]
    return build_entries(rows, cfg)


def test_column_chart_frame(cfg):
    df = column_chart_frame(_entries(cfg))
    assert list(df.columns) == COLUMN_CHART_COLUMNS
    assert df["donated"].tolist() == [0, 60, 70]
    assert df["axis_label"].tolist() == ["Dec 2024", "Jan 2025", "Feb"]


def test_projection_chart_frame_missing_projection_is_nan(cfg):
    df = projection_chart_frame(_entries(cfg))
    assert list(df.columns) == PROJECTION_CHART_COLUMNS
    projected = df["sum_projected_donations"]
    assert math.isnan(projected.iloc[0])
    assert projected.notna().tolist() == [False, True, True]
    assert df["has_donation"].tolist() == [False, True, True]


def test_frames_are_tagged(cfg):
    df = projection_chart_frame(_entries(cfg))
    assert df.attrs["col_tags"]["sum_projected_donations"] == ValueType.PROJECTION
    assert df.attrs["col_units"]["sum_needed"] == "EUR"
    assert df.attrs["col_labels"]["sum_donated"] == "Cumulative donations"
    assert VTYPE_COLORS[df.attrs["col_tags"]["sum_projected_donations"]] == "#48AD9C"


def test_empty_frame_has_columns():
    df = entries_frame([])
    assert len(df) == 0
    assert "sum_projected_donations" in df.columns
    assert list(column_chart_frame([]).columns) == COLUMN_CHART_COLUMNS
