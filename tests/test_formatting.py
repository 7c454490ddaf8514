from donations.formatting import axis_label, axis_labels, format_currency
from donations.parser import parse_rows


def test_format_zero():
    assert format_currency(0) == "0 €"


def test_format_small_numbers_without_separators():
    assert format_currency(42) == "42 €"
    assert format_currency(999) == "999 €"


def test_format_thousands_with_apostrophe():
    assert format_currency(1000) == "1'000 €"
    assert format_currency(12345) == "12'345 €"


def test_format_millions():
    assert format_currency(1234567) == "1'234'567 €"


def test_format_rounds_decimals():
    assert format_currency(1234.56) == "1'235 €"
    assert format_currency(99.4) == "99 €"


def test_format_negative():
    assert format_currency(-5000) == "-5'000 €"


def test_format_tiny_negative_is_zero():
    assert format_currency(-0.3) == "0 €"


def test_format_custom_symbol_and_separator():
    assert format_currency(1234567, symbol="CHF", separator=",") == "1,234,567 CHF"


def test_axis_labels_annotate_year_boundaries(cfg):
    rows = [
        {"month": m, "received": "1", "needed": "1"}
        for m in ("2024-11", "2024-12", "2025-01", "2025-02")
    ]
    entries = parse_rows(rows, cfg)
    assert axis_labels(entries) == ["Nov 2024", "Dec", "Jan 2025", "Feb"]
    assert axis_label(entries[1]) == "Dec"
    assert axis_label(entries[1], first=True) == "Dec 2024"


def test_format_rounds_halves_away_from_zero():
    assert format_currency(2.5) == "3 €"
    assert format_currency(0.5) == "1 €"
    assert format_currency(1234.5) == "1'235 €"
    assert format_currency(-2.5) == "-3 €"
