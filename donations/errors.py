"""Exceptions raised while turning raw donation rows into entries."""

from __future__ import annotations


class DonationDataError(ValueError):
    """Base class for malformed donation input."""
    pass


class SchemaError(DonationDataError):
    """Raised when the input header lacks the required columns."""
    pass


class RowParseError(DonationDataError):
    """Raised when a single row cannot be parsed.

    Carries the row position (0-based, data rows only), the offending field
    and its raw value so the caller can point at the bad line.
    """

    def __init__(self, position: int | None, field: str, value: object, reason: str):
        self.position = position
        self.field = field
        self.value = value
        self.reason = reason
        where = f"row {position}" if position is not None else "row"
        super().__init__(f"{where}: invalid {field} {value!r} ({reason})")


class DuplicatePeriodError(DonationDataError):
    """Raised when two rows report the same month."""

    def __init__(self, period: int, month: str, positions: tuple[int, int]):
        self.period = period
        self.month = month
        self.positions = positions
        super().__init__(
            f"Month {month} appears twice (rows {positions[0]} and {positions[1]})"
        )
