"""Pipeline: parse → aggregate → project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from donations.aggregate import aggregate
from donations.config import ProjectionConfig, resolve
from donations.errors import DuplicatePeriodError
from donations.loader import read_rows
from donations.parser import parse_rows
from donations.projection import project
from donations.types import Entry

logger = logging.getLogger(__name__)


def check_unique_periods(entries: Sequence[Entry]) -> None:
    """Raise DuplicatePeriodError if two entries share a month."""
    seen: dict[int, int] = {}
    for i, e in enumerate(entries):
        if e.period in seen:
            raise DuplicatePeriodError(
                e.period, f"{e.year:04d}-{e.month:02d}", (seen[e.period], i),
            )
        seen[e.period] = i


def process_entries(
    entries: Iterable[Entry],
    config: ProjectionConfig | None = None,
) -> list[Entry]:
    """Sorted entries with running sums and projection. Input untouched."""
    return project(aggregate(entries), resolve(config))


def build_entries(
    rows: Iterable[Mapping[str, object]],
    config: ProjectionConfig | None = None,
) -> list[Entry]:
    """Raw rows in, chart-ready entries out.

    Zero rows give an empty list. A malformed row raises RowParseError and
    a repeated month raises DuplicatePeriodError; nothing is returned for
    the rest of the batch in either case.
    """
    cfg = resolve(config)
    entries = parse_rows(rows, cfg)
    check_unique_periods(entries)
    logger.debug("Parsed %d rows", len(entries))
    return process_entries(entries, cfg)


def load_entries(
    path: str | Path,
    config: ProjectionConfig | None = None,
) -> list[Entry]:
    """Read a TSV file and build entries.

    An unreadable file is logged and yields [] so the charts render empty;
    a readable file with bad content still raises.
    """
    try:
        rows = read_rows(path)
    except OSError as e:
        logger.error("Error reading the file %s: %s", path, e)
        return []
    return build_entries(rows, config)
