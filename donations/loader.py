"""TSV reader for the monthly donation table."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from donations.errors import SchemaError
from donations.types import RawRow

RICH_COLUMNS = ("month", "donors", "received", "pledged", "needed")
LEGACY_COLUMNS = ("month", "donors", "donated", "needed")


def validate_header(columns: list[str]) -> None:
    """Require month + needed and an amount column (received or donated)."""
    present = set(columns)
    if {"month", "needed"} <= present and ("received" in present or "donated" in present):
        return
    raise SchemaError(
        f'Invalid header, expected: "{",".join(RICH_COLUMNS)}" '
        f'or "{",".join(LEGACY_COLUMNS)}" but found "{",".join(columns)}"'
    )


def frame_to_rows(df: pd.DataFrame) -> list[RawRow]:
    """String cells, whitespace-trimmed, one dict per data row."""
    df = df.rename(columns=lambda c: str(c).strip())
    validate_header(list(df.columns))
    return [
        {key: "" if pd.isna(value) else str(value).strip() for key, value in record.items()}
        for record in df.to_dict(orient="records")
    ]


def read_rows(path: str | Path) -> list[RawRow]:
    """Read a tab-separated donation file.

    Raises:
        OSError: the file cannot be opened.
        SchemaError: the header is missing required columns, a row has
            more cells than the header, or the file is not UTF-8 text.
    """
    try:
        df = pd.read_csv(
            path,
            sep="\t",
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        raise SchemaError(f"{path}: file is empty, no header found") from None
    except pd.errors.ParserError as e:
        raise SchemaError(f"{path}: malformed table: {e}") from e
    except UnicodeDecodeError as e:
        raise SchemaError(f"{path}: not UTF-8 text: {e}") from e
    return frame_to_rows(df)
