"""Pipeline configuration: loads config/projection.json."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path

from donations.periods import DEFAULT_BASE_YEAR

_CONFIG_DIR = Path(__file__).resolve().parent / "config"

ANCHORS = ("window_mean", "window_start")
DONATION_RULES = ("received_or_pledged", "received_only")


@lru_cache(maxsize=16)
def load_config(name: str) -> dict:
    """Load a JSON config file by name (without .json extension)."""
    path = _CONFIG_DIR / f"{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@dataclass(frozen=True)
class ProjectionConfig:
    """Policies for parsing and projecting donation data.

    anchor:
        ``window_mean``: line through the mean (period, sum_donated) of
        the window (centered fit).
        ``window_start``: line through the first window entry.
    donation_rule:
        ``received_or_pledged``: a month counts as donation-bearing when
        anything was received or pledged.
        ``received_only``: only received money counts.
    """
    base_year: int = DEFAULT_BASE_YEAR
    window_size: int = 3
    anchor: str = "window_mean"
    donation_rule: str = "received_or_pledged"
    currency_symbol: str = "€"
    thousands_separator: str = "'"

    def __post_init__(self):
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")
        if self.anchor not in ANCHORS:
            raise ValueError(f"Unknown anchor: {self.anchor!r}. Expected one of {ANCHORS}")
        if self.donation_rule not in DONATION_RULES:
            raise ValueError(
                f"Unknown donation_rule: {self.donation_rule!r}. "
                f"Expected one of {DONATION_RULES}"
            )

    @classmethod
    def load(cls, name: str = "projection") -> "ProjectionConfig":
        """Build from a JSON file, ignoring keys this class does not know."""
        data = load_config(name)
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def defaults(cls) -> "ProjectionConfig":
        return cls()

    def with_overrides(self, **overrides) -> "ProjectionConfig":
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(overrides)
        return ProjectionConfig(**values)


def resolve(config: ProjectionConfig | None) -> ProjectionConfig:
    """Return ``config`` or the one shipped in config/projection.json."""
    return config if config is not None else ProjectionConfig.load()
