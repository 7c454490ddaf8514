from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from donations.config import ProjectionConfig

settings.register_profile(
    "donations_stable",
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)

settings.load_profile("donations_stable")


SAMPLE_ROWS = [
    {"month": "2025-01", "donors": "5", "received": "600", "pledged": "200", "needed": "1000"},
    {"month": "2025-02", "donors": "3", "received": "800", "pledged": "0", "needed": "1000"},
    {"month": "2025-03", "donors": "4", "received": "900", "pledged": "100", "needed": "1000"},
]


@pytest.fixture()
def sample_rows() -> list[dict]:
    return [dict(r) for r in SAMPLE_ROWS]


@pytest.fixture()
def cfg() -> ProjectionConfig:
    return ProjectionConfig.defaults()


@pytest.fixture()
def write_tsv(tmp_path):
    """Factory writing a tab-separated file under tmp_path."""
    def _write(header: list[str], rows: list[list[object]], name: str = "donations.tsv"):
        path = tmp_path / name
        lines = ["\t".join(header)] + ["\t".join(str(c) for c in row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
