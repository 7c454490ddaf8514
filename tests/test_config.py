import pytest

from donations.config import ProjectionConfig, load_config


def test_shipped_config_matches_defaults():
    assert ProjectionConfig.load() == ProjectionConfig.defaults()


def test_shipped_config_keys():
    data = load_config("projection")
    assert data["window_size"] == 3
    assert data["anchor"] == "window_mean"


def test_invalid_anchor():
    with pytest.raises(ValueError, match="anchor"):
        ProjectionConfig(anchor="median")


def test_invalid_donation_rule():
    with pytest.raises(ValueError, match="donation_rule"):
        ProjectionConfig(donation_rule="anything")


def test_invalid_window_size():
    with pytest.raises(ValueError):
        ProjectionConfig(window_size=0)


def test_with_overrides():
    cfg = ProjectionConfig.defaults().with_overrides(anchor="window_start", base_year=2020)
    assert cfg.anchor == "window_start"
    assert cfg.base_year == 2020
    assert cfg.window_size == 3
