"""Donation trend engine: pure Python, pandas only at the edges."""


def build_entries(*args, **kwargs):
    from donations.pipeline import build_entries as _build_entries
    return _build_entries(*args, **kwargs)


def process_entries(*args, **kwargs):
    from donations.pipeline import process_entries as _process_entries
    return _process_entries(*args, **kwargs)


def load_entries(*args, **kwargs):
    from donations.pipeline import load_entries as _load_entries
    return _load_entries(*args, **kwargs)


__all__ = ["build_entries", "load_entries", "process_entries"]
