"""Shared fixtures."""

import pytest

from pacecalc import config


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Give every test freshly loaded settings."""
    monkeypatch.setattr(config, "_settings", None)
