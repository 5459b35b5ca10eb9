"""Shared test fixtures for colorwrap."""

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the developer's own environment and config file out of every test."""
    monkeypatch.delenv("COLORWRAP_COLOR", raising=False)
    monkeypatch.delenv("COLORWRAP_QUOTE_MARK", raising=False)
    monkeypatch.setattr("colorwrap.config.CONFIG_FILE", tmp_path / "missing-config.json")
