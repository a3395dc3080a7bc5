"""Pytest fixtures for error-value tests."""
from __future__ import annotations

import json

import pytest


@pytest.fixture(autouse=True)
def _reset_config_cache(monkeypatch):
    """Clear the load_config LRU cache and unset ERROR_VALUE_CONFIG_PATH around every test.

    This ensures each test gets a fresh config load, so a file written by one
    test never leaks into the next.
    """
    from error_value.config import load_config
    monkeypatch.delenv("ERROR_VALUE_CONFIG_PATH", raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def write_config(monkeypatch, tmp_path):
    """Write *data* as JSON and point ERROR_VALUE_CONFIG_PATH at it."""

    def _write(data, name: str = "error_value.json") -> str:
        cfg_file = tmp_path / name
        cfg_file.write_text(data if isinstance(data, str) else json.dumps(data))
        monkeypatch.setenv("ERROR_VALUE_CONFIG_PATH", str(cfg_file))
        return str(cfg_file)

    return _write
