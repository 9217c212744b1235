"""
tests.test_settings

Env-driven configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from contact_store.settings import Settings, get_settings


def test_defaults() -> None:
    s = Settings()
    assert s.cache_capacity == 50
    assert s.benchmark_sizes == [100, 500, 1000, 5000]


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CONTACT_STORE_CACHE_CAPACITY", "5")
    monkeypatch.setenv("CONTACT_STORE_ENV", "test")
    monkeypatch.setenv("CONTACT_STORE_BENCHMARK_SIZES", "[10, 20]")

    s = Settings()
    assert s.cache_capacity == 5
    assert s.env == "test"
    assert s.benchmark_sizes == [10, 20]


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(cache_capacity=0)


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


# --- Module Notes -----------------------------------------------------------
# get_settings() is cleared around tests that touch the cached instance.
