"""Shared pytest fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of YEAR_DOTS_* variables in the environment."""
    for name in ("YEAR_DOTS_MAX_CANVAS", "YEAR_DOTS_CACHE_MAX_AGE", "YEAR_DOTS_SUPERSAMPLE"):
        monkeypatch.delenv(name, raising=False)
