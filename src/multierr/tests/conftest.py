"""Shared fixtures: isolate tests from the global default formatter and settings."""

from pathlib import Path

import pytest

from multierr import clear_settings_cache, reset_default_formatter


@pytest.fixture(autouse=True)
def clean_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> object:
    """Reset the default formatter and settings cache around each test.

    Runs from an empty directory so no .env file leaks into settings.
    """
    for name in ("MULTIERR_FORMAT", "MULTIERR_TITLE", "MULTIERR_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    reset_default_formatter()
    yield
    clear_settings_cache()
    reset_default_formatter()
