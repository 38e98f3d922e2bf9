"""Tests for environment configuration of the default formatter."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from multierr import (
    MultierrSettings,
    append,
    clear_settings_cache,
    formatter_from_settings,
    get_default_formatter,
    get_settings,
    list_formatter,
    reset_default_formatter,
    set_default_formatter,
    titled_list_formatter,
)


# ═════════════════════════════════════════════════════════════════════════════
# Loading
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults() -> None:
    """Without configuration the bare list strategy is selected."""
    settings = get_settings()
    assert settings.format == "list"
    assert not settings.is_custom
    assert formatter_from_settings(settings) is list_formatter


def test_settings_singleton() -> None:
    """get_settings() is cached."""
    assert get_settings() is get_settings()


def test_titled_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """MULTIERR_FORMAT is case-insensitive and selects the titled strategy."""
    monkeypatch.setenv("MULTIERR_FORMAT", "Titled")
    monkeypatch.setenv("MULTIERR_TITLE", "batch failed:")
    err = append(None, ValueError("a"))
    assert str(err) == "batch failed:\n  - a"


def test_prefixed_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """MULTIERR_PREFIX feeds the prefixed strategy."""
    monkeypatch.setenv("MULTIERR_FORMAT", "prefixed")
    monkeypatch.setenv("MULTIERR_PREFIX", "> ")
    err = append(None, ValueError("a"), ValueError("b"))
    assert str(err) == "> a\n> b"


def test_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A .env file in the working directory is read."""
    (tmp_path / ".env").write_text("MULTIERR_FORMAT=prefixed\nMULTIERR_PREFIX=* \n")
    monkeypatch.chdir(tmp_path)
    assert get_settings().format == "prefixed"


@pytest.mark.parametrize("env", [
    {"MULTIERR_FORMAT": "titled"},
    {"MULTIERR_FORMAT": "prefixed"},
    {"MULTIERR_FORMAT": "prefixed", "MULTIERR_PREFIX": ""},
    {"MULTIERR_FORMAT": "table"},
])
def test_invalid_settings(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    """Mismatched or unknown strategies fail validation."""
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    with pytest.raises(ValidationError):
        MultierrSettings()


# ═════════════════════════════════════════════════════════════════════════════
# Default Formatter
# ═════════════════════════════════════════════════════════════════════════════


def test_invalid_settings_never_break_display(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture,
) -> None:
    """Bad configuration falls back to the list formatter and is logged once."""
    monkeypatch.setenv("MULTIERR_FORMAT", "titled")
    with caplog.at_level(logging.WARNING, logger="multierr.format"):
        assert str(append(None, ValueError("a"))) == "1 error occurred:\n  - a"
        assert str(append(None, ValueError("b"))) == "1 error occurred:\n  - b"
    assert get_default_formatter() is list_formatter
    warnings = [r for r in caplog.records if r.name == "multierr.format" and r.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_reset_retries_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """After fixing the environment, a reset picks up the new settings."""
    monkeypatch.setenv("MULTIERR_FORMAT", "titled")
    assert get_default_formatter() is list_formatter

    monkeypatch.setenv("MULTIERR_TITLE", "fixed:")
    clear_settings_cache()
    reset_default_formatter()
    assert str(append(None, ValueError("a"))) == "fixed:\n  - a"


def test_set_default_overrides_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """An explicit default wins until it is reset."""
    monkeypatch.setenv("MULTIERR_FORMAT", "prefixed")
    monkeypatch.setenv("MULTIERR_PREFIX", "> ")
    fmt = titled_list_formatter("mine")
    set_default_formatter(fmt)
    assert get_default_formatter() is fmt

    reset_default_formatter()
    assert str(append(None, ValueError("a"))) == "> a"
