"""Tests for settings and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from biodata import configure_logging
from biodata.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults match the documented behaviour."""
        monkeypatch.delenv("BIODATA_MAX_RESULTS", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.default_database == "nuccore"
        assert settings.max_results == 20
        assert settings.result_page_offset == 1000
        assert settings.sequence_path == Path("sequence.txt")
        assert settings.exit_on_fetch_error is False

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """BIODATA_* environment variables override defaults."""
        monkeypatch.setenv("BIODATA_MAX_RESULTS", "5")
        monkeypatch.setenv("BIODATA_EXIT_ON_FETCH_ERROR", "true")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.max_results == 5
        assert settings.exit_on_fetch_error is True

    def test_invalid_value_rejected(self) -> None:
        """Out-of-range values fail validation."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, max_results=0)  # type: ignore[call-arg]


def test_configure_logging_creates_log_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Logging goes to a file whose directory is created on demand."""
    captured: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    settings = Settings(
        _env_file=None,  # type: ignore[call-arg]
        log_file=tmp_path / "logs" / "biodata.log",
        log_level="debug",
    )
    configure_logging(settings)
    assert (tmp_path / "logs").is_dir()
    assert captured["filename"] == settings.log_file
    assert captured["level"] == logging.DEBUG
