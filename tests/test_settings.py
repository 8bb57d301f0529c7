"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from cutout.config.settings import REMOVE_BG_ENDPOINT, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # setenv first so monkeypatch restores variables the .env loader may add.
    for name in ("REMOVE_BG_API_KEY", "REMOVE_BG_ENDPOINT", "REMOVE_BG_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_without_environment() -> None:
    settings = get_settings()

    assert settings.remove_bg_api_key == ""
    assert settings.remove_bg_endpoint == REMOVE_BG_ENDPOINT
    assert settings.request_timeout == 60.0


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REMOVE_BG_API_KEY", "env-key")
    monkeypatch.setenv("REMOVE_BG_TIMEOUT", "12.5")

    settings = get_settings()

    assert settings.remove_bg_api_key == "env-key"
    assert settings.request_timeout == 12.5


def test_env_file_does_not_override_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\nREMOVE_BG_API_KEY=file-key\nLOG_LEVEL=DEBUG\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = get_settings()

    assert settings.remove_bg_api_key == "file-key"
    assert settings.log_level == "WARNING"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
