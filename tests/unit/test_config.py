"""Tests for the client settings helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from netspeak_client.config import DEFAULT_BASE_URL, Settings, get_settings


def test_defaults_point_at_public_service() -> None:
    settings = Settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == pytest.approx(10.0)
    assert settings.max_workers == 8


def test_empty_env_base_url_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Blank ``NETSPEAK_BASE_URL`` entries should not produce a client pointing nowhere."""
    monkeypatch.setenv("NETSPEAK_BASE_URL", "  ")
    assert Settings().base_url == DEFAULT_BASE_URL


def test_env_overrides_are_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETSPEAK_BASE_URL", "http://localhost:8080/search?")
    monkeypatch.setenv("NETSPEAK_TIMEOUT", "2.5")
    settings = get_settings()

    assert settings.base_url == "http://localhost:8080/search?"
    assert settings.timeout == pytest.approx(2.5)


def test_out_of_range_worker_count_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETSPEAK_MAX_WORKERS", "0")
    with pytest.raises(ValidationError):
        Settings()
