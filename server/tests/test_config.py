"""Configuration validation tests."""

from __future__ import annotations

import pytest

from speechgen.config import Settings


def test_settings_defaults_are_valid() -> None:
    settings = Settings(gemini_api_key="")
    assert settings.tts_sample_rate == 24000
    assert settings.gemini_base_url.startswith("https://")


def test_settings_reject_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="GEMINI_TIMEOUT_S must be > 0"):
        Settings(gemini_timeout_s=0.0)


def test_settings_reject_out_of_range_sample_rate() -> None:
    with pytest.raises(ValueError, match="TTS_SAMPLE_RATE"):
        Settings(tts_sample_rate=1000)


def test_settings_reject_non_http_base_url() -> None:
    with pytest.raises(ValueError, match="GEMINI_BASE_URL"):
        Settings(gemini_base_url="ftp://example.com")


def test_settings_normalize_log_level() -> None:
    assert Settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="chatty")


def test_settings_read_environment(monkeypatch) -> None:
    import importlib

    from speechgen import config

    monkeypatch.setenv("GEMINI_API_KEY", "  from-env  ")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    reloaded = importlib.reload(config)
    try:
        assert reloaded.settings.gemini_api_key == "from-env"
        assert reloaded.settings.cors_origins == ["http://a.test", "http://b.test"]
    finally:
        monkeypatch.delenv("GEMINI_API_KEY")
        monkeypatch.delenv("CORS_ORIGINS")
        importlib.reload(config)
