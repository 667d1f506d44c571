"""Server configuration with environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

try:
    from dotenv import load_dotenv

    load_dotenv(override=False)
except Exception:
    # Optional dependency; env vars still work without .env loading.
    pass


_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
_DEFAULT_MODEL = "gemini-2.5-flash-preview-tts"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_list(name: str, default: str) -> list[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(slots=True)
class Settings:
    """Speech proxy settings. Override any field via environment variable."""

    gemini_api_key: str = os.environ.get("GEMINI_API_KEY", "").strip()
    gemini_base_url: str = os.environ.get("GEMINI_BASE_URL", _DEFAULT_BASE_URL)
    gemini_model: str = os.environ.get("GEMINI_TTS_MODEL", _DEFAULT_MODEL)
    gemini_timeout_s: float = float(os.environ.get("GEMINI_TIMEOUT_S", "30.0"))
    tts_sample_rate: int = int(os.environ.get("TTS_SAMPLE_RATE", "24000"))
    cors_origins: list[str] = field(
        default_factory=lambda: _env_list("CORS_ORIGINS", "*")
    )
    log_level: str = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    host: str = os.environ.get("SERVER_HOST", "0.0.0.0")
    port: int = int(os.environ.get("SERVER_PORT", "8787"))

    def __post_init__(self) -> None:
        self.log_level = self.log_level.strip().upper()
        if not self.gemini_base_url.startswith(("http://", "https://")):
            raise ValueError("GEMINI_BASE_URL must be an http(s) URL")
        if not self.gemini_model.strip():
            raise ValueError("GEMINI_TTS_MODEL must not be empty")
        if self.gemini_timeout_s <= 0.0:
            raise ValueError("GEMINI_TIMEOUT_S must be > 0")
        if not (8000 <= self.tts_sample_rate <= 96000):
            raise ValueError("TTS_SAMPLE_RATE must be between 8000 and 96000")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                "LOG_LEVEL must be one of: " + ", ".join(sorted(_LOG_LEVELS))
            )
        if not (1 <= self.port <= 65535):
            raise ValueError("SERVER_PORT must be between 1 and 65535")


settings = Settings()
