"""Voice identifier → Gemini prebuilt voice name."""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_VOICE_ID = "ko-KR-Standard-A"
DEFAULT_PROVIDER_VOICE = "Kore"

# Catalog names the browser UI offers map to themselves.
PROVIDER_VOICES: tuple[str, ...] = ("Puck", "Charon", "Kore", "Fenrir", "Aoede")

VOICE_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        "ko-KR-Standard-A": "Kore",
        "ko-KR-Standard-B": "Aoede",
        "ko-KR-Standard-C": "Charon",
        "ko-KR-Standard-D": "Fenrir",
        "ko-KR-Wavenet-A": "Kore",
        "ko-KR-Wavenet-B": "Aoede",
        "ko-KR-Wavenet-C": "Puck",
        "ko-KR-Wavenet-D": "Charon",
        "en-US-Standard-A": "Puck",
        "en-US-Standard-C": "Aoede",
        "en-US-Standard-D": "Charon",
        "en-US-Standard-E": "Kore",
        "ja-JP-Standard-A": "Aoede",
        "ja-JP-Standard-C": "Fenrir",
        "zh-CN-Standard-A": "Kore",
        "zh-CN-Standard-B": "Puck",
        **{name: name for name in PROVIDER_VOICES},
    }
)


def resolve_voice(identifier: str | None) -> str:
    """Map a requested voice to a provider voice; unknown ids get the default."""
    if not identifier:
        return DEFAULT_PROVIDER_VOICE
    return VOICE_MAP.get(identifier.strip(), DEFAULT_PROVIDER_VOICE)
