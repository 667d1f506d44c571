"""Async client for the Gemini ``generateContent`` endpoint in audio mode."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from speechgen.config import settings
from speechgen.tts.schemas import GenerateContentResponse

log = logging.getLogger(__name__)

# Without an explicit instruction the model may answer the text as a prompt
# instead of reading it aloud.
READ_ALOUD_PREFIX = "Read this: "


class SpeechError(RuntimeError):
    """Base error for speech provider failures."""


class SpeechConfigError(SpeechError):
    """Raised when the provider credential is not configured."""


class SpeechProviderError(SpeechError):
    """Raised when the provider call fails or answers with a non-2xx status."""

    def __init__(
        self, message: str, *, status_code: int | None = None, details: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class SpeechNoAudioError(SpeechError):
    """Raised when a successful reply carries no usable audio payload."""


@dataclass(frozen=True, slots=True)
class SynthesizedAudio:
    audio: bytes
    mime_type: str


def frame_text(text: str) -> str:
    """Wrap user text in the imperative instruction sent to the model."""
    return f"{READ_ALOUD_PREFIX}{text}"


def build_request_body(text: str, voice_name: str) -> dict:
    return {
        "contents": [{"parts": [{"text": frame_text(text)}]}],
        "generationConfig": {
            "responseModalities": ["AUDIO"],
            "speechConfig": {
                "voiceConfig": {
                    "prebuiltVoiceConfig": {"voiceName": voice_name},
                },
            },
        },
    }


class GeminiSpeechClient:
    """Thin async wrapper around Gemini speech generation."""

    def __init__(
        self,
        api_key: str = settings.gemini_api_key,
        base_url: str = settings.gemini_base_url,
        model: str = settings.gemini_model,
        timeout_s: float = settings.gemini_timeout_s,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = httpx.Timeout(timeout_s, connect=5.0)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def api_key_configured(self) -> bool:
        return bool(self._api_key)

    async def start(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def health_check(self) -> bool:
        """Return True if the client is started and has a credential."""
        return self._client is not None and self.api_key_configured

    async def synthesize(self, text: str, voice_name: str) -> SynthesizedAudio:
        """Issue one generateContent call and return the decoded audio part.

        Raises:
            SpeechConfigError: if no API key is configured.
            SpeechProviderError: on transport failure or a non-2xx reply.
            SpeechNoAudioError: if the reply holds no decodable audio.
        """
        if not self._api_key:
            raise SpeechConfigError("GEMINI_API_KEY is not configured")
        assert self._client is not None

        path = f"/models/{self._model}:generateContent"
        try:
            resp = await self._client.post(
                path,
                json=build_request_body(text, voice_name),
                headers={"x-goog-api-key": self._api_key},
            )
        except httpx.HTTPError as exc:
            log.error("Gemini request failed: %s", exc)
            raise SpeechProviderError(
                "Gemini request failed", details=str(exc) or type(exc).__name__
            ) from exc

        if resp.is_error:
            log.error("Gemini API error %d: %s", resp.status_code, resp.text)
            raise SpeechProviderError(
                f"Gemini returned HTTP {resp.status_code}",
                status_code=resp.status_code,
                details=resp.text,
            )

        try:
            reply = GenerateContentResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            log.warning("Unparseable Gemini reply: %s", exc)
            raise SpeechNoAudioError("reply is not a generateContent payload") from exc

        inline = reply.first_audio_part()
        if inline is None:
            log.warning("Gemini reply carried no audio part")
            raise SpeechNoAudioError("no audio part in reply")

        try:
            audio = base64.b64decode(inline.data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise SpeechNoAudioError("audio part is not valid base64") from exc

        log.debug("Gemini returned %d bytes of %s", len(audio), inline.mime_type)
        return SynthesizedAudio(audio=audio, mime_type=inline.mime_type)

    def debug_snapshot(self) -> dict:
        return {
            "provider": "gemini",
            "model": self._model,
            "api_key_configured": self.api_key_configured,
            "started": self._client is not None,
        }
