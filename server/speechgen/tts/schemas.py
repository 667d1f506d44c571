"""Request/response models for the TTS endpoint and the Gemini reply."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from speechgen.tts.voices import DEFAULT_VOICE_ID


# ---------------------------------------------------------------------------
# Browser ↔ proxy
# ---------------------------------------------------------------------------


class SynthesisRequest(BaseModel):
    """Text-to-speech request posted by the browser form."""

    text: str = ""
    voice: str | None = DEFAULT_VOICE_ID
    language: str | None = "ko-KR"


class SynthesisResponse(BaseModel):
    success: Literal[True] = True
    audio: str = Field(description="Base64-encoded audio bytes")
    mimeType: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


# ---------------------------------------------------------------------------
# Gemini generateContent reply
#
# Every nested field is optional on the wire; absence resolves to an empty
# value so callers never index into missing structure.
# ---------------------------------------------------------------------------


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class InlineData(_WireModel):
    data: str = ""
    mime_type: str = Field(default="", alias="mimeType")


class Part(_WireModel):
    text: str | None = None
    inline_data: InlineData | None = Field(default=None, alias="inlineData")


class Content(_WireModel):
    parts: list[Part] = Field(default_factory=list)
    role: str | None = None


class Candidate(_WireModel):
    content: Content | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class GenerateContentResponse(_WireModel):
    candidates: list[Candidate] = Field(default_factory=list)

    def first_audio_part(self) -> InlineData | None:
        """Return the first non-empty ``audio/*`` inline payload of candidate 0."""
        if not self.candidates or self.candidates[0].content is None:
            return None
        for part in self.candidates[0].content.parts:
            inline = part.inline_data
            if inline is None or not inline.data:
                continue
            if inline.mime_type.lower().startswith("audio/"):
                return inline
        return None
