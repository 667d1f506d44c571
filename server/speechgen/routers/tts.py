"""POST /api/tts — synthesize text through Gemini and return base64 audio."""

from __future__ import annotations

import base64
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from speechgen.config import settings
from speechgen.tts.gemini import (
    GeminiSpeechClient,
    SpeechConfigError,
    SpeechNoAudioError,
    SpeechProviderError,
)
from speechgen.tts.schemas import ErrorResponse, SynthesisRequest, SynthesisResponse
from speechgen.tts.voices import resolve_voice
from speechgen.tts.wav import is_raw_pcm, pcm_sample_rate, pcm_to_wav

log = logging.getLogger(__name__)

router = APIRouter()

MSG_EMPTY_TEXT = "텍스트를 입력해주세요."
MSG_PROVIDER_ERROR = "TTS 생성 중 오류가 발생했습니다."
MSG_NO_AUDIO = "오디오 데이터를 찾을 수 없습니다."
MSG_SERVER_ERROR = "서버 오류가 발생했습니다."


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(body.model_dump(exclude_none=True), status_code=status_code)


@router.post(
    "/api/tts",
    response_model=SynthesisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def synthesize_speech(
    req: SynthesisRequest, request: Request
) -> SynthesisResponse | JSONResponse:
    """Read ``text`` aloud with the requested voice.

    Raw PCM from the provider is wrapped in a WAV container so the browser
    can play it; other audio formats pass through unchanged.
    """
    text = req.text.strip()
    if not text:
        return error_response(400, MSG_EMPTY_TEXT)

    try:
        speech: GeminiSpeechClient = request.app.state.speech
        voice_name = resolve_voice(req.voice)
        log.info(
            "TTS request: %d chars, voice=%s (%s), language=%s",
            len(text),
            voice_name,
            req.voice,
            req.language,
        )
        result = await speech.synthesize(text, voice_name)

        audio = result.audio
        mime_type = result.mime_type
        if is_raw_pcm(mime_type):
            rate = pcm_sample_rate(mime_type, default=settings.tts_sample_rate)
            audio = pcm_to_wav(audio, sample_rate=rate)
            mime_type = "audio/wav"
    except SpeechProviderError as exc:
        return error_response(500, MSG_PROVIDER_ERROR, exc.details or str(exc))
    except SpeechNoAudioError:
        return error_response(500, MSG_NO_AUDIO)
    except SpeechConfigError as exc:
        log.error("TTS unavailable: %s", exc)
        return error_response(500, MSG_SERVER_ERROR, str(exc))
    except Exception as exc:
        log.exception("Unexpected TTS failure")
        return error_response(500, MSG_SERVER_ERROR, str(exc))

    return SynthesisResponse(
        audio=base64.b64encode(audio).decode("ascii"),
        mimeType=mime_type,
    )
