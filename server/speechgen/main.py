"""Speech proxy server entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from importlib import resources

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from speechgen import __version__
from speechgen.config import settings
from speechgen.routers.tts import MSG_EMPTY_TEXT, error_response
from speechgen.routers.tts import router as tts_router
from speechgen.tts.gemini import GeminiSpeechClient

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open/close the shared Gemini HTTP client."""
    speech = GeminiSpeechClient()
    await speech.start()
    app.state.speech = speech
    if not speech.api_key_configured:
        log.warning("GEMINI_API_KEY is not set; /api/tts will fail until it is")
    else:
        log.info("Gemini speech ready (model=%s)", speech.model_name)

    yield

    await speech.close()


app = FastAPI(
    title="Gemini TTS Speech Generator",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tts_router)


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are client input errors, reported like a missing text.
    return error_response(400, MSG_EMPTY_TEXT)


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Browser form for entering text and playing back the result."""
    page = resources.files("speechgen").joinpath("static/index.html")
    return HTMLResponse(page.read_text(encoding="utf-8"))


@app.get("/health")
async def health(request: Request) -> JSONResponse:
    """Liveness / readiness check."""
    speech: GeminiSpeechClient | None = getattr(request.app.state, "speech", None)
    ok = speech is not None and await speech.health_check()
    return JSONResponse(
        {
            "status": "ok" if ok else "degraded",
            "model": speech.model_name if speech is not None else settings.gemini_model,
            "api_key_configured": bool(speech and speech.api_key_configured),
            "speech": speech.debug_snapshot() if speech is not None else None,
        },
        status_code=200 if ok else 503,
    )


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )
    uvicorn.run(
        "speechgen.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
