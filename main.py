"""Wenzhai — content summarization service.

FastAPI application entry-point.
Designed to run as an internal service consumed by the publishing pipeline.
"""

from __future__ import annotations

import logging
import secrets
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import SettingsConfigStore, settings
from engine.errors import (
    ConfigurationError,
    EmptyResponseError,
    InvalidInputError,
    ResponseFormatError,
)
from engine.summarizer import DeepseekSummarizer, create_summarizer
from schemas.request import SummarizeRequest, TitleRequest
from schemas.response import ErrorResponse, Summary, TitleResponse

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("wenzhai")

VERSION = "0.1.0"

_summarizer: DeepseekSummarizer | None = None


async def _load_summarizer() -> None:
    """Build the summarizer from settings. Called once at startup."""
    global _summarizer
    _summarizer = await create_summarizer(
        SettingsConfigStore(settings),
        base_url=settings.deepseek_base_url,
        model=settings.deepseek_model,
        max_retries=settings.max_retries,
        retry_delay=settings.retry_delay,
    )


def _get_summarizer() -> DeepseekSummarizer:
    if _summarizer is None:
        raise HTTPException(status_code=503, detail="Summarizer not configured")
    return _summarizer


def _to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, ConfigurationError):
        return HTTPException(status_code=503, detail=str(exc))
    if isinstance(exc, (EmptyResponseError, ResponseFormatError)):
        return HTTPException(status_code=502, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


# ── Internal-token auth dependency ─────────────────────────────────────

async def verify_internal_token(
    x_internal_token: str | None = Header(default=None),
) -> None:
    """Reject requests that don't carry the shared internal token.

    Skipped when ``INTERNAL_TOKEN`` is not configured (dev mode).
    """
    expected = settings.internal_token
    if not expected:
        return
    if not x_internal_token or not secrets.compare_digest(x_internal_token, expected):
        raise HTTPException(status_code=401, detail="Invalid or missing internal token.")


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    logger.info(
        "Wenzhai starting — model=%s base_url=%s auth=%s",
        settings.deepseek_model,
        settings.deepseek_base_url,
        "enabled" if settings.internal_token else "disabled (dev)",
    )
    try:
        await _load_summarizer()
    except ConfigurationError as exc:
        logger.warning("Summarizer unavailable — /summarize and /title will answer 503: %s", exc)
    yield
    logger.info("Wenzhai shutting down.")


# ── App ────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Wenzhai",
    description="Expands, titles and scores content for the publishing pipeline.",
    version=VERSION,
    lifespan=lifespan,
)

_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ERROR_RESPONSES = {
    401: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


# ── Routes ─────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "engine": "wenzhai",
        "version": VERSION,
        "summarizer_ready": _summarizer is not None and _summarizer.ready,
    }


@app.post(
    "/summarize",
    response_model=Summary,
    responses=_ERROR_RESPONSES,
    summary="Expand, title and score content",
    dependencies=[Depends(verify_internal_token)],
)
async def summarize(payload: SummarizeRequest) -> Summary:
    summarizer = _get_summarizer()
    options = {
        "language": payload.language or settings.summary_language,
        "min_length": payload.min_length or settings.summary_min_length,
    }
    try:
        return await summarizer.summarize(payload.content, options)
    except Exception as exc:
        logger.exception("Summarize failed")
        raise _to_http_error(exc) from exc


@app.post(
    "/title",
    response_model=TitleResponse,
    responses=_ERROR_RESPONSES,
    summary="Pick a short title for content",
    dependencies=[Depends(verify_internal_token)],
)
async def title(payload: TitleRequest) -> TitleResponse:
    summarizer = _get_summarizer()
    options = {"language": payload.language or settings.summary_language}
    try:
        return TitleResponse(title=await summarizer.generate_title(payload.content, options))
    except Exception as exc:
        logger.exception("Title generation failed")
        raise _to_http_error(exc) from exc


# ── Dev runner ─────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=True,
    )
