"""Thin wrapper around the DeepSeek chat-completion API (OpenAI-compatible)."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, TypeVar

from openai import AsyncOpenAI
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from engine.errors import EmptyResponseError, ResponseFormatError

logger = logging.getLogger("wenzhai.llm")

DEEPSEEK_BASE_URL = "https://api.deepseek.com"
DEEPSEEK_MODEL = "deepseek-chat"
MAX_RETRIES = 3
RETRY_DELAY = 1.0  # seconds

T = TypeVar("T")


def build_client(api_key: str, base_url: str = DEEPSEEK_BASE_URL) -> AsyncOpenAI:
    """Return an async client bound to *base_url*."""
    return AsyncOpenAI(api_key=api_key, base_url=base_url)


async def retry_operation(
    operation: Callable[[], Awaitable[T]],
    *,
    attempts: int = MAX_RETRIES,
    delay: float = RETRY_DELAY,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run *operation* up to *attempts* times with linear backoff.

    After failed attempt ``k`` the wait is ``delay * k``. Every exception
    triggers a retry; the last one is re-raised unchanged.
    """
    retrying = AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_incrementing(start=delay, increment=delay),
        retry=retry_if_exception_type(Exception),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
        sleep=sleep,
    )
    return await retrying(operation)


async def chat_completion(
    client: AsyncOpenAI,
    model: str,
    system_prompt: str,
    user_message: str,
    *,
    response_format: dict[str, Any] | None = None,
) -> str:
    """Send a chat-completion request and return the assistant's text reply.

    Parameters
    ----------
    client : AsyncOpenAI
        Handle bound to the provider's base URL.
    model : str
        Model identifier, e.g. ``deepseek-chat``.
    system_prompt : str
        The system-level instruction.
    user_message : str
        The user-level content.
    response_format : dict, optional
        If supplied, passed as ``response_format`` to the API (e.g. JSON mode).

    Raises
    ------
    EmptyResponseError
        When the response carries no choices or no text.
    """
    kwargs: dict[str, Any] = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ],
    }
    if response_format is not None:
        kwargs["response_format"] = response_format

    logger.debug("Requesting completion model=%s json=%s", model, response_format is not None)
    response = await client.chat.completions.create(**kwargs)
    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise EmptyResponseError("LLM returned empty content.")
    return content


def parse_json_object(raw: str) -> dict[str, Any]:
    """Parse *raw* as a JSON object, wrapping decode failures."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.debug("Failed to parse LLM JSON: %s\nRaw: %s", exc, raw[:500])
        raise ResponseFormatError(f"Failed to parse summary result: {exc}") from exc
    if not isinstance(data, dict):
        raise ResponseFormatError("Failed to parse summary result: expected a JSON object")
    return data
