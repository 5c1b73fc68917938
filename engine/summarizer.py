"""Summarizer client — expands, titles and scores content via DeepSeek."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from openai import AsyncOpenAI

from config import ConfigStore
from engine.errors import ConfigurationError, InvalidInputError, ResponseFormatError
from prompts.system_prompt import (
    SUMMARY_SYSTEM_PROMPT,
    SUMMARY_USER_PROMPT,
    TITLE_SYSTEM_PROMPT,
    TITLE_USER_PROMPT,
)
from schemas.request import SummarizeOptions
from schemas.response import Summary
from services.llm_service import (
    DEEPSEEK_BASE_URL,
    DEEPSEEK_MODEL,
    MAX_RETRIES,
    RETRY_DELAY,
    build_client,
    chat_completion,
    parse_json_object,
    retry_operation,
)

logger = logging.getLogger("wenzhai.engine.summarizer")

API_KEY = "DEEPSEEK_API_KEY"

Options = Optional[Union[SummarizeOptions, Mapping[str, Any]]]


def _resolve_options(options: Options) -> SummarizeOptions:
    if options is None:
        return SummarizeOptions()
    if isinstance(options, SummarizeOptions):
        return options
    # Options only shape the prompt: falsy or non-numeric values fall back to the defaults.
    defaults = SummarizeOptions()
    language = options.get("language") or defaults.language
    min_length = options.get("minLength") or options.get("min_length") or defaults.min_length
    try:
        min_length = int(min_length)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric minLength %r", min_length)
        min_length = defaults.min_length
    return SummarizeOptions(language=str(language), min_length=min_length)


def _to_summary(data: dict[str, Any]) -> Summary:
    keywords = data.get("keywords")
    if not data.get("title") or not data.get("content") or not isinstance(keywords, list):
        raise ResponseFormatError("Summary result is missing title, content or keywords")
    score = data.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float, str)):
        score = None
    return Summary(
        title=str(data["title"]),
        content=str(data["content"]),
        keywords=[str(k) for k in keywords],
        score=score,
    )


class ContentSummarizer(ABC):
    """Turns raw text into a titled, scored :class:`Summary`."""

    @abstractmethod
    async def refresh(self) -> None:
        """Re-read configuration and rebuild the remote handle."""

    @abstractmethod
    async def validate_config(self) -> None:
        """Raise :class:`ConfigurationError` if configuration is incomplete."""

    @abstractmethod
    async def summarize(self, content: str, options: Options = None) -> Summary:
        ...

    @abstractmethod
    async def generate_title(self, content: str, options: Options = None) -> str:
        ...


class DeepseekSummarizer(ContentSummarizer):
    """DeepSeek-backed summarizer.

    Build it with :func:`create_summarizer` (or :meth:`create`), which
    validates configuration and sets up the API handle before returning.
    """

    def __init__(
        self,
        config: ConfigStore,
        *,
        base_url: str = DEEPSEEK_BASE_URL,
        model: str = DEEPSEEK_MODEL,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._config = config
        self.base_url = base_url
        self.model = model
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep
        self._client: AsyncOpenAI | None = None

    @classmethod
    async def create(cls, config: ConfigStore, **kwargs: Any) -> DeepseekSummarizer:
        summarizer = cls(config, **kwargs)
        await summarizer.refresh()
        return summarizer

    @property
    def ready(self) -> bool:
        return self._client is not None

    async def refresh(self) -> None:
        await self.validate_config()
        api_key = await self._config.get(API_KEY)
        if not api_key:
            # The store changed between the check and the read.
            raise ConfigurationError("DeepSeek API key is required")
        self._client = build_client(api_key, self.base_url)
        logger.info("Summarizer client initialised (model=%s, base_url=%s)", self.model, self.base_url)

    async def validate_config(self) -> None:
        if not await self._config.get(API_KEY):
            raise ConfigurationError("DeepSeek API key is required")

    def _require_client(self) -> AsyncOpenAI:
        if self._client is None:
            raise ConfigurationError("Summarizer is not initialised; await refresh() first")
        return self._client

    async def _retry(self, operation: Callable[[], Awaitable[Any]]) -> Any:
        return await retry_operation(
            operation,
            attempts=self.max_retries,
            delay=self.retry_delay,
            sleep=self._sleep,
        )

    async def summarize(self, content: str, options: Options = None) -> Summary:
        """Expand *content* and return it with a title, keywords and a score.

        Raises :class:`InvalidInputError` for empty content without calling the
        API. Any failure inside the request (network, empty reply, bad JSON,
        missing fields) is retried; the last error propagates unchanged.
        """
        if not content:
            raise InvalidInputError("Content is required for summarization")

        opts = _resolve_options(options)
        client = self._require_client()
        user_message = SUMMARY_USER_PROMPT.format(
            language=opts.language,
            min_length=opts.min_length,
            content=content,
        )

        async def _attempt() -> Summary:
            raw = await chat_completion(
                client,
                self.model,
                SUMMARY_SYSTEM_PROMPT,
                user_message,
                response_format={"type": "json_object"},
            )
            return _to_summary(parse_json_object(raw))

        return await self._retry(_attempt)

    async def generate_title(self, content: str, options: Options = None) -> str:
        """Return a single short title for *content*, verbatim from the model."""
        if not content:
            raise InvalidInputError("Content is required for title generation")

        opts = _resolve_options(options)
        client = self._require_client()
        user_message = TITLE_USER_PROMPT.format(language=opts.language, content=content)

        async def _attempt() -> str:
            return await chat_completion(client, self.model, TITLE_SYSTEM_PROMPT, user_message)

        return await self._retry(_attempt)


async def create_summarizer(config: ConfigStore, **kwargs: Any) -> DeepseekSummarizer:
    """Return a fully initialised :class:`DeepseekSummarizer`.

    Raises :class:`ConfigurationError` when the API key is missing.
    """
    return await DeepseekSummarizer.create(config, **kwargs)
