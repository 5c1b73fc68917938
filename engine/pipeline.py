"""Pipeline orchestrator — summarize the content, then hand it to a publisher."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from engine.summarizer import ContentSummarizer, Options
from publishers.base import ContentPublisher
from schemas.publish import PublishResult
from schemas.response import Summary

logger = logging.getLogger("wenzhai.pipeline")


@dataclass
class PipelineResult:
    summary: Summary
    publish_result: PublishResult


def render_article(summary: Summary) -> str:
    """Title line, blank line, then the expanded content."""
    return f"{summary.title}\n\n{summary.content}"


async def run_pipeline(
    content: str,
    *,
    summarizer: ContentSummarizer,
    publisher: ContentPublisher,
    options: Options = None,
) -> PipelineResult:
    """Summarize *content* and publish the result.

    Errors from either step propagate to the caller; nothing is published
    when summarization fails.
    """
    t0 = time.perf_counter()

    summary = await summarizer.summarize(content, options)
    logger.info("Summary ready: title=%r score=%s", summary.title, summary.score)

    result = await publisher.publish(
        render_article(summary),
        title=summary.title,
        keywords=list(summary.keywords),
    )
    logger.info(
        "Published to %s (id=%s, status=%s) in %.0f ms",
        result.platform,
        result.publish_id,
        result.status.value,
        (time.perf_counter() - t0) * 1000,
    )
    return PipelineResult(summary=summary, publish_result=result)
