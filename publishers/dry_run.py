"""In-process publisher that records articles instead of sending them."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from publishers.base import ContentPublisher
from schemas.publish import PublishResult, PublishStatus

logger = logging.getLogger("wenzhai.publishers.dry_run")


class DryRunPublisher(ContentPublisher):
    """Keeps every published article in ``self.articles`` and returns drafts."""

    platform = "dry-run"

    def __init__(self) -> None:
        self.articles: list[dict[str, Any]] = []

    def validate_config(self) -> None:
        return None

    async def refresh(self) -> None:
        self.validate_config()

    async def publish(self, article: str, **kwargs: Any) -> PublishResult:
        if not article:
            raise ValueError("Article is required for publishing")
        publish_id = uuid.uuid4().hex
        self.articles.append({"publish_id": publish_id, "article": article, **kwargs})
        logger.info("Dry-run publish %s (%d chars)", publish_id, len(article))
        return PublishResult(
            publish_id=publish_id,
            status=PublishStatus.DRAFT,
            published_at=datetime.now(timezone.utc),
            platform=self.platform,
        )
