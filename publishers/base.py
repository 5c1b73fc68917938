"""Publisher contract — one implementation per target platform."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from schemas.publish import PublishResult


class ContentPublisher(ABC):
    """Delivers a finished article to a publishing platform."""

    platform: str = ""

    @abstractmethod
    def validate_config(self) -> None:
        """Raise if the publisher is missing required configuration."""

    @abstractmethod
    async def refresh(self) -> None:
        """Reload configuration and any platform session."""

    @abstractmethod
    async def publish(self, article: str, **kwargs: Any) -> PublishResult:
        """Publish *article* and report where and how it landed."""
