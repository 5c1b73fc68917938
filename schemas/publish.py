"""Publish result schemas shared by every publisher."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class PublishStatus(str, Enum):
    PENDING = "pending"
    PUBLISHED = "published"
    FAILED = "failed"
    DRAFT = "draft"
    SCHEDULED = "scheduled"


class PublishResult(BaseModel):
    publish_id: str = Field(alias="publishId")
    url: str | None = None
    status: PublishStatus
    published_at: datetime = Field(alias="publishedAt")
    platform: str

    model_config = {"populate_by_name": True}
