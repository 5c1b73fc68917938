"""Request schemas for the Wenzhai API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SummarizeOptions(BaseModel):
    """Prompt options shared by ``summarize`` and ``generate_title``."""

    language: str = Field(default="中文", description="Output language named in the prompt.")
    min_length: int = Field(
        default=200,
        alias="minLength",
        description="Target minimum length of the expanded content, in characters.",
    )

    model_config = {"populate_by_name": True}


class SummarizeRequest(BaseModel):
    """Payload sent by the publishing pipeline."""

    content: str = Field(
        ...,
        min_length=1,
        max_length=50_000,
        description="Raw text to expand, title and score.",
    )
    language: str | None = Field(default=None, description="Output language, e.g. 中文 or English.")
    min_length: int | None = Field(
        default=None,
        alias="minLength",
        ge=1,
        description="Target minimum length of the expanded content.",
    )

    model_config = {"populate_by_name": True}


class TitleRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=50_000)
    language: str | None = None
