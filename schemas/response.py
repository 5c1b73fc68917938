"""Response schemas for the Wenzhai summarizer and its API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Summary(BaseModel):
    """Expanded, titled and scored version of the input content.

    ``keywords`` length and ``score`` range are requested from the model but
    not enforced here.
    """

    title: str = Field(description="Headline chosen by the model.")
    content: str = Field(description="Expanded plain-text body.")
    keywords: list[str] = Field(
        default_factory=list,
        description="3-5 keywords, each at most 4 characters (best-effort).",
    )
    score: float | str | None = Field(
        default=None,
        description="Importance score 0-100 with two decimals (best-effort, kept as returned).",
    )


class TitleResponse(BaseModel):
    title: str


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
