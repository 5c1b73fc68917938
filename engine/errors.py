"""Errors raised by the summarizer client."""

from __future__ import annotations


class SummarizerError(Exception):
    """Base class for every summarizer failure."""


class ConfigurationError(SummarizerError):
    """The API credential is missing or the client was never initialised."""


class InvalidInputError(SummarizerError):
    """The caller passed empty content."""


class EmptyResponseError(SummarizerError):
    """The remote model returned no usable text."""


class ResponseFormatError(SummarizerError):
    """The remote model returned malformed JSON or missed required fields."""
