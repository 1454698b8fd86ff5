"""Exceptions raised while building the speech table."""
from __future__ import annotations

from typing import Optional


class SotuStatsError(Exception):
    """Base class for all errors raised by sotu_stats."""


class SourceUnavailable(SotuStatsError, RuntimeError):
    """Raised when the archive does not deliver usable markup for a document."""

    def __init__(self, message: str, *, identifier: Optional[str] = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class MalformedDate(SotuStatsError, ValueError):
    """Raised when no year can be read from a document's date text."""

    def __init__(self, identifier: str, date_text: str) -> None:
        super().__init__(f"Document {identifier} has no parseable year in date text {date_text!r}")
        self.identifier = identifier
        self.date_text = date_text


class RuleConfigurationError(SotuStatsError, ValueError):
    """Raised when a keyword rule cannot be registered."""


__all__ = ["MalformedDate", "RuleConfigurationError", "SotuStatsError", "SourceUnavailable"]
