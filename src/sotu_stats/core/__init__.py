"""Core domain types and errors."""
from __future__ import annotations

from .errors import MalformedDate, RuleConfigurationError, SotuStatsError, SourceUnavailable
from .types import (
    RECORD_COLUMNS,
    Annotation,
    Document,
    DocumentMarkup,
    KeywordRule,
    RuleKind,
    SpeechRecord,
)
from .workers import run_ordered

__all__ = [
    "Annotation",
    "Document",
    "DocumentMarkup",
    "KeywordRule",
    "MalformedDate",
    "RECORD_COLUMNS",
    "RuleConfigurationError",
    "RuleKind",
    "SotuStatsError",
    "SourceUnavailable",
    "SpeechRecord",
    "run_ordered",
]
