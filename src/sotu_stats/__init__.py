"""Lexical statistics for U.S. presidential annual messages."""
from __future__ import annotations

from .analysis import RuleRegistry, analyze_document, build_table, default_rules, load_rules, tally
from .clients import DocumentSource, PresidencyClient
from .config import AnalysisConfig, AppConfig, ArchiveConfig, ReportConfig, load_config
from .core import (
    Annotation,
    Document,
    DocumentMarkup,
    KeywordRule,
    MalformedDate,
    RuleConfigurationError,
    SotuStatsError,
    SourceUnavailable,
    SpeechRecord,
)
from .parsing import build_document, clean, count_occurrences, extract, parse_year, to_sentences, to_words
from .pipeline import AnalysisPipeline, PipelineEvent
from .runtime import PipelineResources, create_pipeline

__all__ = [
    "AnalysisConfig",
    "AnalysisPipeline",
    "Annotation",
    "AppConfig",
    "ArchiveConfig",
    "Document",
    "DocumentMarkup",
    "DocumentSource",
    "KeywordRule",
    "MalformedDate",
    "PipelineEvent",
    "PipelineResources",
    "PresidencyClient",
    "ReportConfig",
    "RuleConfigurationError",
    "RuleRegistry",
    "SotuStatsError",
    "SourceUnavailable",
    "SpeechRecord",
    "analyze_document",
    "build_document",
    "build_table",
    "clean",
    "count_occurrences",
    "create_pipeline",
    "default_rules",
    "extract",
    "load_config",
    "load_rules",
    "parse_year",
    "tally",
    "to_sentences",
    "to_words",
]
