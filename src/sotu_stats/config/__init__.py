"""Configuration helpers for the sotu_stats pipeline."""
from __future__ import annotations

from .settings import (
    AnalysisConfig,
    AppConfig,
    ArchiveConfig,
    ReportConfig,
    load_config,
    resolve_config_path,
    save_config,
)

__all__ = [
    "AnalysisConfig",
    "AppConfig",
    "ArchiveConfig",
    "ReportConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
