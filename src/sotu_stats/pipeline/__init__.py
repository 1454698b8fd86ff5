"""Pipeline orchestration components."""
from __future__ import annotations

from .analysis_pipeline import AnalysisPipeline, PipelineEvent, ProgressCallback

__all__ = ["AnalysisPipeline", "PipelineEvent", "ProgressCallback"]
