"""Application level helpers for assembling pipeline dependencies."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .analysis.rules import RuleRegistry, default_rules, load_rules
from .clients import DocumentSource, PresidencyClient
from .config import AppConfig
from .pipeline import AnalysisPipeline


@dataclass(slots=True)
class PipelineResources:
    """Container bundling the objects needed to run the pipeline."""

    pipeline: AnalysisPipeline
    source: DocumentSource
    rules: RuleRegistry
    owns_source: bool = True

    def close(self) -> None:
        if self.owns_source and isinstance(self.source, PresidencyClient):
            self.source.close()


def create_rules(config: AppConfig) -> RuleRegistry:
    if config.analysis.rules_path:
        return load_rules(Path(config.analysis.rules_path))
    return default_rules()


def create_pipeline(
    config: AppConfig,
    *,
    source: DocumentSource | None = None,
    extra_exclusions: Iterable[str] = (),
) -> PipelineResources:
    # rules are compiled before anything touches the network
    rules = create_rules(config)
    for name in ("laughter_marker", "applause_marker"):
        if not getattr(config.analysis, name).strip():
            raise ValueError(f"AnalysisConfig.{name} must not be empty")
    owns_source = source is None
    archive = config.archive
    client: DocumentSource = source or PresidencyClient(
        archive.base_url,
        catalog_path=archive.catalog_path,
        catalog_link_selector=archive.catalog_link_selector,
        title_selector=archive.title_selector,
        date_selector=archive.date_selector,
        body_selector=archive.body_selector,
        excluded_ids=(*archive.excluded_ids, *extra_exclusions),
        timeout=archive.timeout,
        max_retries=archive.max_retries,
        request_delay=archive.request_delay,
        user_agent=archive.user_agent,
    )
    pipeline = AnalysisPipeline(
        source=client,
        rules=rules,
        max_workers=config.analysis.max_workers,
        laughter=config.analysis.laughter_marker,
        applause=config.analysis.applause_marker,
    )
    return PipelineResources(pipeline=pipeline, source=client, rules=rules, owns_source=owns_source)


__all__ = ["PipelineResources", "create_pipeline", "create_rules"]
