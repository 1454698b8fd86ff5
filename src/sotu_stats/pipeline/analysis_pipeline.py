"""High level orchestration of the annual message analysis."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Literal, Optional
import logging

from ..analysis.aggregate import build_table
from ..analysis.rules import RuleRegistry
from ..clients.presidency import DocumentSource
from ..core.types import Document, SpeechRecord
from ..core.workers import run_ordered
from ..parsing.annotations import APPLAUSE, LAUGHTER
from ..parsing.metadata import build_document

LOGGER = logging.getLogger(__name__)

PipelineEventKind = Literal[
    "start",
    "listed",
    "fetched",
    "analyzed",
    "finished",
    "error",
]


@dataclass(slots=True)
class PipelineEvent:
    """Progress notification emitted by :class:`AnalysisPipeline`."""

    kind: PipelineEventKind
    processed: int
    identifier: str | None = None
    message: str | None = None
    document_count: int | None = None


ProgressCallback = Callable[[PipelineEvent], None]


class AnalysisPipeline:
    """Fetch every catalogued document and turn it into a table row.

    With ``max_workers > 1`` documents are fetched and analysed on a thread
    pool; the progress callback may then be invoked from worker threads.
    """

    def __init__(
        self,
        *,
        source: DocumentSource,
        rules: RuleRegistry,
        max_workers: int = 1,
        laughter: str = LAUGHTER,
        applause: str = APPLAUSE,
    ) -> None:
        self._source = source
        self._rules = rules
        self._max_workers = max(1, max_workers)
        self._laughter = laughter
        self._applause = applause

    def run(
        self,
        catalog_reference: Optional[str] = None,
        *,
        limit: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> List[SpeechRecord]:
        """Run the pipeline end-to-end and return the records in catalog order."""

        processed = 0
        current_identifier: str | None = None
        self._notify(
            progress_callback,
            PipelineEvent(kind="start", processed=processed, message="Pipeline run started"),
        )
        try:
            identifiers = self._source.list_document_ids(catalog_reference)
            if limit is not None:
                identifiers = identifiers[:limit]
            self._notify(
                progress_callback,
                PipelineEvent(
                    kind="listed",
                    processed=processed,
                    message=f"Catalog lists {len(identifiers)} documents",
                    document_count=len(identifiers),
                ),
            )

            def _load(identifier: str) -> Document:
                nonlocal current_identifier
                current_identifier = identifier
                LOGGER.info("Fetching document %s", identifier)
                document = build_document(self._source.fetch(identifier))
                self._notify(
                    progress_callback,
                    PipelineEvent(
                        kind="fetched",
                        processed=processed,
                        identifier=identifier,
                        message=f"Fetched {document.speaker_name} ({document.year})",
                    ),
                )
                return document

            documents = run_ordered(_load, identifiers, self._max_workers)

            records = build_table(
                documents,
                None,
                self._rules,
                max_workers=self._max_workers,
                laughter=self._laughter,
                applause=self._applause,
            )
            processed = len(records)
            self._notify(
                progress_callback,
                PipelineEvent(
                    kind="analyzed",
                    processed=processed,
                    message=f"Analysed {processed} documents",
                    document_count=processed,
                ),
            )
        except Exception as exc:
            LOGGER.exception("Analysis pipeline failed: %s", exc)
            self._notify(
                progress_callback,
                PipelineEvent(
                    kind="error",
                    processed=processed,
                    identifier=getattr(exc, "identifier", None) or current_identifier,
                    message=str(exc),
                ),
            )
            raise
        self._notify(
            progress_callback,
            PipelineEvent(kind="finished", processed=processed, message="Pipeline run finished"),
        )
        return records

    @staticmethod
    def _notify(callback: Optional[ProgressCallback], event: PipelineEvent) -> None:
        if callback:
            callback(event)


__all__ = ["AnalysisPipeline", "PipelineEvent", "ProgressCallback"]
