"""Assemble one :class:`SpeechRecord` per document."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple
import logging
import math

from ..core.errors import MalformedDate
from ..core.types import Annotation, Document, SpeechRecord
from ..core.workers import run_ordered
from ..parsing.annotations import APPLAUSE, LAUGHTER, clean, count_occurrences, extract
from ..parsing.segmenter import to_sentences, to_words
from .rules import RuleRegistry
from .tally import tally

LOGGER = logging.getLogger(__name__)


def analyze_document(
    document: Document,
    rules: RuleRegistry,
    annotations: Optional[Sequence[Annotation]] = None,
    *,
    laughter: str = LAUGHTER,
    applause: str = APPLAUSE,
) -> SpeechRecord:
    """Compute all statistics of ``document``."""

    if annotations is None:
        annotations = extract(document.raw_body, document.identifier)
    clean_text = clean(document.raw_body)
    words = to_words(clean_text)
    sentences = to_sentences(clean_text)

    number_of_words = len(words)
    number_of_characters = sum(len(paragraph) for paragraph in clean_text)
    is_empty = number_of_words == 0
    if is_empty:
        LOGGER.warning("Document %s contains no words; average word length is undefined", document.identifier)
        average_word_length = math.nan
    else:
        average_word_length = number_of_characters / number_of_words

    return SpeechRecord(
        identifier=document.identifier,
        speaker_name=document.speaker_name,
        year=document.year,
        laughter_count=count_occurrences(annotations, laughter),
        applause_count=count_occurrences(annotations, applause),
        number_of_words=number_of_words,
        number_of_characters=number_of_characters,
        average_word_length=average_word_length,
        keyword_counts=tally(words, sentences, rules),
        is_empty=is_empty,
    )


def _check_years(documents: Sequence[Document]) -> None:
    for document in documents:
        if isinstance(document.year, bool) or not isinstance(document.year, int):
            raise MalformedDate(document.identifier, str(document.year))


def build_table(
    documents: Sequence[Document],
    annotation_sets: Optional[Sequence[Sequence[Annotation]]],
    rules: RuleRegistry,
    *,
    max_workers: int = 1,
    laughter: str = LAUGHTER,
    applause: str = APPLAUSE,
) -> List[SpeechRecord]:
    """Build the result table in the order of ``documents``.

    ``annotation_sets`` may be ``None``, in which case annotations are
    extracted from each document. Documents are validated before any of them
    is analysed, so a bad year aborts the whole table.
    """

    if annotation_sets is not None and len(annotation_sets) != len(documents):
        raise ValueError(
            f"Got {len(annotation_sets)} annotation sets for {len(documents)} documents"
        )
    _check_years(documents)
    pending = [
        (document, annotation_sets[index] if annotation_sets is not None else None)
        for index, document in enumerate(documents)
    ]

    def _analyze(item: Tuple[Document, Optional[Sequence[Annotation]]]) -> SpeechRecord:
        document, annotations = item
        return analyze_document(document, rules, annotations, laughter=laughter, applause=applause)

    records = run_ordered(_analyze, pending, max_workers)

    LOGGER.info("Built table with %s rows and %s keyword columns", len(records), len(rules))
    return records


__all__ = ["analyze_document", "build_table"]
