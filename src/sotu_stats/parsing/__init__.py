"""Text extraction helpers for archived speeches."""
from __future__ import annotations

from .annotations import ANNOTATION_PATTERN, APPLAUSE, LAUGHTER, clean, count_occurrences, extract
from .metadata import build_document, parse_year
from .segmenter import to_sentences, to_words

__all__ = [
    "ANNOTATION_PATTERN",
    "APPLAUSE",
    "LAUGHTER",
    "build_document",
    "clean",
    "count_occurrences",
    "extract",
    "parse_year",
    "to_sentences",
    "to_words",
]
