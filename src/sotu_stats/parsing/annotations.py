"""Extraction and removal of bracketed stage directions."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple
import re

from ..core.types import Annotation

LAUGHTER = "Laughter"
APPLAUSE = "Applause"

ANNOTATION_PATTERN = re.compile(r"\[.*?\]")


def extract(raw_body: Sequence[str], document_identifier: str = "") -> List[Annotation]:
    """Return every bracketed fragment of ``raw_body`` in reading order."""

    annotations: List[Annotation] = []
    for paragraph in raw_body:
        for match in ANNOTATION_PATTERN.finditer(paragraph):
            annotations.append(Annotation(document_identifier=document_identifier, text=match.group(0)))
    return annotations


def count_occurrences(annotations: Iterable[Annotation], needle: str) -> int:
    """Count how often ``needle`` appears inside the annotation texts."""

    if not needle:
        raise ValueError("needle must not be empty")
    return sum(annotation.text.count(needle) for annotation in annotations)


def clean(raw_body: Sequence[str]) -> Tuple[str, ...]:
    """Remove all annotations, keeping one entry per paragraph."""

    return tuple(ANNOTATION_PATTERN.sub("", paragraph) for paragraph in raw_body)


__all__ = ["ANNOTATION_PATTERN", "APPLAUSE", "LAUGHTER", "clean", "count_occurrences", "extract"]
