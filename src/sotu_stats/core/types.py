"""Typed domain objects for the annual message analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Any, Dict, Literal, Optional, Tuple

RuleKind = Literal["token", "phrase"]

RECORD_COLUMNS: Tuple[str, ...] = (
    "speaker_name",
    "year",
    "laughter_count",
    "applause_count",
    "number_of_words",
    "number_of_characters",
    "average_word_length",
)


@dataclass(slots=True)
class DocumentMarkup:
    """Structural fragments of one archived document as delivered by the source."""

    identifier: str
    title_text: str
    date_text: str
    paragraphs: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """A single annual message with its parsed metadata."""

    identifier: str
    speaker_name: str
    year: int
    raw_body: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Annotation:
    """A bracketed stage direction such as ``[Applause]``."""

    document_identifier: str
    text: str


@dataclass(frozen=True, slots=True)
class KeywordRule:
    """A pattern whose matches are counted under ``label``."""

    pattern: str
    label: str
    kind: RuleKind = "token"
    compiled: Optional[re.Pattern[str]] = field(default=None, compare=False, repr=False)


@dataclass(slots=True)
class SpeechRecord:
    """One aggregated row of the result table."""

    identifier: str
    speaker_name: str
    year: int
    laughter_count: int
    applause_count: int
    number_of_words: int
    number_of_characters: int
    average_word_length: float
    keyword_counts: Dict[str, int] = field(default_factory=dict)
    is_empty: bool = False

    def as_row(self) -> Dict[str, Any]:
        """Flatten the record into ``RECORD_COLUMNS`` followed by the rule labels."""

        row: Dict[str, Any] = {name: getattr(self, name) for name in RECORD_COLUMNS}
        row.update(self.keyword_counts)
        return row


__all__ = [
    "Annotation",
    "Document",
    "DocumentMarkup",
    "KeywordRule",
    "RECORD_COLUMNS",
    "RuleKind",
    "SpeechRecord",
]
