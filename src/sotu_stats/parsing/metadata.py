"""Turn archive markup into :class:`Document` objects."""
from __future__ import annotations

import logging
import re

from ..core.errors import MalformedDate
from ..core.types import Document, DocumentMarkup

LOGGER = logging.getLogger(__name__)

_YEAR_PATTERN = re.compile(r"\d{1,4}")
_MULTISPACE = re.compile(r"\s+")


def parse_year(date_text: str, identifier: str) -> int:
    """Read the year from the text after the last comma of ``date_text``.

    ``"January 20, 2021"`` yields ``2021``. Anything that is not a plain
    integer raises :class:`MalformedDate`.
    """

    candidate = (date_text or "").rsplit(",", 1)[-1].strip()
    if not _YEAR_PATTERN.fullmatch(candidate):
        raise MalformedDate(identifier, date_text)
    return int(candidate)


def build_document(markup: DocumentMarkup) -> Document:
    speaker_name = _MULTISPACE.sub(" ", markup.title_text).strip()
    if not speaker_name:
        LOGGER.warning("Document %s has an empty speaker name", markup.identifier)
    return Document(
        identifier=markup.identifier,
        speaker_name=speaker_name,
        year=parse_year(markup.date_text, markup.identifier),
        raw_body=tuple(markup.paragraphs),
    )


__all__ = ["build_document", "parse_year"]
