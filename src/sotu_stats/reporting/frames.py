"""pandas views over the speech table."""
from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence
import logging

import pandas as pd

from ..core.types import RECORD_COLUMNS, SpeechRecord

LOGGER = logging.getLogger(__name__)


def records_to_frame(records: Sequence[SpeechRecord], labels: Sequence[str] = ()) -> pd.DataFrame:
    """Build a DataFrame with one row per record.

    Columns are ``RECORD_COLUMNS`` followed by the keyword labels. ``labels``
    fixes the keyword columns when ``records`` is empty.
    """

    keyword_columns: List[str] = list(labels)
    for record in records:
        for label in record.keyword_counts:
            if label not in keyword_columns:
                keyword_columns.append(label)
    columns = [*RECORD_COLUMNS, *keyword_columns]
    frame = pd.DataFrame([record.as_row() for record in records], columns=columns)
    frame.index = pd.Index([record.identifier for record in records], name="identifier")
    return frame


def since_year(frame: pd.DataFrame, threshold: int) -> pd.DataFrame:
    """Rows whose year is strictly greater than ``threshold``."""

    return frame[frame["year"] > threshold].copy()


def with_party(frame: pd.DataFrame, affiliation: Mapping[str, str]) -> pd.DataFrame:
    result = frame.copy()
    result["party"] = result["speaker_name"].map(affiliation)
    unknown = sorted(set(result.loc[result["party"].isna(), "speaker_name"]))
    if unknown:
        LOGGER.warning("No party affiliation for %s", ", ".join(unknown))
    return result


def party_keyword_rates(frame: pd.DataFrame, labels: Iterable[str]) -> pd.DataFrame:
    """Keyword uses per 1,000 words for each party.

    ``frame`` needs a ``party`` column (see :func:`with_party`); rows without
    a party are ignored.
    """

    labels = list(labels)
    known = frame.dropna(subset=["party"])
    totals = known.groupby("party")[[*labels, "number_of_words"]].sum()
    words = totals["number_of_words"].where(totals["number_of_words"] > 0)
    return totals[labels].div(words, axis=0) * 1000


__all__ = ["party_keyword_rates", "records_to_frame", "since_year", "with_party"]
