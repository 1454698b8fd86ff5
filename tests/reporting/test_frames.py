import json
import math

import pandas as pd
import pytest

from sotu_stats.core import RECORD_COLUMNS, SpeechRecord
from sotu_stats.reporting import (
    DEFAULT_PARTY_AFFILIATION,
    load_party_affiliation,
    party_keyword_rates,
    records_to_frame,
    since_year,
    with_party,
)


def _record(identifier, speaker, year, words, america, empty=False):
    return SpeechRecord(
        identifier=identifier,
        speaker_name=speaker,
        year=year,
        laughter_count=0,
        applause_count=1,
        number_of_words=words,
        number_of_characters=words * 5,
        average_word_length=math.nan if empty else 5.0,
        keyword_counts={"america": america, "god_bless": 0},
        is_empty=empty,
    )


@pytest.fixture()
def records():
    return [
        _record("/documents/1", "Harry S. Truman", 1950, 1000, 4),
        _record("/documents/2", "Ronald Reagan", 1985, 2000, 10),
        _record("/documents/3", "Barack Obama", 2010, 500, 5),
        _record("/documents/4", "Somebody Else", 2012, 0, 0, empty=True),
    ]


def test_records_to_frame_has_fixed_columns(records):
    frame = records_to_frame(records)

    assert list(frame.columns) == [*RECORD_COLUMNS, "america", "god_bless"]
    assert list(frame.index) == ["/documents/1", "/documents/2", "/documents/3", "/documents/4"]
    assert pd.isna(frame.loc["/documents/4", "average_word_length"])


def test_empty_table_keeps_keyword_columns():
    frame = records_to_frame([], ["america"])

    assert frame.empty
    assert list(frame.columns) == [*RECORD_COLUMNS, "america"]


def test_since_year_is_strict(records):
    frame = records_to_frame(records)

    assert list(since_year(frame, 1985)["year"]) == [2010, 2012]


def test_with_party_marks_unknown_speakers(records):
    frame = with_party(records_to_frame(records), DEFAULT_PARTY_AFFILIATION)

    assert frame.loc["/documents/2", "party"] == "Republican"
    assert frame.loc["/documents/3", "party"] == "Democrat"
    assert pd.isna(frame.loc["/documents/4", "party"])


def test_party_keyword_rates_per_thousand_words(records):
    frame = with_party(records_to_frame(records), DEFAULT_PARTY_AFFILIATION)

    rates = party_keyword_rates(frame, ["america"])

    assert rates.loc["Republican", "america"] == pytest.approx(5.0)
    assert rates.loc["Democrat", "america"] == pytest.approx(9 / 1500 * 1000)


def test_load_party_affiliation_from_file(tmp_path):
    path = tmp_path / "parties.json"
    path.write_text(json.dumps({"Speaker A": "Independent"}), encoding="utf8")

    assert load_party_affiliation(path) == {"Speaker A": "Independent"}
    assert load_party_affiliation()["Abraham Lincoln"] == "Republican"
