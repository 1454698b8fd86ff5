from sotu_stats.core import SpeechRecord
from sotu_stats.reporting import DEFAULT_PARTY_AFFILIATION, records_to_frame
from sotu_stats.reporting.charts import render_charts


def _record(identifier, speaker, year, god_bless):
    return SpeechRecord(
        identifier=identifier,
        speaker_name=speaker,
        year=year,
        laughter_count=1,
        applause_count=3,
        number_of_words=100,
        number_of_characters=480,
        average_word_length=4.8,
        keyword_counts={"america": 2, "we": 7, "god_bless": god_bless},
    )


def test_render_charts_writes_all_images(tmp_path):
    frame = records_to_frame(
        [
            _record("/documents/1", "Dwight D. Eisenhower", 1955, 0),
            _record("/documents/2", "John F. Kennedy", 1962, 0),
            _record("/documents/3", "Ronald Reagan", 1988, 1),
        ]
    )

    written = render_charts(
        frame,
        tmp_path / "charts",
        year_threshold=1960,
        affiliation=DEFAULT_PARTY_AFFILIATION,
        labels=["america", "we"],
    )

    assert [path.name for path in written] == [
        "words_per_speech.png",
        "god_bless_by_year.png",
        "reactions_by_year.png",
        "keywords_by_party.png",
    ]
    assert all(path.stat().st_size > 0 for path in written)


def test_render_charts_skips_modern_views_without_recent_speeches(tmp_path):
    frame = records_to_frame([_record("/documents/1", "George Washington", 1790, 0)])

    written = render_charts(
        frame,
        tmp_path,
        year_threshold=1960,
        affiliation=DEFAULT_PARTY_AFFILIATION,
        labels=["america"],
    )

    assert [path.name for path in written] == ["words_per_speech.png", "god_bless_by_year.png"]
