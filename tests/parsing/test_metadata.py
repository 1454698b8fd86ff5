import pytest

from sotu_stats.core import DocumentMarkup, MalformedDate
from sotu_stats.parsing import build_document, parse_year


def test_parse_year_uses_text_after_last_comma():
    assert parse_year("January 20, 2021", "doc") == 2021
    assert parse_year("Tuesday, February 4,  1997 ", "doc") == 1997


def test_parse_year_without_comma_uses_whole_text():
    assert parse_year("1790", "doc") == 1790


@pytest.mark.parametrize("date_text", ["", "January 20, twenty", "January 20, 2021 (approx.)", "No date,"])
def test_parse_year_rejects_malformed_dates(date_text):
    with pytest.raises(MalformedDate) as excinfo:
        parse_year(date_text, "/documents/broken")

    assert excinfo.value.identifier == "/documents/broken"
    assert "/documents/broken" in str(excinfo.value)


def test_build_document_collapses_speaker_whitespace():
    markup = DocumentMarkup(
        identifier="/documents/address-1",
        title_text="  Barack\n Obama ",
        date_text="January 24, 2012",
        paragraphs=("Thank you. [Applause]", "Good night."),
    )

    document = build_document(markup)

    assert document.identifier == "/documents/address-1"
    assert document.speaker_name == "Barack Obama"
    assert document.year == 2012
    assert document.raw_body == ("Thank you. [Applause]", "Good night.")
