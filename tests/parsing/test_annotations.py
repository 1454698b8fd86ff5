from sotu_stats.parsing import clean, count_occurrences, extract


def test_extract_and_clean_single_applause():
    raw_body = ["The economy is strong. [Applause] We must act now."]

    annotations = extract(raw_body, "doc-1")

    assert [annotation.text for annotation in annotations] == ["[Applause]"]
    assert annotations[0].document_identifier == "doc-1"
    assert count_occurrences(annotations, "Applause") == 1
    assert count_occurrences(annotations, "Laughter") == 0
    assert clean(raw_body) == ("The economy is strong.  We must act now.",)


def test_extract_is_lazy_and_keeps_order():
    raw_body = [
        "Thank you. [Laughter] [Applause]",
        "No reaction here.",
        "[Applause, laughter] [Laughter and Applause]",
    ]

    annotations = extract(raw_body)

    assert [annotation.text for annotation in annotations] == [
        "[Laughter]",
        "[Applause]",
        "[Applause, laughter]",
        "[Laughter and Applause]",
    ]
    # case-sensitive substring counting
    assert count_occurrences(annotations, "Laughter") == 2
    assert count_occurrences(annotations, "Applause") == 3


def test_no_annotations():
    raw_body = ["Plain text.", ""]

    assert extract(raw_body) == []
    assert count_occurrences([], "Applause") == 0
    assert clean(raw_body) == ("Plain text.", "")


def test_clean_preserves_paragraphs_and_is_idempotent():
    raw_body = ["First [Applause] part.", "[Laughter]", "Third [a] [b] end."]

    once = clean(raw_body)

    assert len(once) == 3
    assert once == ("First  part.", "", "Third   end.")
    assert clean(once) == once
