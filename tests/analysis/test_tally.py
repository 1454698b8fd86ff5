import pytest

from sotu_stats.analysis import RuleRegistry, tally, tally_document
from sotu_stats.core import Document


@pytest.fixture()
def rules() -> RuleRegistry:
    registry = RuleRegistry()
    registry.add(r"^(America|Americans)$", "america")
    registry.add(r"^(war|War)$", "war")
    registry.add(r"God bless|god bless", "god_bless", "phrase")
    return registry


def _document(*paragraphs: str) -> Document:
    return Document(identifier="doc", speaker_name="Speaker", year=2000, raw_body=tuple(paragraphs))


def test_token_rules_count_whole_words_only(rules):
    document = _document("America and Americans. American warfare is not war. [War]")

    counts = tally_document(document, rules)

    assert counts == {"america": 2, "war": 1, "god_bless": 0}


def test_token_rules_are_case_sensitive_unless_encoded(rules):
    counts = tally_document(_document("america AMERICA America"), rules)

    assert counts["america"] == 1


def test_adding_a_token_increments_only_its_rule(rules):
    before = tally_document(_document("War is over. God bless you.", "America endures."), rules)
    after = tally_document(_document("War is over. God bless you.", "America endures war."), rules)

    assert after["war"] == before["war"] + 1
    assert after["america"] == before["america"]
    assert after["god_bless"] == before["god_bless"]


def test_phrase_rules_count_every_match_in_each_sentence(rules):
    sentences = ["God bless you and god bless America.", "May God bless them."]
    words = ["unused"]

    counts = tally(words, sentences, rules)

    assert counts["god_bless"] == 3
    assert counts["america"] == 0


def test_phrase_rule_is_not_affected_by_word_splitting(rules):
    document = _document("Thank you. God bless you, and God bless the United States of America.")

    counts = tally_document(document, rules)

    assert counts["god_bless"] == 2
    assert counts["america"] == 1


def test_result_has_one_entry_per_rule_in_order(rules):
    counts = tally([], [], rules)

    assert list(counts) == ["america", "war", "god_bless"]
    assert set(counts.values()) == {0}
