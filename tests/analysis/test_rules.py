import json

import pytest

from sotu_stats.analysis import RuleRegistry, default_rules, load_rules
from sotu_stats.core import RuleConfigurationError


def test_registry_keeps_insertion_order_and_kinds():
    registry = RuleRegistry()
    registry.add(r"^(war|War)$", "war")
    registry.add(r"God bless|god bless", "god_bless", "phrase")
    registry.add(r"^peace$", "peace", "token")

    assert registry.labels == ("war", "god_bless", "peace")
    assert len(registry) == 3
    assert [rule.label for rule in registry.token_rules] == ["war", "peace"]
    assert [rule.label for rule in registry.phrase_rules] == ["god_bless"]
    assert all(rule.compiled is not None for rule in registry)


def test_invalid_pattern_fails_when_added():
    registry = RuleRegistry()

    with pytest.raises(RuleConfigurationError):
        registry.add(r"^(unclosed$", "broken")
    assert len(registry) == 0


def test_duplicate_label_and_unknown_kind_are_rejected():
    registry = RuleRegistry()
    registry.add(r"^war$", "war")

    with pytest.raises(RuleConfigurationError):
        registry.add(r"^wars$", "war")
    with pytest.raises(RuleConfigurationError):
        registry.add(r"^peace$", "peace", "sentence")


def test_default_rules_contain_god_bless_phrase_rule():
    registry = default_rules()

    assert "god_bless" in registry.labels
    assert [rule.label for rule in registry.phrase_rules] == ["god_bless"]


def test_load_rules_defaults_kind_to_token(tmp_path):
    path = tmp_path / "rules.json"
    entries = [
        {"label": "nation", "pattern": "^(nation|Nation)$", "kind": "token"},
        {"label": "thank_you", "pattern": "Thank you", "kind": "phrase"},
        {"label": "jobs", "pattern": "^jobs$"},
    ]
    path.write_text(json.dumps(entries), encoding="utf8")

    registry = load_rules(path)

    assert registry.labels == ("nation", "thank_you", "jobs")
    assert [rule.kind for rule in registry] == ["token", "phrase", "token"]


def test_load_rules_rejects_bad_files(tmp_path):
    not_a_list = tmp_path / "object.json"
    not_a_list.write_text('{"label": "x"}', encoding="utf8")
    missing_pattern = tmp_path / "missing.json"
    missing_pattern.write_text('[{"label": "x"}]', encoding="utf8")

    with pytest.raises(RuleConfigurationError):
        load_rules(not_a_list)
    with pytest.raises(RuleConfigurationError):
        load_rules(missing_pattern)
    with pytest.raises(RuleConfigurationError):
        load_rules(tmp_path / "does-not-exist.json")
