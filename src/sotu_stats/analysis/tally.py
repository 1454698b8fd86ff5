"""Count keyword rule matches for one document."""
from __future__ import annotations

from typing import Dict, Sequence

from ..core.types import Document
from ..parsing.annotations import clean
from ..parsing.segmenter import to_sentences, to_words
from .rules import RuleRegistry


def tally(words: Sequence[str], sentences: Sequence[str], rules: RuleRegistry) -> Dict[str, int]:
    """Return one count per rule label, in registry order.

    Token rules count words that match the pattern as a whole. Phrase rules
    count every match inside every sentence.
    """

    counts: Dict[str, int] = {}
    for rule in rules:
        assert rule.compiled is not None
        if rule.kind == "token":
            counts[rule.label] = sum(1 for word in words if rule.compiled.fullmatch(word))
        else:
            counts[rule.label] = sum(len(rule.compiled.findall(sentence)) for sentence in sentences)
    return counts


def tally_document(document: Document, rules: RuleRegistry) -> Dict[str, int]:
    clean_text = clean(document.raw_body)
    return tally(to_words(clean_text), to_sentences(clean_text), rules)


__all__ = ["tally", "tally_document"]
