"""Sentence and word segmentation of cleaned speech text.

Paragraphs are segmented independently and the results concatenated, so a
paragraph break always closes a sentence.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple, Union
import re

TextInput = Union[str, Sequence[str]]

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+(?=[A-Z])")
_CLAUSE_PUNCTUATION = re.compile(r"[.?,!:;]")
_EM_DASH = "—"


def _paragraphs(text: TextInput) -> Tuple[str, ...]:
    if isinstance(text, str):
        return (text,)
    return tuple(text)


def to_sentences(text: TextInput) -> List[str]:
    """Split ``text`` after ``.``, ``?`` or ``!`` when an uppercase letter follows."""

    sentences: List[str] = []
    for paragraph in _paragraphs(text):
        for fragment in _SENTENCE_BOUNDARY.split(paragraph):
            fragment = fragment.strip()
            if fragment:
                sentences.append(fragment)
    return sentences


def to_words(text: TextInput) -> List[str]:
    """Split ``text`` into words, dropping clause punctuation and em-dashes."""

    words: List[str] = []
    for paragraph in _paragraphs(text):
        stripped = _CLAUSE_PUNCTUATION.sub("", paragraph).replace(_EM_DASH, " ")
        # str.split() without arguments never yields empty tokens
        words.extend(stripped.split())
    return words


__all__ = ["TextInput", "to_sentences", "to_words"]
