"""Keyword tallying and table aggregation."""
from __future__ import annotations

from .aggregate import analyze_document, build_table
from .rules import RuleRegistry, default_rules, load_rules
from .tally import tally, tally_document

__all__ = [
    "RuleRegistry",
    "analyze_document",
    "build_table",
    "default_rules",
    "load_rules",
    "tally",
    "tally_document",
]
