"""Tabular views and charts built from the speech table."""
from __future__ import annotations

from .frames import party_keyword_rates, records_to_frame, since_year, with_party
from .parties import DEFAULT_PARTY_AFFILIATION, load_party_affiliation

__all__ = [
    "DEFAULT_PARTY_AFFILIATION",
    "load_party_affiliation",
    "party_keyword_rates",
    "records_to_frame",
    "since_year",
    "with_party",
]
