"""Static party affiliation reference data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional
import json

# Names as printed in the archive's byline.
DEFAULT_PARTY_AFFILIATION: Mapping[str, str] = {
    "George Washington": "Federalist",
    "John Adams": "Federalist",
    "Thomas Jefferson": "Democratic-Republican",
    "James Madison": "Democratic-Republican",
    "James Monroe": "Democratic-Republican",
    "John Quincy Adams": "National Republican",
    "Andrew Jackson": "Democrat",
    "Martin van Buren": "Democrat",
    "Martin Van Buren": "Democrat",
    "John Tyler": "Whig",
    "James K. Polk": "Democrat",
    "Zachary Taylor": "Whig",
    "Millard Fillmore": "Whig",
    "Franklin Pierce": "Democrat",
    "James Buchanan": "Democrat",
    "Abraham Lincoln": "Republican",
    "Andrew Johnson": "Democrat",
    "Ulysses S. Grant": "Republican",
    "Rutherford B. Hayes": "Republican",
    "Chester A. Arthur": "Republican",
    "Grover Cleveland": "Democrat",
    "Benjamin Harrison": "Republican",
    "William McKinley": "Republican",
    "Theodore Roosevelt": "Republican",
    "William Howard Taft": "Republican",
    "Woodrow Wilson": "Democrat",
    "Warren G. Harding": "Republican",
    "Calvin Coolidge": "Republican",
    "Herbert Hoover": "Republican",
    "Franklin D. Roosevelt": "Democrat",
    "Harry S. Truman": "Democrat",
    "Dwight D. Eisenhower": "Republican",
    "John F. Kennedy": "Democrat",
    "Lyndon B. Johnson": "Democrat",
    "Richard Nixon": "Republican",
    "Gerald R. Ford": "Republican",
    "Jimmy Carter": "Democrat",
    "Ronald Reagan": "Republican",
    "George Bush": "Republican",
    "William J. Clinton": "Democrat",
    "George W. Bush": "Republican",
    "Barack Obama": "Democrat",
    "Donald J. Trump": "Republican",
    "Donald J. Trump (1st Term)": "Republican",
    "Donald J. Trump (2nd Term)": "Republican",
    "Joseph R. Biden": "Democrat",
    "Joseph R. Biden, Jr.": "Democrat",
}


def load_party_affiliation(path: Optional[Path] = None) -> Dict[str, str]:
    """Return the built-in mapping, or the JSON object stored at ``path``."""

    if path is None:
        return dict(DEFAULT_PARTY_AFFILIATION)
    with Path(path).open("r", encoding="utf8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Party affiliation file {path} must contain a JSON object")
    return {str(name): str(party) for name, party in data.items()}


__all__ = ["DEFAULT_PARTY_AFFILIATION", "load_party_affiliation"]
