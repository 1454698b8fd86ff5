"""Keyword rule registry used by the tally engine."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping, Sequence, Tuple
import json
import logging
import re

from ..core.errors import RuleConfigurationError
from ..core.types import KeywordRule, RuleKind

LOGGER = logging.getLogger(__name__)

_RULE_KINDS: Tuple[str, ...] = ("token", "phrase")

# (pattern, label, kind); token patterns must match a whole word
_DEFAULT_RULES: Sequence[Tuple[str, str, RuleKind]] = (
    (r"^(America|American|Americans|America's)$", "america", "token"),
    (r"^(freedom|Freedom|liberty|Liberty)$", "freedom", "token"),
    (r"^(war|War|wars|Wars)$", "war", "token"),
    (r"^(economy|Economy|economic|Economic)$", "economy", "token"),
    (r"^(we|We|us|Us|our|Our)$", "we", "token"),
    (r"^(I|me|Me|my|My)$", "i", "token"),
    (r"^(God|God's)$", "god", "token"),
    (r"God bless|god bless|GOD BLESS", "god_bless", "phrase"),
)


class RuleRegistry:
    """Ordered collection of compiled :class:`KeywordRule` objects."""

    def __init__(self, rules: Iterable[KeywordRule] = ()) -> None:
        self._rules: List[KeywordRule] = []
        for rule in rules:
            self.add(rule.pattern, rule.label, rule.kind)

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> "RuleRegistry":
        registry = cls()
        for index, entry in enumerate(entries):
            try:
                pattern = entry["pattern"]
                label = entry["label"]
            except (KeyError, TypeError) as exc:
                raise RuleConfigurationError(f"Rule #{index} needs 'pattern' and 'label' entries") from exc
            registry.add(pattern, label, entry.get("kind", "token"))
        return registry

    def add(self, pattern: str, label: str, kind: str = "token") -> KeywordRule:
        """Compile and append a rule; invalid rules raise immediately."""

        if kind not in _RULE_KINDS:
            raise RuleConfigurationError(f"Rule {label!r} has unknown kind {kind!r}")
        if not label:
            raise RuleConfigurationError(f"Rule with pattern {pattern!r} has no label")
        if label in self.labels:
            raise RuleConfigurationError(f"Duplicate rule label {label!r}")
        try:
            compiled = re.compile(pattern)
        except (re.error, TypeError) as exc:
            raise RuleConfigurationError(f"Rule {label!r} has an invalid pattern {pattern!r}: {exc}") from exc
        rule = KeywordRule(pattern=pattern, label=label, kind=kind, compiled=compiled)  # type: ignore[arg-type]
        self._rules.append(rule)
        return rule

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(rule.label for rule in self._rules)

    @property
    def token_rules(self) -> Tuple[KeywordRule, ...]:
        return tuple(rule for rule in self._rules if rule.kind == "token")

    @property
    def phrase_rules(self) -> Tuple[KeywordRule, ...]:
        return tuple(rule for rule in self._rules if rule.kind == "phrase")

    def __iter__(self) -> Iterator[KeywordRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"RuleRegistry(labels={self.labels!r})"


def default_rules() -> RuleRegistry:
    registry = RuleRegistry()
    for pattern, label, kind in _DEFAULT_RULES:
        registry.add(pattern, label, kind)
    return registry


def load_rules(path: Path) -> RuleRegistry:
    """Read a JSON list of ``{"label", "pattern", "kind"}`` objects."""

    try:
        with Path(path).open("r", encoding="utf8") as fh:
            entries: Any = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise RuleConfigurationError(f"Cannot read keyword rules from {path}: {exc}") from exc
    if not isinstance(entries, list):
        raise RuleConfigurationError(f"Keyword rules in {path} must be a JSON list")
    registry = RuleRegistry.from_entries(entries)
    LOGGER.info("Loaded %s keyword rules from %s", len(registry), path)
    return registry


__all__ = ["RuleRegistry", "default_rules", "load_rules"]
