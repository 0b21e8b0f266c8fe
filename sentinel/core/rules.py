"""
Rules — Per-repository branch patterns for prod/dev/neutral

Storage: sentinel.repo_rules in the workspace config, shaped as

    repo_rules:
      my-service:
        prod: [main, "release/*"]
        dev: [develop]
        neutral: []

A literal branch marked through upsert() lives in exactly one bucket.
Buckets hand-edited through replace() are stored as given.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from .modes import Mode, RULE_MODES


REPO_RULES_KEY = "sentinel.repo_rules"

logger = logging.getLogger('sentinel.rules')


def _dedupe(patterns: List[str]) -> List[str]:
    """Drop case-insensitive repeats, keeping the first spelling."""
    seen = set()
    result = []
    for pattern in patterns:
        key = pattern.lower()
        if key not in seen:
            seen.add(key)
            result.append(pattern)
    return result


def parse_pattern_list(text: str) -> List[str]:
    """Split comma-separated user input into trimmed, non-empty patterns."""
    return [part.strip() for part in text.split(",") if part.strip()]


@dataclass
class RuleSet:
    """Ordered pattern buckets for one repository."""
    prod: List[str] = field(default_factory=list)
    dev: List[str] = field(default_factory=list)
    neutral: List[str] = field(default_factory=list)

    def bucket(self, mode: Mode) -> List[str]:
        if mode not in RULE_MODES:
            raise ValueError(f"No rule bucket for mode '{mode.value}'")
        return getattr(self, mode.value)

    def without(self, branch: str) -> 'RuleSet':
        """Copy with branch removed (case-insensitive) from every bucket."""
        needle = branch.lower()
        return RuleSet(
            prod=[p for p in self.prod if p.lower() != needle],
            dev=[p for p in self.dev if p.lower() != needle],
            neutral=[p for p in self.neutral if p.lower() != needle],
        )

    @property
    def is_empty(self) -> bool:
        return not (self.prod or self.dev or self.neutral)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "prod": list(self.prod),
            "dev": list(self.dev),
            "neutral": list(self.neutral),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RuleSet':
        if not isinstance(data, dict):
            data = {}

        def patterns(key: str) -> List[str]:
            value = data.get(key) or []
            if isinstance(value, str):
                value = [value]
            elif not isinstance(value, list):
                return []
            return [str(p) for p in value if p]

        return cls(
            prod=patterns("prod"),
            dev=patterns("dev"),
            neutral=patterns("neutral"),
        )


class RuleResolver:
    """
    Reads and mutates repo rules through the configuration store.

    The store only needs get(key, default) and update(key, value).
    """

    def __init__(self, store):
        self.store = store

    def all(self) -> Dict[str, RuleSet]:
        raw = self.store.get(REPO_RULES_KEY, {}) or {}
        return {name: RuleSet.from_dict(rules) for name, rules in raw.items()}

    def find(self, repo_name: str) -> Optional[RuleSet]:
        """RuleSet for a repository, or None when it has none configured."""
        raw = self.store.get(REPO_RULES_KEY, {}) or {}
        if repo_name not in raw:
            return None
        return RuleSet.from_dict(raw[repo_name])

    def get(self, repo_name: str) -> RuleSet:
        """RuleSet for a repository; three empty buckets if absent."""
        return self.find(repo_name) or RuleSet()

    def upsert(self, mode: Mode, repo_name: str, branch: str) -> RuleSet:
        """
        Classify a literal branch for a repository.

        Removes the branch from all buckets, then appends it to the
        bucket for mode. Applying the same call twice is a no-op.

        Returns:
            The repository's updated RuleSet
        """
        b = branch.strip()
        rules = self.get(repo_name).without(b)
        bucket = rules.bucket(mode)
        bucket.append(b)
        bucket[:] = _dedupe(bucket)

        self._save(repo_name, rules)
        logger.debug("Marked %s:%s as %s", repo_name, b, mode.value)
        return rules

    def replace(self, repo_name: str, rules: RuleSet) -> RuleSet:
        """Overwrite a repository's RuleSet (deduplicated per bucket)."""
        cleaned = RuleSet(
            prod=_dedupe(rules.prod),
            dev=_dedupe(rules.dev),
            neutral=_dedupe(rules.neutral),
        )
        self._save(repo_name, cleaned)
        return cleaned

    def _save(self, repo_name: str, rules: RuleSet):
        raw = dict(self.store.get(REPO_RULES_KEY, {}) or {})
        raw[repo_name] = rules.to_dict()
        self.store.update(REPO_RULES_KEY, raw)
