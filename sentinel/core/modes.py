"""
Modes — Classification vocabulary for the active branch

Severity order (highest first):
    prod > unknown > dev > local > neutral
"""

from enum import Enum
from typing import Dict, Iterable, Optional


class Mode(Enum):
    """Classification of a repository's current branch."""
    PROD = "prod"
    DEV = "dev"
    NEUTRAL = "neutral"
    UNKNOWN = "unknown"
    LOCAL = "local"

    @property
    def severity(self) -> int:
        return SEVERITY_RANK[self]

    @property
    def label(self) -> str:
        return self.value.upper()


# Modes a user can assign through a rule
RULE_MODES = (Mode.PROD, Mode.DEV, Mode.NEUTRAL)

SEVERITY_RANK: Dict[Mode, int] = {
    Mode.PROD: 5,
    Mode.UNKNOWN: 4,
    Mode.DEV: 3,
    Mode.LOCAL: 2,
    Mode.NEUTRAL: 1,
}


class RuleSource(Enum):
    """Whether a classification came from a repo rule or the built-in defaults."""
    RULE = "rule"
    DEFAULT = "default"


def parse_rule_mode(value: str) -> Mode:
    """
    Parse a user-supplied rule mode name.

    Raises:
        ValueError: If value is not prod, dev or neutral
    """
    try:
        mode = Mode(value.strip().lower())
    except ValueError:
        mode = None
    if mode not in RULE_MODES:
        valid = ", ".join(m.value for m in RULE_MODES)
        raise ValueError(f"Unknown rule mode '{value}'. Valid: {valid}")
    return mode


def most_severe(modes: Iterable[Mode]) -> Optional[Mode]:
    """
    Highest-severity mode, or None for an empty input.

    Ties keep the first occurrence, so callers passing modes in display
    order get the first displayed entry.
    """
    worst = None
    for mode in modes:
        if worst is None or mode.severity > worst.severity:
            worst = mode
    return worst
