"""
Patterns — Wildcard matching for branch rules

Patterns are compared case-insensitively after trimming.
A '*' splits the pattern into segments that must appear in order,
anywhere in the branch name (unanchored):

    matches_pattern("foo-release-x", "rel*x")  -> True
    matches_pattern("main", "*")               -> True
    matches_pattern("main", "Main")            -> True
"""

from typing import Iterable, Optional


WILDCARD = "*"


def matches_pattern(branch: str, pattern: str) -> bool:
    """
    Check a branch name against a single pattern.

    Args:
        branch: Branch name to test
        pattern: Exact name or '*' pattern

    Returns:
        True if the branch matches
    """
    b = branch.lower()
    p = pattern.lower().strip()
    if not p:
        return False

    if WILDCARD not in p:
        return b == p

    segments = [s for s in p.split(WILDCARD) if s]
    if not segments:
        return True  # bare wildcard

    position = 0
    for segment in segments:
        found = b.find(segment, position)
        if found == -1:
            return False
        position = found + len(segment)
    return True


def list_matches(branch: Optional[str], patterns: Optional[Iterable[str]]) -> bool:
    """True if any pattern matches. Absent branch or no patterns never match."""
    if not branch or not patterns:
        return False
    return any(matches_pattern(branch, p) for p in patterns)
