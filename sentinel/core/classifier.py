"""
Classifier — Resolve a repository snapshot to a Mode

Policy, in order:
1. No remote            -> local (overrides rules)
2. Repo rules           -> prod, then dev, then neutral (fixed priority)
3. Built-in defaults    -> main/master = prod, dev = dev, else unknown
"""

from typing import Mapping, Optional

from .modes import Mode, RuleSource
from .patterns import list_matches
from .repos import RepositorySnapshot
from .rules import RuleSet, RuleResolver


DEFAULT_PROD_BRANCHES = ("main", "master")
DEFAULT_DEV_BRANCHES = ("dev",)


def match_rules(branch: Optional[str], rules: Optional[RuleSet]) -> Optional[Mode]:
    """Mode from the first matching bucket, or None if no rule applies."""
    if rules is None or not branch:
        return None
    if list_matches(branch, rules.prod):
        return Mode.PROD
    if list_matches(branch, rules.dev):
        return Mode.DEV
    if list_matches(branch, rules.neutral):
        return Mode.NEUTRAL
    return None


def default_mode(branch: Optional[str]) -> Mode:
    b = (branch or "").lower()
    if b in DEFAULT_PROD_BRANCHES:
        return Mode.PROD
    if b in DEFAULT_DEV_BRANCHES:
        return Mode.DEV
    return Mode.UNKNOWN


def classify(snapshot: RepositorySnapshot, rules: Optional[RuleSet]) -> Mode:
    """
    Classify a repository snapshot.

    Args:
        snapshot: Repository as reported by the VCS collaborator
        rules: The repository's RuleSet, or None if it has none

    Returns:
        The repository's Mode
    """
    if not snapshot.has_remote:
        return Mode.LOCAL

    ruled = match_rules(snapshot.branch, rules)
    if ruled is not None:
        return ruled

    return default_mode(snapshot.branch)


def rule_source(branch: Optional[str], rules: Optional[RuleSet]) -> RuleSource:
    """Diagnostic: did a repo rule decide this branch, or the defaults?"""
    if match_rules(branch, rules) is not None:
        return RuleSource.RULE
    return RuleSource.DEFAULT


class ModeClassifier:
    """
    Classifier over one read of the repo rules.

    Build one per update cycle so every repository is classified
    against the same rules.
    """

    def __init__(self, repo_rules: Optional[Mapping[str, RuleSet]] = None):
        self.repo_rules = dict(repo_rules or {})

    @classmethod
    def from_resolver(cls, resolver: RuleResolver) -> 'ModeClassifier':
        return cls(resolver.all())

    def classify(self, snapshot: RepositorySnapshot) -> Mode:
        return classify(snapshot, self.repo_rules.get(snapshot.name))

    def rule_source(self, repo_name: str, branch: Optional[str]) -> RuleSource:
        return rule_source(branch, self.repo_rules.get(repo_name))
