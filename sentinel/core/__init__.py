"""Core classification layer: patterns, rules, modes."""

from .modes import Mode, RuleSource, RULE_MODES, SEVERITY_RANK, most_severe, parse_rule_mode
from .patterns import matches_pattern, list_matches
from .repos import RepositorySnapshot, DETACHED
from .rules import RuleSet, RuleResolver, parse_pattern_list, REPO_RULES_KEY
from .classifier import ModeClassifier, classify, rule_source

__all__ = [
    'Mode', 'RuleSource', 'RULE_MODES', 'SEVERITY_RANK', 'most_severe', 'parse_rule_mode',
    'matches_pattern', 'list_matches',
    'RepositorySnapshot', 'DETACHED',
    'RuleSet', 'RuleResolver', 'parse_pattern_list', 'REPO_RULES_KEY',
    'ModeClassifier', 'classify', 'rule_source',
]
