"""
Branch Sentinel — Know which branch you are on before you type

An always-visible, advisory signal of the active repository and branch
in a multi-repository workspace, and whether that branch is prod, dev,
neutral, local-only or unknown.

Usage:
    sentinel status
    sentinel watch
    sentinel track
    sentinel mark prod
    sentinel rules
    sentinel icons
    sentinel tint off
    sentinel config
"""

__version__ = "0.1.0"

# Core layer (classification)
from .core.modes import Mode, RuleSource, SEVERITY_RANK
from .core.patterns import matches_pattern, list_matches
from .core.repos import RepositorySnapshot
from .core.rules import RuleSet, RuleResolver
from .core.classifier import ModeClassifier, classify

# Config (stays at root)
from .config import ConfigManager, SentinelConfig, SentinelError, get_config

# Tracking layer
from .tracking.tint import TintStateMachine
from .tracking.advisory import WarningDeduplicator

# Presentation layer
from .presentation.display import DisplayAggregator, IndicatorState, choose_active
from .presentation.symbols import get_symbols, SymbolSet, UNICODE, ASCII

# Services and orchestration
from .services.git import GitWorkspace
from .orchestrator import SentinelEngine, EngineState, UpdateScheduler

__all__ = [
    # Core
    'Mode', 'RuleSource', 'SEVERITY_RANK',
    'matches_pattern', 'list_matches',
    'RepositorySnapshot', 'RuleSet', 'RuleResolver',
    'ModeClassifier', 'classify',
    # Config
    'ConfigManager', 'SentinelConfig', 'SentinelError', 'get_config',
    # Tracking
    'TintStateMachine', 'WarningDeduplicator',
    # Presentation
    'DisplayAggregator', 'IndicatorState', 'choose_active',
    'get_symbols', 'SymbolSet', 'UNICODE', 'ASCII',
    # Services / orchestration
    'GitWorkspace', 'SentinelEngine', 'EngineState', 'UpdateScheduler',
]
