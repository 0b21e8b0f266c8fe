"""
SentinelEngine — The update routine

One pass:
    repositories -> classify each
                 -> tint + advisory for the active repository
                 -> indicator state for the pinned repositories

The engine is long-lived: it owns the memo state of the tint
(last painted mode) and of the advisory (last warned key).
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from ..config import ConfigManager, SentinelConfig
from ..core.classifier import ModeClassifier
from ..core.modes import Mode, RuleSource
from ..core.repos import RepositorySnapshot
from ..core.rules import RuleResolver
from ..presentation.display import DisplayAggregator, IndicatorState, choose_active
from ..presentation.symbols import get_symbols
from ..tracking.advisory import WarningDeduplicator
from ..tracking.tint import TintStateMachine


logger = logging.getLogger('sentinel.engine')


@dataclass
class EngineState:
    """Memo state carried between update passes."""
    last_applied_mode: Optional[Mode] = None
    last_observed_key: Optional[str] = None


@dataclass
class UpdateResult:
    """Everything one update pass produced."""
    indicator: IndicatorState
    repos: List[RepositorySnapshot] = field(default_factory=list)
    active: Optional[RepositorySnapshot] = None
    active_mode: Optional[Mode] = None
    active_source: Optional[RuleSource] = None
    modes: Dict[str, Mode] = field(default_factory=dict)
    advisory: Optional[str] = None
    tinted: bool = False


class SentinelEngine:
    """
    Runs update passes against the workspace's collaborators.

    Args:
        config_manager: Key-value config store (also holds the tint map)
        workspace: Anything with snapshots() -> List[RepositorySnapshot]
        prompter: Anything with show_warning(message)
        focus: Focused path, or a callable returning it
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        workspace,
        prompter,
        focus: Union[str, Callable[[], str]] = "",
    ):
        self.config_manager = config_manager
        self.workspace = workspace
        self.prompter = prompter
        self._focus = focus

        self.rules = RuleResolver(config_manager)
        self.tint = TintStateMachine(config_manager)
        self.advisor = WarningDeduplicator(prompter.show_warning)

    @property
    def focus_path(self) -> str:
        return self._focus() if callable(self._focus) else self._focus

    @property
    def state(self) -> EngineState:
        return EngineState(
            last_applied_mode=self.tint.last_applied_mode,
            last_observed_key=self.advisor.last_key,
        )

    def reset(self):
        """Clear memo state; the next pass repaints and may warn again."""
        self.tint.reset()
        self.advisor.reset()

    def snapshot_config(self) -> SentinelConfig:
        # Re-read the file so external edits are picked up between polls
        self.config_manager.reload()
        return self.config_manager.snapshot()

    def aggregator(self, config: SentinelConfig) -> DisplayAggregator:
        return DisplayAggregator(get_symbols(config.display.symbols), config.icons)

    def active_repo(self, repos: Optional[List[RepositorySnapshot]] = None) -> Optional[RepositorySnapshot]:
        if repos is None:
            repos = self.workspace.snapshots()
        return choose_active(repos, self.focus_path)

    def update(self) -> UpdateResult:
        """Run one update pass."""
        config = self.snapshot_config()
        aggregator = self.aggregator(config)
        self.advisor.arrow = aggregator.symbols.arrow

        repos = self.workspace.snapshots()
        if not repos:
            logger.debug("No repositories in workspace")
            return UpdateResult(indicator=aggregator.no_repos())

        classifier = ModeClassifier(config.repo_rules)
        modes = {}
        sources = {}
        for repo in repos:
            modes.setdefault(repo.name, classifier.classify(repo))
            sources.setdefault(repo.name, classifier.rule_source(repo.name, repo.branch))

        active = choose_active(repos, self.focus_path)
        active_mode = classifier.classify(active)

        tinted = self.tint.apply(active_mode, config.tint_enabled)
        advisory = self.advisor.maybe_warn(active.name, active.branch, active_mode)

        indicator = aggregator.build(repos, config.pinned_repos, active, modes, sources)

        logger.debug("Active %s:%s is %s", active.name, active.branch_label, active_mode.value)
        return UpdateResult(
            indicator=indicator,
            repos=repos,
            active=active,
            active_mode=active_mode,
            active_source=classifier.rule_source(active.name, active.branch),
            modes=modes,
            advisory=advisory,
            tinted=tinted,
        )
