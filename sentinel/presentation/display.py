"""
Display — Indicator state for the tracked (pinned) repositories

The indicator never shows the active repository: it shows the other
repositories the user pinned, at most MAX_SHOWN inline, and colours
itself by the most severe mode among those shown.

    + ⛨ api•main | ⚒ payments-g…•dev +3

The tooltip lists every pinned repository that is present, unclipped.
"""

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..config import IconConfig
from ..core.modes import Mode, RuleSource, most_severe
from ..core.repos import RepositorySnapshot
from .symbols import SymbolSet, get_symbols, truncate_name, ICON_LOCAL, ICON_UNKNOWN, ICON_SELECT


MAX_SHOWN = 2
NAME_LENGTH = 10

# Theme colour ids for the indicator background
BACKGROUND_FOR_MODE: Dict[Mode, str] = {
    Mode.PROD: "statusBarItem.errorBackground",
    Mode.UNKNOWN: "statusBarItem.warningBackground",
    Mode.DEV: "statusBarItem.prominentBackground",
}

# Click target
TRACK_COMMAND = "track"


@dataclass
class IndicatorState:
    """What the indicator widget should show this cycle."""
    text: str
    tooltip: str
    background: Optional[str] = None
    visible: bool = True
    command: Optional[str] = TRACK_COMMAND
    shown: int = 0        # entries rendered inline
    remaining: int = 0    # entries behind the +N suffix

    @property
    def is_prompt(self) -> bool:
        return self.visible and self.shown == 0 and self.command == TRACK_COMMAND


def background_for(mode: Optional[Mode]) -> Optional[str]:
    if mode is None:
        return None
    return BACKGROUND_FOR_MODE.get(mode)


def _contains(root: str, path: str) -> bool:
    """True when path is root itself or lies below it (whole components only)."""
    root = root.rstrip("/" + os.sep)
    if not root or path == root:
        return True
    return any(path.startswith(root + sep) for sep in {os.sep, "/"})


def choose_active(repos: Sequence[RepositorySnapshot], focus_path: str) -> Optional[RepositorySnapshot]:
    """
    Repository containing the focused path, else the first repository.

    When nested roots both prefix the path (a workspace repo holding
    other repos), the longest root wins.
    """
    if not repos:
        return None

    candidates = [r for r in repos if focus_path and _contains(r.path, focus_path)]
    if candidates:
        return max(candidates, key=lambda r: len(r.path))
    return repos[0]


class DisplayAggregator:
    """Builds IndicatorState from a snapshot list, pins and per-repo modes."""

    def __init__(self, symbols: Optional[SymbolSet] = None, icons: Optional[IconConfig] = None):
        self.symbols = symbols or get_symbols()
        self.icons = icons or IconConfig()

    def icon_for(self, mode: Mode) -> str:
        if mode == Mode.PROD:
            return self.symbols.icon(self.icons.prod)
        if mode == Mode.DEV:
            return self.symbols.icon(self.icons.dev)
        if mode == Mode.NEUTRAL:
            return self.symbols.icon(self.icons.neutral)
        if mode == Mode.LOCAL:
            return self.symbols.icon(ICON_LOCAL)
        return self.symbols.icon(ICON_UNKNOWN)

    def no_repos(self) -> IndicatorState:
        return IndicatorState(
            text=f"{self.symbols.branch} No Git repo",
            tooltip="Branch Sentinel: No Git repositories detected.",
        )

    def select_prompt(self, tooltip: str) -> IndicatorState:
        return IndicatorState(
            text=f"{self.symbols.icon(ICON_SELECT)} select repos",
            tooltip=tooltip,
        )

    def resolve_pinned(
        self,
        repos: Sequence[RepositorySnapshot],
        pinned: Sequence[str],
        active: RepositorySnapshot,
    ) -> List[RepositorySnapshot]:
        """Pinned names minus the active repo, mapped onto present repositories."""
        by_name: Dict[str, RepositorySnapshot] = {}
        for repo in repos:
            by_name.setdefault(repo.name, repo)
        return [by_name[n] for n in pinned if n != active.name and n in by_name]

    def entry(self, repo: RepositorySnapshot, mode: Mode) -> str:
        name = truncate_name(repo.name, NAME_LENGTH, self.symbols)
        return f"{self.icon_for(mode)} {name}{self.symbols.bullet}{repo.branch_label}"

    def tooltip_line(self, repo: RepositorySnapshot, mode: Mode, source: RuleSource) -> str:
        return f"{self.icon_for(mode)} {repo.name}: {repo.branch_label} [{source.value}, {repo.remote_label}]"

    def build(
        self,
        repos: Sequence[RepositorySnapshot],
        pinned: Sequence[str],
        active: RepositorySnapshot,
        modes: Dict[str, Mode],
        sources: Optional[Dict[str, RuleSource]] = None,
    ) -> IndicatorState:
        """
        Indicator state for the tracked repositories.

        Args:
            repos: Every repository in the workspace
            pinned: User's pinned names (may include the active repo)
            active: The active repository (never displayed)
            modes: Mode per repository name
            sources: Rule source per repository name (tooltip only)
        """
        sources = sources or {}

        others_exist = any(r.name != active.name for r in repos)
        if not others_exist:
            return IndicatorState(text="", tooltip="", visible=False, command=None)

        if not pinned:
            return self.select_prompt(
                "Branch Sentinel:\nClick to select repos to track.\n"
                "(Active repo is hidden from this display automatically.)"
            )

        selected = self.resolve_pinned(repos, pinned, active)
        if not selected:
            return self.select_prompt(
                "Branch Sentinel:\nNothing to display (your tracked repo is currently active, "
                "or not in this workspace).\nClick to update selection."
            )

        def mode_of(repo: RepositorySnapshot) -> Mode:
            return modes.get(repo.name, Mode.UNKNOWN)

        shown = selected[:MAX_SHOWN]
        remaining = len(selected) - len(shown)

        parts = [self.entry(r, mode_of(r)) for r in shown]
        suffix = f" +{remaining}" if remaining > 0 else ""
        text = f"+ {' | '.join(parts)}{suffix}"

        worst = most_severe(mode_of(r) for r in shown)

        tooltip = "\n".join(
            self.tooltip_line(r, mode_of(r), sources.get(r.name, RuleSource.DEFAULT))
            for r in selected
        )

        return IndicatorState(
            text=text,
            tooltip=tooltip,
            background=background_for(worst),
            shown=len(shown),
            remaining=remaining,
        )

    def details(self, active: RepositorySnapshot, mode: Mode, source: RuleSource) -> str:
        """Detail view of the active repository."""
        lines = [
            f"{self.icon_for(mode)} {active.name}",
            f"  Branch: {active.branch_label}",
            f"  Mode: {mode.label} ({source.value})",
            f"  Remote: {'yes' if active.has_remote else 'no (local-only)'}",
            f"  Path: {active.path}",
        ]
        return "\n".join(lines)
