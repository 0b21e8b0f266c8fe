"""
RulesCommand — Edit and mark branch rules for the active repository

- rules: edit the three pattern lists (comma-separated, '*' wildcards)
- mark:  classify the current branch as prod, dev or neutral

Both abandon without writing anything when a prompt is cancelled or
the active repository has no branch (detached HEAD).
"""

from typing import Optional, Tuple

from ..commands.base import BaseCommand
from ..core.modes import Mode, RULE_MODES, parse_rule_mode
from ..core.repos import RepositorySnapshot
from ..core.rules import RuleSet, parse_pattern_list


class RulesCommand(BaseCommand):

    def _active(self) -> Optional[RepositorySnapshot]:
        repos = self.workspace.snapshots()
        if not repos:
            self.prompter.show_info("No Git repositories detected.")
            return None
        return self.engine.active_repo(repos)

    def _active_with_branch(self) -> Optional[Tuple[RepositorySnapshot, str]]:
        active = self._active()
        if active is None:
            return None
        if not active.branch:
            self.prompter.show_warning("No branch detected (detached HEAD?).")
            return None
        return active, active.branch

    def edit_rules(self) -> Optional[RuleSet]:
        active = self._active()
        if active is None:
            return None

        existing = self.rules.get(active.name)

        def ask(label: str, current):
            return self.prompter.ask_text(
                title=f"Repo rules for {active.name}",
                prompt=f"{label} branches (comma-separated, supports * wildcards)",
                value=", ".join(current),
            )

        prod = ask("PROD", existing.prod)
        if prod is None:
            return None
        dev = ask("DEV", existing.dev)
        if dev is None:
            return None
        neutral = ask("NEUTRAL", existing.neutral)
        if neutral is None:
            return None

        saved = self.rules.replace(active.name, RuleSet(
            prod=parse_pattern_list(prod),
            dev=parse_pattern_list(dev),
            neutral=parse_pattern_list(neutral),
        ))

        self.prompter.show_info(f"Repo rules saved for {active.name} (workspace).")
        self.refresh()
        return saved

    def mark(self, mode: Mode) -> Optional[RuleSet]:
        """Upsert the active repository's current branch into mode's bucket."""
        if mode not in RULE_MODES:
            raise ValueError(f"Cannot mark a branch as {mode.value}")

        ctx = self._active_with_branch()
        if ctx is None:
            return None
        repo, branch = ctx

        rules = self.rules.upsert(mode, repo.name, branch)
        self.prompter.show_info(f"Marked {repo.name} {self.symbols.arrow} {branch} as {mode.label}.")
        self.refresh()
        return rules


COMMAND_NAMES = ['rules', 'mark']


def register_parser(subparsers):
    """Register rules and mark command parsers."""
    p1 = subparsers.add_parser('rules', help="Edit the active repo's branch rules")

    p2 = subparsers.add_parser('mark', help='Mark the current branch as prod, dev or neutral')
    p2.add_argument('mode', choices=[m.value for m in RULE_MODES], help='Rule bucket')

    return p1, p2


def handle(cli, args):
    """Handle rules or mark command dispatch."""
    if args.command == 'rules':
        cli._rules_cmd.edit_rules()
    elif args.command == 'mark':
        cli._rules_cmd.mark(parse_rule_mode(args.mode))
