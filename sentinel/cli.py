"""
CLI -- Command interface

Advisory only: shows which repository and branch you are on and how
sensitive it is. Never changes a repository.

    sentinel status              one pass
    sentinel watch               keep polling
    sentinel mark prod           classify the current branch
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union, Callable

from .config import ConfigManager, SentinelError
from .services.git import GitWorkspace
from .presentation.prompts import TerminalPrompter
from .presentation.symbols import get_symbols, safe_print
from .orchestrator.engine import SentinelEngine, UpdateResult
from .orchestrator.scheduler import UpdateScheduler
from .commands.status import StatusCommand
from .commands.track import TrackCommand
from .commands.tint_cmd import TintCommand
from .commands.icons_cmd import IconsCommand
from .commands.rules_cmd import RulesCommand
from .commands.config_cmd import ConfigCommand
from . import __version__


logger = logging.getLogger('sentinel.cli')


class SentinelCLI:
    """Command-line interface for Branch Sentinel."""

    def __init__(
        self,
        workspace_dir: Path,
        focus: Union[str, Callable[[], str], None] = None,
        prompter=None,
        workspace=None,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.workspace_dir = Path(workspace_dir).expanduser().resolve()
        self.config_manager = config_manager or ConfigManager(self.workspace_dir)
        config = self.config_manager.snapshot()

        self.symbols = get_symbols(config.display.symbols)
        self.prompter = prompter or TerminalPrompter(self.symbols)
        self.workspace = workspace or GitWorkspace(self.workspace_dir)

        if focus is None:
            focus = os.getcwd
        self.engine = SentinelEngine(self.config_manager, self.workspace, self.prompter, focus)
        self.scheduler = UpdateScheduler(self.run_update, config.poll_interval)

        self.last_result: Optional[UpdateResult] = None
        self.render_updates = True
        self.render_changes_only = False
        self._last_rendered: Optional[str] = None

        self._status_cmd = StatusCommand(self)
        self._track_cmd = TrackCommand(self)
        self._tint_cmd = TintCommand(self)
        self._icons_cmd = IconsCommand(self)
        self._rules_cmd = RulesCommand(self)
        self._config_cmd = ConfigCommand(self)

    # =========================================================================
    # Update routine
    # =========================================================================

    def run_update(self) -> UpdateResult:
        """The one update routine every trigger funnels into."""
        result = self.engine.update()
        self.last_result = result
        if self.render_updates:
            self.render(result)
        return result

    def refresh(self, render: bool = True) -> Optional[UpdateResult]:
        """Trigger an update pass through the scheduler."""
        previous = self.render_updates
        self.render_updates = render
        try:
            self.scheduler.trigger()
        finally:
            self.render_updates = previous
        return self.last_result

    def format_result(self, result: UpdateResult) -> str:
        lines = []
        if result.active is not None:
            aggregator = self.engine.aggregator(self.config_manager.snapshot())
            mode = result.active_mode
            source = result.active_source.value if result.active_source else "default"
            lines.append(
                f"{aggregator.icon_for(mode)} {result.active.name}{self.symbols.bullet}"
                f"{result.active.branch_label}  {mode.label} ({source})"
            )

        indicator = result.indicator
        if indicator.visible:
            text = indicator.text
            if indicator.background:
                text += f"  [{indicator.background}]"
            lines.append(text)
            for line in indicator.tooltip.splitlines():
                lines.append(f"    {line}")
        return "\n".join(lines)

    def render(self, result: UpdateResult):
        output = self.format_result(result)
        if self.render_changes_only and output == self._last_rendered:
            return
        self._last_rendered = output
        safe_print(output)

    # =========================================================================
    # Delegates
    # =========================================================================

    def status(self):
        return self._status_cmd.status()

    def details(self):
        return self._status_cmd.details()

    def watch(self, interval: float = None):
        return self._status_cmd.watch(interval=interval)

    def track(self):
        return self._track_cmd.pick_pinned_repos()

    def set_tint(self, enabled: bool):
        return self._tint_cmd.set_tint(enabled)

    def pick_icons(self):
        return self._icons_cmd.pick_icons()

    def edit_rules(self):
        return self._rules_cmd.edit_rules()

    def mark(self, mode):
        return self._rules_cmd.mark(mode)


def main(argv=None):
    """
    Main entry point for the sentinel CLI.

    Parser definitions and dispatch logic are in individual command modules.
    """
    parser = argparse.ArgumentParser(
        prog="sentinel",
        description="Branch Sentinel -- which repo and branch you are on, and how careful to be",
    )

    parser.add_argument(
        '--workspace', '-w',
        default=os.environ.get("SENTINEL_WORKSPACE", "."),
        help='Workspace directory (default: SENTINEL_WORKSPACE or current)'
    )
    parser.add_argument(
        '--focus', '-f',
        default=None,
        help='Focused path used to pick the active repo (default: current directory)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'sentinel {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    from .commands import register_all, dispatch
    register_all(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    focus = str(Path(args.focus).expanduser().resolve()) if args.focus else None

    try:
        cli = SentinelCLI(Path(args.workspace), focus=focus)
        cli.workspace.check()
        logger.debug("Dispatching %s in %s", args.command, cli.workspace_dir)
        dispatch(args.command, cli, args)
    except SentinelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"Error: {e}")
        parser.print_help()
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
