"""
StatusCommand — Show the indicator once, continuously, or in detail

- status:  one update pass, rendered
- watch:   poll until interrupted, re-rendering on change
- details: the active repository in detail (single-repo view)
"""

import logging

from ..commands.base import BaseCommand
from ..orchestrator.scheduler import UpdateScheduler


logger = logging.getLogger('sentinel.commands.status')


class StatusCommand(BaseCommand):
    """Read-only views of the workspace state."""

    def status(self):
        """Run one update pass and print the indicator."""
        return self.refresh()

    def details(self):
        """Print the active repository's classification in detail."""
        result = self._cli.refresh(render=False)
        if result is None or result.active is None:
            self.prompter.show_info("No Git repositories detected.")
            return None

        aggregator = self.engine.aggregator(self.config_manager.snapshot())
        print(aggregator.details(result.active, result.active_mode, result.active_source))
        return result

    def watch(self, interval: float = None):
        """
        Poll the workspace until Ctrl-C.

        Args:
            interval: Seconds between polls (default: config poll_interval)
        """
        if interval is None:
            interval = self.config_manager.snapshot().poll_interval

        scheduler = UpdateScheduler(self._cli.run_update, interval)
        self._cli.scheduler = scheduler
        self._cli.render_changes_only = True

        print(f"Watching {self.workspace_dir} every {interval:g}s (Ctrl-C to stop)")
        logger.debug("Polling every %ss", interval)
        scheduler.start()
        try:
            while not scheduler.wait(0.5):
                pass
        except KeyboardInterrupt:
            print("\nStopped.")
        finally:
            scheduler.stop()

        logger.debug("Watch stopped after %d update(s)", scheduler.runs)
        if scheduler.error is not None:
            raise scheduler.error


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAMES = ['status', 'details', 'watch']


def register_parser(subparsers):
    """Register status, details and watch command parsers."""
    subparsers.add_parser('status', help='Show active branch and tracked repos')
    subparsers.add_parser('details', help='Show the active repository in detail')

    p = subparsers.add_parser('watch', help='Keep polling and show changes')
    p.add_argument('--interval', '-i', type=float, default=None,
                   help='Seconds between polls (default: sentinel.poll_interval)')
    return p


def handle(cli, args):
    """Handle status, details or watch command dispatch."""
    if args.command == 'status':
        cli._status_cmd.status()
    elif args.command == 'details':
        cli._status_cmd.details()
    elif args.command == 'watch':
        cli._status_cmd.watch(interval=args.interval)
