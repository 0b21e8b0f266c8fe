"""TintCommand — Enable or disable the workspace status bar tint."""

from ..commands.base import BaseCommand
from ..config import TINT_ENABLED_KEY


class TintCommand(BaseCommand):

    def set_tint(self, enabled: bool):
        """
        Toggle the tint and repaint.

        Memo state is cleared so the next pass paints (or clears)
        regardless of what was painted before.
        """
        self.config_manager.update(TINT_ENABLED_KEY, enabled)
        self.engine.reset()
        self.refresh()
        state = "ENABLED" if enabled else "DISABLED"
        self.prompter.show_info(f"Status bar tint {state} (workspace).")


def register_parser(subparsers):
    p = subparsers.add_parser('tint', help='Enable or disable the status bar tint')
    p.add_argument('state', choices=['on', 'off'], help='on or off')
    return p


def handle(cli, args):
    cli._tint_cmd.set_tint(args.state == 'on')
