"""
IconsCommand — Pick the prod/dev/neutral icons

Three prompts in a row. Cancelling any of them leaves every icon as
it was.
"""

from ..commands.base import BaseCommand
from ..config import ICON_PROD_KEY, ICON_DEV_KEY, ICON_NEUTRAL_KEY
from ..presentation.symbols import ICON_CHOICES


class IconsCommand(BaseCommand):

    def pick_icons(self):
        icons = self.config_manager.snapshot().icons

        def pick(label: str, current: str):
            return self.prompter.choose_one(
                list(ICON_CHOICES),
                title=f"Pick icon for {label}",
                placeholder=f"Current: {current}",
            )

        prod = pick("PROD", icons.prod)
        if not prod:
            return None
        dev = pick("DEV", icons.dev)
        if not dev:
            return None
        neutral = pick("NEUTRAL", icons.neutral)
        if not neutral:
            return None

        self.config_manager.update(ICON_PROD_KEY, prod)
        self.config_manager.update(ICON_DEV_KEY, dev)
        self.config_manager.update(ICON_NEUTRAL_KEY, neutral)

        self.prompter.show_info("Icons updated (workspace).")
        self.refresh()
        return prod, dev, neutral


COMMAND_NAME = 'icons'


def register_parser(subparsers):
    return subparsers.add_parser('icons', help='Pick icons for prod/dev/neutral')


def handle(cli, args):
    cli._icons_cmd.pick_icons()
