"""
TrackCommand — Choose which other repositories the indicator shows

Any repository may be picked, including the active one: the display
hides the active repository on its own, so picking it is harmless and
keeps the choice stable when focus moves between repositories.
"""

from ..commands.base import BaseCommand
from ..config import PINNED_KEY
from ..presentation.prompts import PickItem


class TrackCommand(BaseCommand):
    """Multi-select picker for sentinel.pinned_repos."""

    def pick_pinned_repos(self):
        repos = self.workspace.snapshots()
        if not repos:
            self.prompter.show_info("No Git repositories detected.")
            return None

        current = set(self.config_manager.snapshot().pinned_repos)
        items = [
            PickItem(
                label=r.name,
                description=r.branch_label,
                detail=None if r.has_remote else "local-only (no remote)",
                picked=r.name in current,
            )
            for r in repos
        ]

        selected = self.prompter.choose_many(
            items,
            placeholder="Select repos to track (active repo is hidden from this display automatically)",
        )
        if selected is None:
            return None

        self.config_manager.update(PINNED_KEY, selected)
        self.prompter.show_info(f"Tracking {len(selected)} repo(s).")
        self.refresh()
        return selected


COMMAND_NAME = 'track'


def register_parser(subparsers):
    return subparsers.add_parser('track', help='Select which other repos to track')


def handle(cli, args):
    cli._track_cmd.pick_pinned_repos()
