"""
BaseCommand — Shared foundation for all CLI commands

Commands receive the CLI instance and access its resources through
properties instead of building their own.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..cli import SentinelCLI


class BaseCommand:
    """Base class for CLI commands with access to shared resources."""

    def __init__(self, cli: 'SentinelCLI'):
        self._cli = cli

    @property
    def workspace_dir(self):
        """Workspace root directory."""
        return self._cli.workspace_dir

    @property
    def config_manager(self):
        """Workspace configuration store."""
        return self._cli.config_manager

    @property
    def workspace(self):
        """Repository enumeration (GitWorkspace)."""
        return self._cli.workspace

    @property
    def engine(self):
        """Update routine and its memo state."""
        return self._cli.engine

    @property
    def rules(self):
        """RuleResolver bound to the config store."""
        return self._cli.engine.rules

    @property
    def prompter(self):
        """Interactive prompts (show info / warning / choose)."""
        return self._cli.prompter

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    def refresh(self):
        """Re-run the update routine after a mutation."""
        return self._cli.refresh()
