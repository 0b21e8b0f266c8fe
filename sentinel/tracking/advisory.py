"""
Advisory — One warning per arrival on a production branch

Every observation of the active repository records its "repo:branch"
key. A warning is emitted when the mode is prod and the key differs
from the previous observation, so it re-arms only when the user moves
to another repository or branch:

    api:main prod     -> warn
    api:main dev      -> quiet (same key)
    api:main prod     -> quiet (same key)
    api:feature dev   -> quiet, key changes
    api:main prod     -> warn
"""

import logging
from typing import Callable, Optional

from ..core.modes import Mode
from ..core.repos import DETACHED


logger = logging.getLogger('sentinel.advisory')


def warning_key(repo_name: str, branch: Optional[str]) -> str:
    return f"{repo_name}:{branch or DETACHED}"


def format_advisory(repo_name: str, branch: Optional[str], arrow: str = "→") -> str:
    return f"You are on {repo_name} {arrow} {branch or DETACHED}. Be careful."


class WarningDeduplicator:
    """Emits the prod advisory through notify() once per key arrival."""

    def __init__(self, notify: Callable[[str], None], arrow: str = "→"):
        self.notify = notify
        self.arrow = arrow
        self.last_key: Optional[str] = None

    def reset(self):
        self.last_key = None

    def maybe_warn(self, repo_name: str, branch: Optional[str], mode: Mode) -> Optional[str]:
        """
        Observe the active repository for this cycle.

        Returns:
            The advisory text if one was emitted, else None
        """
        key = warning_key(repo_name, branch)
        arrived = key != self.last_key
        self.last_key = key

        if mode != Mode.PROD or not arrived:
            return None

        message = format_advisory(repo_name, branch, self.arrow)
        logger.info("Advisory for %s", key)
        self.notify(message)
        return message
