"""Repository snapshot — one entry per repository, rebuilt on every poll."""

from dataclasses import dataclass
from typing import Optional


DETACHED = "DETACHED"


@dataclass(frozen=True)
class RepositorySnapshot:
    """Read-only view of a repository as reported by the VCS collaborator."""
    name: str
    branch: Optional[str]  # None when HEAD is detached
    path: str
    has_remote: bool

    @property
    def branch_label(self) -> str:
        return self.branch or DETACHED

    @property
    def remote_label(self) -> str:
        return "remote" if self.has_remote else "local-only"
