"""
Git — Repository snapshots for a workspace

Read-only: runs plumbing commands to learn the current branch and
whether a remote is configured. Never changes a repository.

Repositories found:
- the workspace root itself, if it is a work tree
- immediate subdirectories containing .git (sorted by name)
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from ..config import SentinelError
from ..core.repos import RepositorySnapshot


logger = logging.getLogger('sentinel.git')


def git_available() -> bool:
    """Check if git is installed."""
    return shutil.which("git") is not None


class GitRepository:
    """One repository on disk."""

    def __init__(self, repo_path: Path):
        self.repo_path = Path(repo_path)
        self.git_dir = self.repo_path / ".git"

    @property
    def is_git_repo(self) -> bool:
        # .git is a file for worktrees and submodules
        return self.git_dir.exists()

    def _run_git(self, args: List[str]) -> Optional[str]:
        """Run a git command and return stdout, or None on failure."""
        try:
            result = subprocess.run(
                ["git"] + args,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True
            )
            return result.stdout
        except (subprocess.CalledProcessError, OSError) as e:
            logger.debug("git %s failed in %s: %s", " ".join(args), self.repo_path, e)
            return None

    def current_branch(self) -> Optional[str]:
        """Branch name, or None when HEAD is detached."""
        output = self._run_git(["symbolic-ref", "--short", "-q", "HEAD"])
        branch = (output or "").strip()
        return branch or None

    def has_remote(self) -> bool:
        output = self._run_git(["remote"])
        return bool((output or "").strip())

    def snapshot(self) -> RepositorySnapshot:
        return RepositorySnapshot(
            name=self.repo_path.name or "repo",
            branch=self.current_branch(),
            path=str(self.repo_path),
            has_remote=self.has_remote(),
        )


class GitWorkspace:
    """Enumerates the repositories of a workspace directory."""

    def __init__(self, workspace_dir: Path):
        self.workspace_dir = Path(workspace_dir).expanduser().resolve()

    def check(self):
        """
        Verify the workspace can be scanned at all.

        Raises:
            SentinelError: If the directory is missing or git is not installed
        """
        if not self.workspace_dir.is_dir():
            raise SentinelError(f"Workspace directory '{self.workspace_dir}' not found")
        if not git_available():
            raise SentinelError("git is not installed or not on PATH")

    def repositories(self) -> List[GitRepository]:
        repos: List[GitRepository] = []

        root = GitRepository(self.workspace_dir)
        if root.is_git_repo:
            repos.append(root)

        if self.workspace_dir.is_dir():
            for child in sorted(self.workspace_dir.iterdir()):
                if not child.is_dir() or child.name.startswith("."):
                    continue
                repo = GitRepository(child)
                if repo.is_git_repo:
                    repos.append(repo)

        return repos

    def snapshots(self) -> List[RepositorySnapshot]:
        """Fresh snapshot of every repository, root first."""
        return [repo.snapshot() for repo in self.repositories()]
