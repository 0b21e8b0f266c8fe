"""Services layer: host integrations (version control)."""

from .git import GitWorkspace, GitRepository, git_available

__all__ = ['GitWorkspace', 'GitRepository', 'git_available']
