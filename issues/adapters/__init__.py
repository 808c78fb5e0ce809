"""Issue sources."""

from issues.adapters.base import IssueSource
from issues.adapters.github import GitHubAdapter

__all__ = ["IssueSource", "GitHubAdapter"]
