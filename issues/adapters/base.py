"""Abstract base for issue sources."""

from abc import ABC, abstractmethod

from issues.models import FetchResult


class IssueSource(ABC):
    """Anything that can return the issue list of a project."""

    @abstractmethod
    def fetch(self, user: str, project: str) -> FetchResult:
        """Fetch the issues of user/project in a single request."""
        ...
