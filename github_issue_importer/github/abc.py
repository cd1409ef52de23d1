"""Base ABC for issue tracker clients."""

from abc import ABC, abstractmethod
from typing import Any


class IssueTrackerClientBase(ABC):
    """Base ABC for issue tracker clients."""

    # Issue CRUD
    @abstractmethod
    async def create_issue(
        self,
        title: str,
        body: str | None = None,
        labels: list[str] | None = None,
        milestone: int | None = None,
        **kwargs: Any,
    ) -> Any:
        """Create an issue for a repository."""
        pass

    # Milestones
    @abstractmethod
    async def list_milestones(self, **kwargs: Any) -> list[Any]:
        """List the first page of milestones for a repository."""
        pass
