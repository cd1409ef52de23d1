"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Issue, Milestone

from github_issue_importer.utils.constants import DEFAULT_GITHUB_API_URL
from github_issue_importer.utils.github import split_repository

from .abc import IssueTrackerClientBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(IssueTrackerClientBase):
    """GitHub client adapter for the githubkit library.

    Every method performs exactly one request. Failures propagate to the
    caller; there is no retry logic at this layer.
    """

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, repo: str, github_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_token: Token used to authenticate against the GitHub API
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            ValueError: If the repository is not in 'owner/repo' format
        """
        owner, repo_name = await split_repository(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    # Issue CRUD
    @handle_github_422
    async def create_issue(
        self,
        title: str,
        body: str | None = None,
        labels: list[str] | None = None,
        milestone: int | None = None,
        **kwargs: Any,
    ) -> Issue:
        """Create an issue for a repository."""
        params = self._omit_null_parameters(
            title=title,
            body=body,
            labels=labels,
            milestone=milestone,
            **kwargs,
        )
        response: Response[Issue] = await self.client.rest.issues.async_create(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        return response.parsed_data

    # Milestones
    async def list_milestones(self, **kwargs: Any) -> list[Milestone]:
        """List milestones for a repository.

        Only the first page returned by GitHub is consulted. Milestones that
        fall on later pages are not returned.
        """
        response: Response[list[Milestone]] = await self.client.rest.issues.async_list_milestones(
            owner=self.owner,
            repo=self.repo_name,
            **kwargs,
        )
        logger.debug("Fetched milestones", owner=self.owner, repo=self.repo_name, milestone_count=len(response.parsed_data))
        return response.parsed_data
