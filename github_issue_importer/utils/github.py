"""Contains utility functions for GitHub interactions."""


async def split_repository(repo: str | None) -> tuple[str, str]:
    """Splits an 'owner/name' repository identifier into owner and repository name."""
    if repo is None:
        raise ValueError("A repository in the format 'owner/repo' is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Repository must be in the format 'owner/repo' with no extra parts, got '{repo}'.")
    owner, repository = parts
    return owner, repository
