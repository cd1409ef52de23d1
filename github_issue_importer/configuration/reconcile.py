"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from github_issue_importer.configuration.env import settings
from github_issue_importer.configuration.exceptions import MissingConfigurationError, RequiredConfigurationElementError
from github_issue_importer.configuration.models import ImportIssuesConfig

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def reconcile_import_issues_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    cli_repo: str | None = None,
    cli_markdown_dir: Path | None = None,
    cli_request_interval: float | None = None,
) -> ImportIssuesConfig:
    """Reconciles the import-issues configuration.

    Values passed on the command line take precedence over values found in
    the environment (or the .env file).

    Args:
        cli_debug (bool): Whether debug mode was requested on the command line.
        cli_github_api_url (str | None): The GitHub API URL.
        cli_github_token (str | None): The GitHub token used to authenticate.
        cli_repo (str | None): The target repository in 'owner/repo' format.
        cli_markdown_dir (Path | None): Directory containing the issue markdown files.
        cli_request_interval (float | None): Seconds to wait after each issue submission.

    Raises:
        MissingConfigurationError: If the GitHub token or the repository is missing.
        ValueError: If the request interval is negative.

    Returns:
        ImportIssuesConfig: The reconciled configuration.
    """
    github_token = cli_github_token or settings.GITHUB_TOKEN
    repo = cli_repo or settings.GITHUB_REPO

    missing: list[RequiredConfigurationElementError] = []
    if not github_token:
        missing.append(RequiredConfigurationElementError(name="GitHub token", cli_name="--github-token", env_name="GITHUB_TOKEN"))
    if not repo:
        missing.append(RequiredConfigurationElementError(name="GitHub repository", cli_name="--repo", env_name="GITHUB_REPO"))
    if missing:
        raise MissingConfigurationError(missing)

    request_interval = cli_request_interval if cli_request_interval is not None else settings.REQUEST_INTERVAL
    if request_interval < 0:
        raise ValueError(f"Request interval must not be negative, got {request_interval}")

    config = ImportIssuesConfig(
        github_token=github_token,  # type: ignore[arg-type]
        repo=repo,  # type: ignore[arg-type]
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        markdown_dir=cli_markdown_dir or settings.MARKDOWN_DIR,
        request_interval=request_interval,
        debug=cli_debug or settings.DEBUG,
    )
    logger.debug(
        "Reconciled import-issues configuration",
        repo=config.repo,
        github_api_url=config.github_api_url,
        markdown_dir=str(config.markdown_dir),
        request_interval=config.request_interval,
    )
    return config
