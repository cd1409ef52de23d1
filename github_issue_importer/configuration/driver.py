"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path

from github_issue_importer.configuration import reconcile
from github_issue_importer.configuration.models import ImportIssuesConfig


def get_import_issues_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_token: str | None = None,
    repo: str | None = None,
    markdown_dir: Path | None = None,
    request_interval: float | None = None,
) -> ImportIssuesConfig:
    """Synchronously get the reconciled import-issues configuration."""
    return asyncio.run(
        reconcile.reconcile_import_issues_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_repo=repo,
            cli_markdown_dir=markdown_dir,
            cli_request_interval=request_interval,
        )
    )
