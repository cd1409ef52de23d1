"""Utility functions for integration tests."""

import os
import subprocess
import sys
import time
import uuid
from pathlib import Path

from githubkit import GitHub
from githubkit.versions.latest.models import Issue

from github_issue_importer.github.adapter import GitHubKitAdapter


def generate_unique_issue_title(prefix: str = "IntegrationTest") -> str:
    """Generate a unique issue title for integration tests."""
    return f"{prefix}-{uuid.uuid4()}"


def get_github_adapter() -> GitHubKitAdapter:
    """Initialize and return a GitHubKitAdapter using environment variables for token and repo."""
    owner, repo = os.environ["GITHUB_REPO"].split("/")
    client = GitHub(os.environ["GITHUB_TOKEN"])
    return GitHubKitAdapter(client, owner, repo)


def write_markdown_file(directory: Path, name: str, content: str) -> Path:
    """Write a markdown file into the given directory and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


def run_import_issues_cli(markdown_dir: Path, *extra_args: str) -> subprocess.CompletedProcess[str]:
    """Run the import-issues CLI as a subprocess against the given directory."""
    command = [sys.executable, "-m", "github_issue_importer.configuration.cli", str(markdown_dir), *extra_args]
    print(f"Running command: {' '.join(command)}")
    result = subprocess.run(command, capture_output=True, text=True, env=os.environ.copy())
    print("\nCLI STDOUT:\n", result.stdout)
    print("\nCLI STDERR:\n", result.stderr)
    return result


async def find_issues_by_title(adapter: GitHubKitAdapter, titles: list[str], max_attempts: int = 10, sleep_seconds: int = 5) -> list[Issue]:
    """Wait for issues with the given titles to be listed by GitHub."""
    found: list[Issue] = []
    for attempt in range(max_attempts):
        response = await adapter.client.rest.issues.async_list_for_repo(
            owner=adapter.owner,
            repo=adapter.repo_name,
            state="all",
            per_page=100,
        )
        found = [issue for issue in response.parsed_data if issue.title in titles]
        if len(found) == len(titles):
            return found
        print(f"[{attempt + 1}/{max_attempts}] Found {len(found)} of {len(titles)} issues, waiting {sleep_seconds} seconds...")
        time.sleep(sleep_seconds)
    return found


async def close_issues(adapter: GitHubKitAdapter, issues: list[Issue]) -> None:
    """Close the given issues."""
    for issue in issues:
        print(f"\nClosing issue {issue.number}: {issue.title}")
        await adapter.client.rest.issues.async_update(owner=adapter.owner, repo=adapter.repo_name, issue_number=issue.number, state="closed")
