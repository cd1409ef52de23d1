"""Fixtures for unit tests."""

from pathlib import Path
from types import SimpleNamespace
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from github_issue_importer.configuration.models import ImportIssuesConfig
from github_issue_importer.github.adapter import GitHubKitAdapter


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def markdown_dir(tmp_path: Path) -> Path:
    """An empty directory to hold issue markdown files."""
    directory = tmp_path / "markdown"
    directory.mkdir()
    return directory


@pytest.fixture
def import_config(markdown_dir: Path) -> ImportIssuesConfig:
    """An import-issues configuration pointing at the markdown_dir fixture."""
    return ImportIssuesConfig(
        github_token="token",
        repo="owner/repo",
        github_api_url="https://api.github.com",
        markdown_dir=markdown_dir,
        request_interval=0.0,
    )


@pytest.fixture
def github_adapter() -> GitHubKitAdapter:
    """A GitHubKitAdapter whose githubkit client is mocked out."""
    adapter = GitHubKitAdapter(MagicMock(), "owner", "repo")
    adapter.client.rest.issues.async_list_milestones = AsyncMock(return_value=SimpleNamespace(parsed_data=[]))
    adapter.client.rest.issues.async_create = AsyncMock(
        side_effect=lambda **kwargs: SimpleNamespace(
            parsed_data=SimpleNamespace(
                number=1,
                title=kwargs["title"],
                html_url=f"https://github.com/owner/repo/issues/{kwargs['title']}",
            )
        )
    )
    return adapter
