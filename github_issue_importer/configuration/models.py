"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImportIssuesConfig:
    """Configuration class for the import-issues command."""

    github_token: str
    repo: str
    github_api_url: str
    markdown_dir: Path
    request_interval: float
    debug: bool = False
