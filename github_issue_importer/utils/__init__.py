"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_MARKDOWN_DIR,
    DEFAULT_REQUEST_INTERVAL,
    ISSUE_RECORD_DELIMITER,
    LABEL_SEPARATOR,
    LABELS_LINE_PATTERN,
    MARKDOWN_FILE_ENCODING,
    MARKDOWN_FILE_SUFFIX,
    MILESTONE_LINE_PATTERN,
)
from .github import split_repository

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_MARKDOWN_DIR",
    "DEFAULT_REQUEST_INTERVAL",
    "ISSUE_RECORD_DELIMITER",
    "LABEL_SEPARATOR",
    "LABELS_LINE_PATTERN",
    "MARKDOWN_FILE_ENCODING",
    "MARKDOWN_FILE_SUFFIX",
    "MILESTONE_LINE_PATTERN",
    "split_repository",
]
