"""Shared constants used across the application."""

import re

# Markdown Source Constants
# -------------------------

DEFAULT_MARKDOWN_DIR = "markdown"
"""Default directory (relative to the working directory) holding issue markdown files."""

MARKDOWN_FILE_SUFFIX = ".md"
"""Literal, case-sensitive suffix a file name must end with to be imported."""

MARKDOWN_FILE_ENCODING = "utf-8"
"""Text encoding used when reading markdown files."""

# Issue Record Constants
# ----------------------

ISSUE_RECORD_DELIMITER = "## "
"""Literal heading marker that introduces each issue record."""

LABELS_LINE_PATTERN = re.compile(r"Labels: (.+)")
"""Pattern to match a labels line (e.g., Labels: bug, urgent)."""

MILESTONE_LINE_PATTERN = re.compile(r"Milestone: (.+)")
"""Pattern to match a milestone line (e.g., Milestone: v1.0)."""

LABEL_SEPARATOR = ", "
"""Literal separator between labels on a labels line."""

# GitHub Constants
# ----------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub API URL. Override for GitHub Enterprise Server."""

DEFAULT_REQUEST_INTERVAL = 1.0
"""Default number of seconds to wait after each issue submission attempt."""
