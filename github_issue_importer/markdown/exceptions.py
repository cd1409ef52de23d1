"""Custom exceptions for the markdown module."""

from pathlib import Path


class MarkdownSourceError(Exception):
    """Raised when the markdown source directory cannot be read."""

    def __init__(self, markdown_dir: Path, reason: str) -> None:
        """Initializes the exception with the unreadable directory and the reason."""
        super().__init__(f"Unable to read markdown directory {markdown_dir}: {reason}")
        self.markdown_dir = markdown_dir
        self.reason = reason
