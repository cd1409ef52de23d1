"""Reads issue markdown files from a source directory."""

from pathlib import Path

import structlog

from github_issue_importer.markdown.exceptions import MarkdownSourceError
from github_issue_importer.schemas.markdown_issue import MarkdownFile
from github_issue_importer.utils.constants import MARKDOWN_FILE_ENCODING, MARKDOWN_FILE_SUFFIX

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def find_markdown_files(markdown_dir: Path) -> list[Path]:
    """Find markdown files directly inside a directory.

    A file qualifies when its name ends with the literal, case-sensitive
    ``.md`` suffix. Results are sorted by file name so that runs are
    reproducible regardless of the order the filesystem lists entries in.

    Raises:
        MarkdownSourceError: If the directory does not exist or cannot be listed.
    """
    if not markdown_dir.exists():
        raise MarkdownSourceError(markdown_dir, "directory not found")
    if not markdown_dir.is_dir():
        raise MarkdownSourceError(markdown_dir, "path is not a directory")
    try:
        entries = list(markdown_dir.iterdir())
    except OSError as e:
        raise MarkdownSourceError(markdown_dir, str(e)) from e

    markdown_files = [entry for entry in entries if entry.name.endswith(MARKDOWN_FILE_SUFFIX) and entry.is_file()]
    return sorted(markdown_files, key=lambda path: path.name)


async def read_markdown_file(path: Path) -> MarkdownFile:
    """Read a single markdown file as UTF-8 text.

    The read itself is synchronous and blocks the event loop.
    """
    with open(path, encoding=MARKDOWN_FILE_ENCODING) as f:
        content = f.read()
    logger.debug("Read markdown file", path=str(path), length=len(content))
    return MarkdownFile(filename=path.name, raw_content=content)


async def load_markdown_files(markdown_dir: Path) -> list[MarkdownFile]:
    """Load every markdown file in a directory, in file name order.

    Raises:
        MarkdownSourceError: If the directory or one of its markdown files cannot be read.
    """
    markdown_files: list[MarkdownFile] = []
    for path in find_markdown_files(markdown_dir):
        try:
            markdown_files.append(await read_markdown_file(path))
        except (OSError, UnicodeDecodeError) as e:
            raise MarkdownSourceError(markdown_dir, f"failed to read {path.name}: {e}") from e
    return markdown_files
