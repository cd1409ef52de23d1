"""Pydantic schema for issues described in markdown files."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RecordLineKind(str, Enum):
    """Enum for the kinds of line found in an issue record."""

    TEXT = "text"
    LABELS = "labels"
    MILESTONE = "milestone"


class RecordLine(BaseModel):
    """Pydantic model for a single classified line of an issue record."""

    model_config = ConfigDict(frozen=True)

    kind: RecordLineKind
    text: str
    value: str | None = None


class MarkdownFile(BaseModel):
    """Pydantic model for a markdown file read from the source directory."""

    model_config = ConfigDict(frozen=True)

    filename: str
    raw_content: str


class IssueRecord(BaseModel):
    """Pydantic model for one issue parsed out of a markdown file.

    The raw text is submitted verbatim as the issue body, metadata lines
    included.
    """

    model_config = ConfigDict(frozen=True)

    raw_text: str
    title: str
    labels: list[str] = []
    milestone_name: str | None = None
