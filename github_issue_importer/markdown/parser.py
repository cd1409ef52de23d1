"""Splits markdown content into issue records and extracts their metadata.

Content is split on the literal ``"## "`` heading marker. Each record's
title is its first line. Metadata is read line by line: a line containing
``Labels: ...`` provides the labels and a line containing ``Milestone: ...``
provides the milestone name; one line may provide both. Any other line is
plain text and is ignored for metadata purposes; a record without
metadata lines is still valid.
"""

import structlog

from github_issue_importer.schemas.markdown_issue import IssueRecord, MarkdownFile, RecordLine, RecordLineKind
from github_issue_importer.utils.constants import (
    ISSUE_RECORD_DELIMITER,
    LABEL_SEPARATOR,
    LABELS_LINE_PATTERN,
    MILESTONE_LINE_PATTERN,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def split_issue_records(content: str) -> list[str]:
    """Split markdown content into raw issue record segments, in order.

    Empty segments (such as the one before a leading delimiter) are dropped.
    """
    segments = content.strip().split(ISSUE_RECORD_DELIMITER)
    return [segment for segment in segments if segment]


def extract_title(segment: str) -> str:
    """Return the first line of a record segment."""
    return segment.split("\n", 1)[0]


def classify_record_line(line: str) -> list[RecordLine]:
    """Tag a single line of an issue record.

    Both metadata patterns are checked independently, so a line such as
    ``Labels: bug Milestone: v1`` yields a labels tag and a milestone tag.
    A line matching neither pattern yields a single text tag.
    """
    record_lines: list[RecordLine] = []
    labels_match = LABELS_LINE_PATTERN.search(line)
    if labels_match:
        record_lines.append(RecordLine(kind=RecordLineKind.LABELS, text=line, value=labels_match.group(1)))
    milestone_match = MILESTONE_LINE_PATTERN.search(line)
    if milestone_match:
        record_lines.append(RecordLine(kind=RecordLineKind.MILESTONE, text=line, value=milestone_match.group(1)))
    if not record_lines:
        record_lines.append(RecordLine(kind=RecordLineKind.TEXT, text=line))
    return record_lines


def parse_issue_record(segment: str) -> IssueRecord:
    """Parse a raw record segment into an IssueRecord.

    The first labels match and the first milestone match win; later ones are
    treated as plain text.
    """
    labels: list[str] | None = None
    milestone_name: str | None = None
    for line in segment.split("\n"):
        for record_line in classify_record_line(line):
            if record_line.kind == RecordLineKind.LABELS and labels is None:
                labels = record_line.value.split(LABEL_SEPARATOR)  # type: ignore[union-attr]
            elif record_line.kind == RecordLineKind.MILESTONE and milestone_name is None:
                milestone_name = record_line.value

    return IssueRecord(
        raw_text=segment,
        title=extract_title(segment),
        labels=labels or [],
        milestone_name=milestone_name,
    )


def parse_markdown_file(markdown_file: MarkdownFile) -> list[IssueRecord]:
    """Parse every issue record out of a markdown file."""
    records = [parse_issue_record(segment) for segment in split_issue_records(markdown_file.raw_content)]
    logger.debug("Parsed issue records", filename=markdown_file.filename, record_count=len(records))
    return records
