"""Submits parsed issue records to GitHub."""

import structlog

from github_issue_importer.github.abc import IssueTrackerClientBase
from github_issue_importer.importing.results import IssueSubmissionResult
from github_issue_importer.schemas.markdown_issue import IssueRecord

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def resolve_milestone_number(github_adapter: IssueTrackerClientBase, milestone_name: str) -> int | None:
    """Resolve a milestone title to its number.

    A fresh listing is requested on every call. Only the first page of
    milestones is searched, and titles must match exactly (case-sensitive).
    Returns None when no milestone matches or when the listing fails.
    """
    try:
        milestones = await github_adapter.list_milestones()
    except Exception as e:
        logger.error("Error getting milestone", milestone_name=milestone_name, error=str(e))
        return None

    for milestone in milestones:
        if milestone.title == milestone_name:
            logger.debug("Resolved milestone", milestone_name=milestone_name, milestone_number=milestone.number)
            return milestone.number

    logger.error("Milestone not found", milestone_name=milestone_name, milestones_searched=len(milestones))
    return None


async def submit_issue_record(github_adapter: IssueTrackerClientBase, record: IssueRecord) -> IssueSubmissionResult:
    """Create a GitHub issue from an issue record.

    Failures are logged and reported in the returned result rather than
    raised, so a failed record never interrupts the rest of the batch.
    """
    milestone_number: int | None = None
    if record.milestone_name is not None:
        milestone_number = await resolve_milestone_number(github_adapter, record.milestone_name)

    try:
        github_issue = await github_adapter.create_issue(
            title=record.title,
            body=record.raw_text,
            labels=record.labels,
            milestone=milestone_number,
        )
    except Exception as e:
        logger.error("Failed to create issue", issue_title=record.title, error=str(e))
        return IssueSubmissionResult(record, milestone_number=milestone_number, error=str(e))

    logger.info("Created issue", issue_title=record.title, url=github_issue.html_url)
    return IssueSubmissionResult(record, github_issue=github_issue, milestone_number=milestone_number)
