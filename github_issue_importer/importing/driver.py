"""Orchestrates the import of markdown issue records into GitHub."""

import time

import structlog

from github_issue_importer.configuration.models import ImportIssuesConfig
from github_issue_importer.github.abc import IssueTrackerClientBase
from github_issue_importer.github.adapter import GitHubKitAdapter
from github_issue_importer.importing.results import FileImportResult, ImportIssuesResult
from github_issue_importer.importing.submitter import submit_issue_record
from github_issue_importer.importing.throttle import FixedIntervalThrottle, RequestThrottle
from github_issue_importer.markdown.parser import parse_markdown_file
from github_issue_importer.markdown.reader import load_markdown_files

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_import_issues_workflow(
    config: ImportIssuesConfig,
    github_adapter: IssueTrackerClientBase | None = None,
    throttle: RequestThrottle | None = None,
) -> ImportIssuesResult:
    """Run the import-issues workflow: read markdown files and create one issue per record.

    Files are processed one at a time in file name order, and records within
    a file in the order they appear. The throttle is awaited after every
    submission attempt, successful or not.

    Raises:
        MarkdownSourceError: If the markdown directory cannot be read.
        ValueError: If the configured repository is not in 'owner/repo' format.
    """
    markdown_files = await load_markdown_files(config.markdown_dir)
    logger.info(f"Found {len(markdown_files)} markdown files to process", markdown_dir=str(config.markdown_dir))

    result = ImportIssuesResult()
    if not markdown_files:
        return result

    if github_adapter is None:
        github_adapter = await GitHubKitAdapter.create(
            repo=config.repo,
            github_token=config.github_token,
            github_api_url=config.github_api_url,
        )
    if throttle is None:
        throttle = FixedIntervalThrottle(config.request_interval)

    start_time = time.time()
    for markdown_file in markdown_files:
        logger.info("Processing markdown file", filename=markdown_file.filename)
        records = parse_markdown_file(markdown_file)
        logger.info(f"Found {len(records)} issues in {markdown_file.filename}", filename=markdown_file.filename)

        file_result = FileImportResult(markdown_file.filename)
        for record in records:
            file_result.results.append(await submit_issue_record(github_adapter, record))
            await throttle.wait()
        result.file_results.append(file_result)

    logger.info(
        "All issues have been processed",
        created=result.created,
        failed=result.failed,
        total=result.total,
        duration=round(time.time() - start_time, 2),
    )
    return result
