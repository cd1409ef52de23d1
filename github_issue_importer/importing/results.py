"""Contains results of application execution."""

from typing import Any

from github_issue_importer.schemas.markdown_issue import IssueRecord


class IssueSubmissionResult:
    """Contains the outcome of submitting a single issue record."""

    def __init__(
        self,
        record: IssueRecord,
        github_issue: Any | None = None,
        milestone_number: int | None = None,
        error: str | None = None,
    ) -> None:
        """Initialize the result with the record and either the created issue or the error."""
        self.record = record
        self.github_issue = github_issue
        self.milestone_number = milestone_number
        self.error = error

    @property
    def succeeded(self) -> bool:
        """Whether the issue was created."""
        return self.github_issue is not None

    @property
    def issue_url(self) -> str | None:
        """Web URL of the created issue, if any."""
        if self.github_issue is None:
            return None
        return self.github_issue.html_url

    @property
    def issue_number(self) -> int | None:
        """Number of the created issue, if any."""
        if self.github_issue is None:
            return None
        return self.github_issue.number


class FileImportResult:
    """Contains results of importing every issue record of one markdown file."""

    def __init__(self, filename: str, results: list[IssueSubmissionResult] | None = None) -> None:
        """Initialize the result with the file name and its submission results."""
        self.filename = filename
        self.results = results or []


class ImportIssuesResult:
    """Contains results of the import-issues workflow."""

    def __init__(self, file_results: list[FileImportResult] | None = None) -> None:
        """Initialize the result with the per-file results."""
        self.file_results = file_results or []

    @property
    def submission_results(self) -> list[IssueSubmissionResult]:
        """Every submission result, in processing order."""
        return [result for file_result in self.file_results for result in file_result.results]

    @property
    def total(self) -> int:
        return len(self.submission_results)

    @property
    def created(self) -> int:
        return sum(1 for result in self.submission_results if result.succeeded)

    @property
    def failed(self) -> int:
        return self.total - self.created
