"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_issue_importer.configuration.driver import get_import_issues_config
from github_issue_importer.configuration.exceptions import MissingConfigurationError
from github_issue_importer.importing.driver import run_import_issues_workflow
from github_issue_importer.markdown.exceptions import MarkdownSourceError
from github_issue_importer.utils.logging_config import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.command(name="import-issues")
def import_issues_cli(
    markdown_dir: Annotated[
        Path | None, Argument(envvar="MARKDOWN_DIR", help="Directory containing issue markdown files. Defaults to ./markdown.")
    ] = None,
    repo: Annotated[str | None, Option(help="Repository name (owner/repo). Falls back to GITHUB_REPO.")] = None,
    github_token: Annotated[str | None, Option(help="GitHub token. Falls back to GITHUB_TOKEN.")] = None,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL. Falls back to GITHUB_API_URL.")] = None,
    request_interval: Annotated[
        float | None, Option(help="Seconds to wait after each issue submission. Falls back to REQUEST_INTERVAL.")
    ] = None,
    debug: Annotated[bool, Option(help="Enable debug logging.")] = False,
) -> None:
    """Creates one GitHub issue for every '## ' section of the markdown files in a directory."""
    configure_logging(debug)
    try:
        config = get_import_issues_config(
            debug=debug,
            github_api_url=github_api_url,
            github_token=github_token,
            repo=repo,
            markdown_dir=markdown_dir,
            request_interval=request_interval,
        )
    except MissingConfigurationError as e:
        typer.echo("Missing required configuration:", err=True)
        for element in e.missing:
            typer.echo(f"  - {element.name}: set {element.env_name} or pass {element.cli_name}", err=True)
        sys.exit(1)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    configure_logging(config.debug)
    typer.echo("Starting GitHub issue creation process...")

    try:
        result = asyncio.run(run_import_issues_workflow(config))
    except MarkdownSourceError as e:
        typer.echo(f"Error processing markdown files: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    for file_result in result.file_results:
        typer.echo(f"\n{file_result.filename}:")
        for submission in file_result.results:
            if submission.succeeded:
                typer.echo(f"  ✅ {submission.record.title} -> {submission.issue_url}")
            else:
                typer.echo(f"  ❌ {submission.record.title}: {submission.error}")

    typer.echo("")
    typer.echo(f"Issues created: {result.created}")
    typer.echo(f"Issues failed: {result.failed}")
    typer.echo("\n✨ All issues have been processed!")


def main() -> None:
    """Console script entry point."""
    typer_app()


if __name__ == "__main__":
    main()
