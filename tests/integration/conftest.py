"""Pytest configuration for integration tests."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


@pytest.fixture(autouse=True, scope="session")
def load_env() -> None:
    """Load environment variables from .env file before running integration tests.

    This fixture is automatically used for all tests in this directory and its subdirectories.
    It loads environment variables from:
    1. .env.integration (if it exists)
    2. .env (if it exists)

    The .env.integration file takes precedence over .env. Integration tests
    are skipped when the GitHub token or repository is still missing.
    """
    project_root = Path(__file__).parent.parent.parent

    integration_env = project_root / ".env.integration"
    if integration_env.exists():
        load_dotenv(dotenv_path=integration_env)

    default_env = project_root / ".env"
    if default_env.exists():
        load_dotenv(dotenv_path=default_env)

    required_vars = ["GITHUB_TOKEN", "GITHUB_REPO"]
    missing_vars = [var for var in required_vars if not os.getenv(var)]
    if missing_vars:
        pytest.skip(f"Missing required environment variables: {', '.join(missing_vars)}. Set them in either .env.integration or .env")
