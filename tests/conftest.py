"""
Global test configuration and fixtures for README bumper tests.

Provides common fixtures and test utilities used across multiple test modules.
"""

import pytest

from readme_bumper.core.config import Settings
from readme_bumper.models.schemas.repositories import RepositoryReference
from tests.fakes import ALLOWED_ORG, InMemoryContentsClient


@pytest.fixture
def allowed_org() -> str:
    return ALLOWED_ORG


@pytest.fixture
def repo_url() -> str:
    return f"https://github.com/{ALLOWED_ORG}/my-repo"


@pytest.fixture
def repo_ref() -> RepositoryReference:
    return RepositoryReference(owner=ALLOWED_ORG, repo="my-repo")


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known org, no token and the default rate limit."""
    return Settings(
        GITHUB_TOKEN="",
        GITHUB_API_URL="https://api.github.test",
        ALLOWED_ORG=ALLOWED_ORG,
        RATE_LIMIT_ENABLED=True,
        RATE_LIMIT_WINDOW_SECONDS=60,
        RATE_LIMIT_MAX_REQUESTS=10,
    )


@pytest.fixture
def contents_client() -> InMemoryContentsClient:
    return InMemoryContentsClient()


@pytest.fixture
def sample_readme_payload() -> dict:
    """Sample README.md response from the contents API ("hello", wrapped like GitHub does)."""
    return {
        "type": "file",
        "encoding": "base64",
        "size": 5,
        "name": "README.md",
        "path": "README.md",
        "content": "aGVs\nbG8=\n",
        "sha": "abc123",
        "url": "https://api.github.com/repos/The-Matrix-Labs/my-repo/contents/README.md?ref=main",
    }
