"""Shared test fixtures for GitHub integration tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from readme_activity.github.client import GitHubClient


@pytest.fixture
def github_client() -> GitHubClient:
    """Create a GitHub client instance for testing.

    Returns:
        GitHubClient instance with test token
    """
    return GitHubClient("test_token_12345")


@pytest.fixture
def mock_response() -> AsyncMock:
    """Create a mock aiohttp response.

    Returns:
        AsyncMock standing in for aiohttp.ClientResponse
    """
    response = AsyncMock()
    response.status = 200
    response.headers = {}
    return response


@pytest.fixture
def attach_response(github_client: GitHubClient):
    """Wire a mock response into the client's session.

    Returns:
        Callable installing the given response as the result of session.get
    """

    def attach(response: AsyncMock) -> MagicMock:
        mock_context = MagicMock()
        mock_context.__aenter__ = AsyncMock(return_value=response)
        mock_context.__aexit__ = AsyncMock(return_value=None)

        github_client.session = AsyncMock()
        github_client.session.get = MagicMock(return_value=mock_context)
        return github_client.session.get

    return attach
