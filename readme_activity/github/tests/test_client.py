"""Tests for GitHub API client."""

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from readme_activity.github.client import GitHubClient
from readme_activity.shared.exceptions import GitHubAPIError


@pytest.mark.asyncio
async def test_list_public_events_success(github_client, mock_response, attach_response):
    """Test successful fetch returns parsed events in feed order."""
    mock_response.json = AsyncMock(
        return_value=[
            {
                "id": "2",
                "type": "WatchEvent",
                "repo": {"id": 7, "name": "octo/star", "url": "https://api.github.com/repos/octo/star"},
                "payload": {"action": "started"},
                "created_at": "2025-01-09T12:00:00Z",
            },
            {
                "id": "1",
                "type": "PushEvent",
                "repo": {"id": 8, "name": "octo/code", "url": "https://api.github.com/repos/octo/code"},
                "payload": {"commits": [{"sha": "abc"}]},
            },
        ]
    )
    get = attach_response(mock_response)

    events = await github_client.list_public_events("octocat")

    assert [e.id for e in events] == ["2", "1"]
    assert events[0].type == "WatchEvent"
    assert events[0].repo.name == "octo/star"
    assert events[1].commits == [{"sha": "abc"}]
    get.assert_called_once_with(
        "https://api.github.com/users/octocat/events/public", params={"per_page": 100}
    )


@pytest.mark.asyncio
async def test_list_public_events_custom_page_size(github_client, mock_response, attach_response):
    """Test per_page parameter passed correctly."""
    mock_response.json = AsyncMock(return_value=[])
    get = attach_response(mock_response)

    await github_client.list_public_events("octocat", per_page=30)

    assert get.call_args[1]["params"]["per_page"] == 30


@pytest.mark.asyncio
async def test_list_public_events_unknown_user(github_client, mock_response, attach_response):
    """Test 404 raises instead of looking like an empty feed."""
    mock_response.status = 404
    attach_response(mock_response)

    with pytest.raises(GitHubAPIError, match="User not found: nonexistent_user"):
        await github_client.list_public_events("nonexistent_user")


@pytest.mark.asyncio
async def test_list_public_events_rate_limit(github_client, mock_response, attach_response):
    """Test 403 raises rate limit error."""
    mock_response.status = 403
    mock_response.headers = {
        "x-ratelimit-remaining": "0",
        "x-ratelimit-reset": "1234567890",
    }
    attach_response(mock_response)

    with pytest.raises(GitHubAPIError, match="Rate limited"):
        await github_client.list_public_events("octocat")


@pytest.mark.asyncio
async def test_list_public_events_server_error(github_client, mock_response, attach_response):
    """Test unexpected status raises GitHubAPIError."""
    mock_response.status = 500
    attach_response(mock_response)

    with pytest.raises(GitHubAPIError, match="API error: 500"):
        await github_client.list_public_events("octocat")


@pytest.mark.asyncio
async def test_list_public_events_network_error_not_retried(github_client):
    """Test network error is raised on the first attempt."""
    github_client.session = AsyncMock()
    github_client.session.get = MagicMock(side_effect=aiohttp.ClientError("boom"))

    with pytest.raises(GitHubAPIError, match="Network error"):
        await github_client.list_public_events("octocat")

    assert github_client.session.get.call_count == 1


@pytest.mark.asyncio
async def test_list_public_events_without_session(github_client):
    """Test calling outside the context manager fails clearly."""
    with pytest.raises(GitHubAPIError, match="Session not initialized"):
        await github_client.list_public_events("octocat")


@pytest.mark.asyncio
async def test_context_manager_lifecycle():
    """Test session created and closed properly."""
    client = GitHubClient("test_token")

    assert client.session is None

    async with client as ctx:
        assert ctx is client
        assert client.session is not None

    assert client.session.closed
