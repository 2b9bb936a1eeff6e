"""GitHub API client for fetching a user's public activity."""

from typing import Any

import aiohttp

from readme_activity.core.logging import get_logger
from readme_activity.shared.exceptions import GitHubAPIError
from readme_activity.shared.models import RawEvent

logger = get_logger(__name__)


class GitHubClient:
    """Async GitHub API client.

    A run fetches a single page of events; failures are raised immediately
    rather than retried, so the scheduler decides when to try again.

    Attributes:
        BASE_URL: GitHub API base URL
        DEFAULT_PAGE_SIZE: Number of events requested per call
    """

    BASE_URL = "https://api.github.com"
    DEFAULT_PAGE_SIZE = 100

    def __init__(self, token: str) -> None:
        """Initialize GitHub client with authentication token.

        Args:
            token: GitHub token (the workflow's GITHUB_TOKEN is enough)
        """
        self.token = token
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "GitHubClient":
        """Context manager entry: create aiohttp session.

        Returns:
            Self for use in async with statement
        """
        self.session = aiohttp.ClientSession(
            headers={
                "Authorization": f"token {self.token}",
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": "readme-activity",
            }
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Context manager exit: close aiohttp session."""
        if self.session:
            await self.session.close()

    async def list_public_events(
        self, username: str, per_page: int = DEFAULT_PAGE_SIZE
    ) -> list[RawEvent]:
        """Fetch the first page of a user's public events, most recent first.

        Args:
            username: GitHub username to fetch events for
            per_page: Page size (GitHub caps this at 100)

        Returns:
            List of parsed RawEvent objects in feed order

        Raises:
            GitHubAPIError: If the API request fails or a network error occurs
        """
        if not self.session:
            raise GitHubAPIError("Session not initialized")

        url = f"{self.BASE_URL}/users/{username}/events/public"
        params = {"per_page": per_page}

        logger.debug("github.events.fetching", username=username, per_page=per_page)

        try:
            async with self.session.get(url, params=params) as response:
                if response.status == 200:
                    data: list[dict[str, Any]] = await response.json()
                elif response.status == 404:
                    logger.warning("github.user.not_found", username=username)
                    raise GitHubAPIError(f"User not found: {username}")
                elif response.status in (403, 429):
                    logger.warning(
                        "github.ratelimit",
                        remaining=response.headers.get("x-ratelimit-remaining"),
                        reset=response.headers.get("x-ratelimit-reset"),
                        status=response.status,
                    )
                    raise GitHubAPIError(f"Rate limited: {response.status}")
                else:
                    raise GitHubAPIError(f"API error: {response.status}")
        except aiohttp.ClientError as e:
            raise GitHubAPIError(f"Network error: {e}") from e

        events = [RawEvent.from_github_event(event) for event in data]
        logger.debug("github.events.fetched", username=username, count=len(events))
        return events
