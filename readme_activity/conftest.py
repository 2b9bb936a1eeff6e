"""Shared pytest fixtures for readme-activity tests."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from readme_activity.core.config import Settings
from readme_activity.shared.models import RawEvent

EventFactory = Callable[..., RawEvent]


def _repo(repo_id: int, name: str) -> dict[str, Any]:
    return {"id": repo_id, "name": name, "url": f"https://api.github.com/repos/{name}"}


@pytest.fixture
def make_push() -> EventFactory:
    """Factory for PushEvents.

    Returns:
        Callable taking repo_id, name and commit count
    """

    def factory(repo_id: int = 1, name: str = "octocat/hello", commits: int = 1) -> RawEvent:
        return RawEvent.from_github_event(
            {
                "id": f"push-{repo_id}-{commits}",
                "type": "PushEvent",
                "repo": _repo(repo_id, name),
                "payload": {
                    "ref": "refs/heads/main",
                    "commits": [{"sha": f"{repo_id}-{i}"} for i in range(commits)],
                },
            }
        )

    return factory


@pytest.fixture
def make_event() -> EventFactory:
    """Factory for arbitrary event kinds.

    Returns:
        Callable taking the event type, repo and payload
    """

    def factory(
        event_type: str,
        repo_id: int = 2,
        name: str = "octocat/world",
        payload: dict[str, Any] | None = None,
    ) -> RawEvent:
        return RawEvent.from_github_event(
            {
                "id": f"{event_type}-{repo_id}",
                "type": event_type,
                "repo": _repo(repo_id, name),
                "payload": payload or {},
            }
        )

    return factory


@pytest.fixture
def readme_path(tmp_path: Path) -> Path:
    """Path to a temporary README file.

    Args:
        tmp_path: pytest's temporary directory fixture

    Returns:
        Path to README.md inside the temporary directory
    """
    return tmp_path / "README.md"


@pytest.fixture
def mock_settings(readme_path: Path) -> Settings:
    """Create Settings instance with test values.

    Args:
        readme_path: Temporary README path

    Returns:
        Settings instance configured for testing
    """
    return Settings(
        gh_username="octocat",
        github_token="test_github_token",
        max_lines=5,
        readme_path=str(readme_path),
        commit_msg="Update README",
        log_level="INFO",
    )


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Reset the global settings cache before and after each test.

    This ensures tests don't interfere with each other via cached settings.
    """
    import readme_activity.core.config

    readme_activity.core.config._settings = None

    yield

    readme_activity.core.config._settings = None
