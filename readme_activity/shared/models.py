"""Data models for readme-activity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RepoRef(BaseModel):
    """Repository reference attached to every GitHub event.

    Attributes:
        id: Numeric repository ID (used to detect same-repo push runs)
        name: Full repository name in ``owner/repo`` form
        url: API URL of the repository
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | None = Field(None, description="Repository ID")
    name: str = Field(..., description="Full repository name (owner/repo)")
    url: str = Field("", description="Repository API URL")


class RawEvent(BaseModel):
    """A public GitHub event as delivered by the Events API.

    Attributes:
        id: GitHub event ID
        type: Event kind tag (e.g. PushEvent, WatchEvent)
        repo: Repository the event happened in
        payload: Kind-specific payload (issue, pull_request, forkee, commits, ...)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field("", description="GitHub event ID")
    type: str = Field(..., description="Event kind tag")
    repo: RepoRef = Field(..., description="Repository reference")
    payload: dict[str, Any] = Field(default_factory=dict, description="Kind-specific payload")

    @property
    def commits(self) -> list[dict[str, Any]]:
        """Commits carried by a PushEvent payload (empty for other kinds)."""
        commits: list[dict[str, Any]] = self.payload.get("commits") or []
        return commits

    @classmethod
    def from_github_event(cls, event: dict[str, Any]) -> "RawEvent":
        """Parse a GitHub Events API record into RawEvent.

        Args:
            event: Event dictionary from the Events API

        Returns:
            RawEvent instance

        Example:
            >>> event = {"id": "1", "type": "WatchEvent", "repo": {"id": 7, "name": "o/r"}}
            >>> RawEvent.from_github_event(event).repo.name
            'o/r'
        """
        return cls.model_validate(
            {
                "id": str(event.get("id", "")),
                "type": event["type"],
                "repo": event["repo"],
                "payload": event.get("payload") or {},
            }
        )


class PersistOutcome(str, Enum):
    """Result of committing and pushing the document.

    Failures are raised as GitCommandError rather than returned.
    """

    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing_to_commit"


class RunOutcome(str, Enum):
    """Terminal success outcomes of a sync run."""

    UPDATED = "updated"
    NO_CHANGES = "no_changes"


@dataclass(frozen=True)
class RegionMerge:
    """Result of merging rendered lines into a document.

    Attributes:
        lines: Full document lines after the merge
        changed: False when the managed region already matched
    """

    lines: list[str]
    changed: bool
