"""Configuration management using Pydantic Settings."""

from typing import ClassVar

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from readme_activity.shared.exceptions import ConfigError

# Singleton instance
_settings: "Settings | None" = None

DEFAULT_EVENT_TYPES = (
    "IssueCommentEvent,IssuesEvent,PullRequestEvent,PushEvent,"
    "ForkEvent,WatchEvent,PublicEvent,CreateEvent"
)


def _env(name: str) -> AliasChoices:
    # GitHub Actions exposes action inputs as INPUT_<NAME>
    return AliasChoices(name, f"input_{name}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub configuration
    gh_username: str = Field(..., validation_alias=_env("gh_username"))
    github_token: str = Field(..., validation_alias=_env("github_token"))

    # Rendering
    max_lines: int = Field(5, validation_alias=_env("max_lines"))
    event_types: str = Field(DEFAULT_EVENT_TYPES, validation_alias=_env("event_types"))

    # Document and commit
    readme_path: str = Field("README.md", validation_alias=_env("readme_path"))
    commit_msg: str = Field(
        "⚡ Update README with the recent activity", validation_alias=_env("commit_msg")
    )
    committer_name: str = "readme-bot"
    committer_email: str = "41898282+github-actions[bot]@users.noreply.github.com"

    # Application settings
    log_level: str = "INFO"

    VALID_LOG_LEVELS: ClassVar[set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        v_upper = v.upper()
        if v_upper not in cls.VALID_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {v}. Must be one of {', '.join(cls.VALID_LOG_LEVELS)}"
            )
        return v_upper

    @field_validator("max_lines")
    @classmethod
    def validate_max_lines(cls, v: int) -> int:
        """Validate max lines is a positive integer."""
        if v < 1:
            raise ConfigError(f"Max lines must be a positive integer, got {v}")
        return v

    @field_validator("gh_username")
    @classmethod
    def validate_gh_username(cls, v: str) -> str:
        """Validate the GitHub username is not blank."""
        if not v.strip():
            raise ConfigError("GitHub username must not be empty")
        return v.strip()

    @property
    def event_types_list(self) -> list[str]:
        """Parse comma-separated event types into a lower-cased list.

        Returns:
            List of allowed event kinds (e.g., ['pushevent', 'watchevent'])
        """
        if not self.event_types:
            return []
        return [kind.strip().lower() for kind in self.event_types.split(",") if kind.strip()]


def get_settings() -> Settings:
    """Get or create the global Settings instance (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings
