"""Custom exception hierarchy for readme-activity."""


class ReadmeActivityError(Exception):
    """Base exception for all readme-activity errors."""

    pass


class ConfigError(ReadmeActivityError):
    """Raised when configuration validation fails."""

    pass


class GitHubAPIError(ReadmeActivityError):
    """Raised when GitHub API requests fail."""

    pass


class DocumentError(ReadmeActivityError):
    """Raised when the target document cannot be read or written."""

    pass


class MissingStartMarkerError(ReadmeActivityError):
    """Raised when the document has no activity start marker."""

    pass


class NoContentError(ReadmeActivityError):
    """Raised when no activity lines survive the rendering pipeline."""

    pass


class GitCommandError(ReadmeActivityError):
    """Raised when a git invocation exits with a non-zero status.

    Attributes:
        returncode: Exit status of the git process
        args: Arguments passed to git
        output: Combined stdout/stderr of the failed command
    """

    def __init__(self, returncode: int, args: list[str], output: str = "") -> None:
        self.returncode = returncode
        self.git_args = args
        self.output = output
        super().__init__(f"Invalid status code: {returncode} (git {' '.join(args)})")
