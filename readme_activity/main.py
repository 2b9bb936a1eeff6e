"""readme-activity entry point."""

import asyncio
import sys
import uuid

from pydantic import ValidationError

from readme_activity.core.config import Settings, get_settings
from readme_activity.core.logging import get_logger, set_run_id, setup_logging
from readme_activity.git.committer import GitCommitter, persist_document
from readme_activity.github.client import GitHubClient
from readme_activity.readme.document import read_lines
from readme_activity.readme.pipeline import build_activity_lines
from readme_activity.readme.region import merge_region
from readme_activity.shared.exceptions import (
    ConfigError,
    DocumentError,
    GitCommandError,
    GitHubAPIError,
    MissingStartMarkerError,
    NoContentError,
)
from readme_activity.shared.models import RunOutcome

logger = get_logger(__name__)


async def sync_readme(
    settings: Settings, client: GitHubClient, committer: GitCommitter
) -> RunOutcome:
    """Run one fetch, render, merge and persist cycle.

    Args:
        settings: Application settings
        client: Open GitHub client
        committer: Git committer for the README

    Returns:
        UPDATED when the README was rewritten and persisted, NO_CHANGES when
        the activity section was already current

    Raises:
        GitHubAPIError: If fetching events fails (the README is untouched)
        MissingStartMarkerError: If the README has no start marker
        NoContentError: If no activity lines were produced
        GitCommandError: If commit or push fails (the README is already written)
    """
    logger.debug("sync.events.fetching", username=settings.gh_username)
    events = await client.list_public_events(settings.gh_username)
    logger.debug("sync.events.fetched", username=settings.gh_username, count=len(events))

    content = build_activity_lines(events, settings.max_lines, settings.event_types_list)

    lines = read_lines(settings.readme_path)
    merge = merge_region(lines, content)
    if not merge.changed:
        logger.info("sync.no_changes", path=settings.readme_path)
        return RunOutcome.NO_CHANGES

    outcome = await persist_document(settings.readme_path, merge.lines, committer)
    logger.info("sync.completed", path=settings.readme_path, persist=outcome.value)
    return RunOutcome.UPDATED


async def main(settings: Settings) -> RunOutcome:
    """Open the collaborators and run a single sync."""
    committer = GitCommitter(
        message=settings.commit_msg,
        user_name=settings.committer_name,
        user_email=settings.committer_email,
    )
    async with GitHubClient(settings.github_token) as client:
        return await sync_readme(settings, client, committer)


def run() -> None:
    """Entry point for a scheduled run; exits non-zero on any failure."""
    try:
        settings = get_settings()
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(log_level=settings.log_level)
    # asyncio.run copies the current context, so the run ID reaches the sync too
    set_run_id(uuid.uuid4().hex[:12])

    try:
        outcome = asyncio.run(main(settings))
    except MissingStartMarkerError as e:
        logger.error("sync.failed.missing_start_marker", error=str(e))
        sys.exit(1)
    except NoContentError as e:
        logger.error("sync.failed.no_content", error=str(e))
        sys.exit(1)
    except GitCommandError as e:
        logger.error(
            "sync.failed.persist",
            error=str(e),
            returncode=e.returncode,
            output=e.output,
        )
        sys.exit(1)
    except GitHubAPIError as e:
        logger.error("sync.failed.fetch", error=str(e))
        sys.exit(1)
    except DocumentError as e:
        logger.error("sync.failed.document", error=str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("sync.interrupted")
        sys.exit(130)
    except Exception as e:
        logger.error("sync.failed.unexpected", error=str(e), exc_info=True)
        sys.exit(1)

    if outcome is RunOutcome.NO_CHANGES:
        logger.info("sync.result", outcome=outcome.value, message="No changes detected")
    else:
        logger.info("sync.result", outcome=outcome.value, message="Pushed to remote repository")


if __name__ == "__main__":
    run()
