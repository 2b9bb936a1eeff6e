"""Text renderers for the supported GitHub event kinds."""

from collections.abc import Callable

from readme_activity.readme.event_emojis import (
    COMMENT_EMOJI,
    CREATE_EMOJI,
    FORK_EMOJI,
    ISSUE_EMOJI,
    PR_CLOSED_EMOJI,
    PR_MERGED_EMOJI,
    PR_OPENED_EMOJI,
    PUBLIC_EMOJI,
    PUSH_EMOJI,
    STAR_EMOJI,
)
from readme_activity.readme.links import issue_or_pr_link, url_link
from readme_activity.shared.models import RawEvent

Renderer = Callable[[RawEvent], str]


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def render_issue_comment(event: RawEvent) -> str:
    return f"{COMMENT_EMOJI} Commented on {issue_or_pr_link(event)} in {url_link(event.repo.name)}"


def render_issue(event: RawEvent) -> str:
    action = capitalize(event.payload["action"])
    return f"{ISSUE_EMOJI} {action} issue {issue_or_pr_link(event)} in {url_link(event.repo.name)}"


def render_pull_request(event: RawEvent) -> str:
    """Render a PullRequestEvent.

    Merged PRs get their own verb; otherwise the payload action is used,
    with a distinct prefix for newly opened PRs.
    """
    action = event.payload["action"]
    if event.payload["pull_request"].get("merged"):
        verb = f"{PR_MERGED_EMOJI} Merged"
    else:
        emoji = PR_OPENED_EMOJI if action == "opened" else PR_CLOSED_EMOJI
        verb = f"{emoji} {capitalize(action)}"
    return f"{verb} PR {issue_or_pr_link(event)} in {url_link(event.repo.name)}"


def render_push(event: RawEvent) -> str:
    repo = url_link(event.repo.url)
    commit_count = len(event.commits)
    if commit_count == 1:
        return f"{PUSH_EMOJI} Pushed to {repo}"
    return f"{PUSH_EMOJI} Pushed {commit_count} commits to {repo}"


def render_fork(event: RawEvent) -> str:
    fork = url_link(event.payload["forkee"]["html_url"])
    return f"{FORK_EMOJI} Forked {url_link(event.repo.url)} to {fork}"


def render_watch(event: RawEvent) -> str:
    return f"{STAR_EMOJI} Starred {url_link(event.repo.url)}"


def render_public(event: RawEvent) -> str:
    return f"{PUBLIC_EMOJI} Open sourced {url_link(event.repo.url)}"


def render_create(event: RawEvent) -> str:
    return f"{CREATE_EMOJI} Created {url_link(event.repo.url)}"


# Event kinds without an entry here are never shown
RENDERERS: dict[str, Renderer] = {
    "IssueCommentEvent": render_issue_comment,
    "IssuesEvent": render_issue,
    "PullRequestEvent": render_pull_request,
    "PushEvent": render_push,
    "ForkEvent": render_fork,
    "WatchEvent": render_watch,
    "PublicEvent": render_public,
    "CreateEvent": render_create,
}


def is_renderable(event: RawEvent) -> bool:
    """Check whether an event kind has a renderer."""
    return event.type in RENDERERS


def render_event(event: RawEvent) -> str:
    """Render one event to a single activity line.

    Args:
        event: Event of a supported kind

    Returns:
        Rendered line (emoji, verb and links)

    Raises:
        KeyError: If the event kind has no renderer
    """
    return RENDERERS[event.type](event)
