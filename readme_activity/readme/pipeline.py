"""Turn a raw event feed into the activity lines shown in the README."""

from collections.abc import Iterable

from readme_activity.core.logging import get_logger
from readme_activity.github.events import merge_push_events
from readme_activity.readme.renderers import is_renderable, render_event
from readme_activity.shared.models import RawEvent

logger = get_logger(__name__)

# Events kept per output line before rendering and deduplication
PRE_CAP_FACTOR = 10

FEW_LINES_THRESHOLD = 5


def dedupe_lines(lines: Iterable[str]) -> list[str]:
    """Drop blank lines and repeats, keeping the first occurrence in order."""
    seen: set[str] = set()
    unique: list[str] = []
    for line in lines:
        if line and line not in seen:
            unique.append(line)
            seen.add(line)
    return unique


def build_activity_lines(
    events: list[RawEvent], max_lines: int, event_types: Iterable[str]
) -> list[str]:
    """Build the unnumbered activity lines for a feed of events.

    Stages, in order: merge adjacent same-repo pushes, keep renderable
    kinds, keep allow-listed kinds, cap at ``PRE_CAP_FACTOR * max_lines``
    events, render, drop blanks and duplicates, cap at ``max_lines``.

    Args:
        events: Events in feed order (most recent first)
        max_lines: Maximum number of lines to produce
        event_types: Allowed event kinds (compared case-insensitively)

    Returns:
        Activity lines, most recent first
    """
    allowed = {kind.strip().lower() for kind in event_types}

    candidates = [
        event
        for event in merge_push_events(events)
        if is_renderable(event) and event.type.lower() in allowed
    ]
    candidates = candidates[: PRE_CAP_FACTOR * max_lines]

    lines = dedupe_lines(render_event(event) for event in candidates)[:max_lines]

    logger.debug(
        "readme.pipeline.built",
        events=len(events),
        candidates=len(candidates),
        lines=len(lines),
    )
    if len(lines) < FEW_LINES_THRESHOLD:
        logger.info("readme.pipeline.few_activities", lines=len(lines))

    return lines
