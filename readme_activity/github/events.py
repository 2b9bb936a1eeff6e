"""GitHub event normalization utilities."""

from readme_activity.shared.models import RawEvent

PUSH_EVENT = "PushEvent"


def _is_same_repo_push(first: RawEvent, second: RawEvent) -> bool:
    return (
        first.type == PUSH_EVENT
        and second.type == PUSH_EVENT
        and first.repo.id == second.repo.id
    )


def merge_push_events(events: list[RawEvent]) -> list[RawEvent]:
    """Collapse adjacent PushEvents to the same repository into one.

    The merged event keeps the first event's fields and carries the
    concatenated commit lists in feed order. The input list is not modified.

    Args:
        events: Events in feed order (most recent first)

    Returns:
        New list with each run of same-repo pushes merged

    Example:
        >>> merged = merge_push_events([push_a1, push_a2, watch, push_a3])
        >>> [e.type for e in merged]
        ['PushEvent', 'WatchEvent', 'PushEvent']
    """
    merged: list[RawEvent] = []

    for event in events:
        if merged and _is_same_repo_push(merged[-1], event):
            previous = merged[-1]
            payload = {**previous.payload, "commits": previous.commits + event.commits}
            merged[-1] = previous.model_copy(update={"payload": payload})
        else:
            merged.append(event)

    return merged
