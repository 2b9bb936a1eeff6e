"""Merge rendered activity lines into the README's managed region."""

from readme_activity.core.logging import get_logger
from readme_activity.shared.exceptions import MissingStartMarkerError, NoContentError
from readme_activity.shared.models import RegionMerge

logger = get_logger(__name__)

START_MARKER = "<!--START_SECTION:activity-->"
END_MARKER = "<!--END_SECTION:activity-->"


def find_marker(lines: list[str], marker: str, start: int = 0) -> int | None:
    """Return the index of the first line at or after ``start`` equal to ``marker``.

    Lines are compared after stripping surrounding whitespace.
    """
    for idx in range(start, len(lines)):
        if lines[idx].strip() == marker:
            return idx
    return None


def number_lines(content: list[str]) -> list[str]:
    """Number activity lines as a markdown ordered list starting at 1."""
    return [f"{idx}. {line}" for idx, line in enumerate(content, start=1)]


def reconcile_region(existing: list[str], numbered: list[str]) -> list[str]:
    """Overwrite non-blank region lines with new numbered lines, in order.

    Blank lines are kept where they are and do not consume a new line, so a
    blank inserted after the start marker by a formatter survives. When the
    new lines run out, the remaining existing lines are kept unchanged; new
    lines left over once the existing lines are exhausted are appended.

    Args:
        existing: Current lines between the markers (non-empty)
        numbered: Numbered replacement lines

    Returns:
        New region lines
    """
    region: list[str] = []
    cursor = 0

    for idx, line in enumerate(existing):
        if not line.strip():
            region.append(line)
            continue
        if cursor >= len(numbered):
            region.extend(existing[idx:])
            break
        region.append(numbered[cursor])
        cursor += 1
    else:
        region.extend(numbered[cursor:])

    return region


def merge_region(lines: list[str], content: list[str]) -> RegionMerge:
    """Merge activity lines into a document's activity section.

    Args:
        lines: Document lines
        content: Unnumbered activity lines

    Returns:
        RegionMerge with the new document lines and whether anything changed

    Raises:
        MissingStartMarkerError: If the document has no start marker
        NoContentError: If there are no activity lines to write
    """
    start_idx = find_marker(lines, START_MARKER)
    if start_idx is None:
        raise MissingStartMarkerError(f"Couldn't find the {START_MARKER} comment. Exiting!")

    if not content:
        raise NoContentError("No PullRequest/Issue/IssueComment events found")

    numbered = number_lines(content)
    end_idx = find_marker(lines, END_MARKER, start=start_idx + 1)

    if end_idx is None:
        logger.info("readme.region.bootstrap", lines=len(numbered))
        updated = lines[: start_idx + 1] + numbered + [END_MARKER] + lines[start_idx + 1 :]
        return RegionMerge(lines=updated, changed=True)

    existing = lines[start_idx + 1 : end_idx]
    if "\n".join(existing).strip() == "\n".join(numbered).strip():
        logger.info("readme.region.unchanged")
        return RegionMerge(lines=list(lines), changed=False)

    if not existing:
        logger.info("readme.region.filled", lines=len(numbered))
        region = numbered
    else:
        logger.info("readme.region.updated", lines=len(numbered), existing=len(existing))
        region = reconcile_region(existing, numbered)

    updated = lines[: start_idx + 1] + region + lines[end_idx:]
    return RegionMerge(lines=updated, changed=True)
