"""Read and write the target README as a list of lines."""

from pathlib import Path

from readme_activity.core.logging import get_logger
from readme_activity.shared.exceptions import DocumentError

logger = get_logger(__name__)


def read_lines(path: str | Path) -> list[str]:
    """Read a document and split it on ``\\n``.

    Args:
        path: Document path

    Returns:
        Document lines without separators

    Raises:
        DocumentError: If the file cannot be read
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("readme.document.read_failed", path=str(path), error=str(e))
        raise DocumentError(f"Failed to read {path}: {e}") from e
    return content.split("\n")


def write_lines(path: str | Path, lines: list[str]) -> None:
    """Join lines with ``\\n`` and write them back.

    Args:
        path: Document path
        lines: Document lines

    Raises:
        DocumentError: If the file cannot be written
    """
    try:
        Path(path).write_text("\n".join(lines), encoding="utf-8")
    except OSError as e:
        logger.error("readme.document.write_failed", path=str(path), error=str(e))
        raise DocumentError(f"Failed to write {path}: {e}") from e
    logger.info("readme.document.written", path=str(path), lines=len(lines))
