"""Reads newline-delimited source lists."""

from pathlib import Path
from typing import List, Optional
import structlog
from common import SourceFileError, constants

logger = structlog.get_logger()


def read_sources_from_file(
    path: str, sources: Optional[List[str]] = None
) -> List[str]:
    """
    Append the non-empty, trimmed lines of a sources file to ``sources``.

    A missing file is not an error: the list comes back unchanged. A file
    that exists but cannot be read is logged and whatever was collected
    before the failure is returned.

    Args:
        path: Path to the sources file
        sources: Already collected sources (default: empty list)

    Returns:
        The sources list, extended in file order
    """
    sources = list(sources or [])
    source_file = Path(path)

    if not source_file.exists():
        logger.debug("Sources file not found", path=path)
        return sources

    lines_read = 0
    try:
        with open(source_file, "r", encoding="utf-8") as f:
            for line in f:
                source = line.strip(constants.LINE_WHITESPACE)
                if source:
                    sources.append(source)
                    lines_read += 1
    except (OSError, UnicodeDecodeError) as e:
        error = SourceFileError(
            "Error reading sources file",
            context={"path": path, "lines_read": lines_read},
            original_error=e,
        )
        logger.error(
            "Failed to read sources file",
            path=path,
            error=str(error),
            error_type=type(e).__name__,
        )
        return sources

    logger.info("Sources loaded", path=path, count=lines_read)
    return sources
