"""Hosts file writer."""

import os
import structlog
from common import constants
from updater.hostsfile.builder import HOSTS_ENCODING, HOSTS_ERRORS

logger = structlog.get_logger()


def write_hosts_file(path: str, content: str) -> bool:
    """
    Overwrite ``path`` with ``content``.

    A new file is created with mode 0644. Failures are logged, not raised.

    Args:
        path: Destination file
        content: Full file content

    Returns:
        True if the file was written
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, constants.HOSTS_FILE_MODE)
        with open(fd, "w", encoding=HOSTS_ENCODING, errors=HOSTS_ERRORS, newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error(
            "Error writing hosts file",
            path=path,
            error=str(e),
            error_type=type(e).__name__,
        )
        return False

    logger.info("Hosts file written", path=path, size=len(content))
    return True
