"""Backup and restore of the hosts file."""

import shutil
from pathlib import Path
import structlog
from common import HostsFileError

logger = structlog.get_logger()


def _copy(src: str, dst: str) -> None:
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        raise HostsFileError(
            "Cannot copy hosts file",
            context={"src": src, "dst": dst, "operation": "copy"},
            original_error=e,
        ) from e


def backup_hosts_file(path: str, backup_path: str) -> bool:
    """
    Copy the current hosts file to ``backup_path``.

    Nothing is copied when ``path`` does not exist yet.

    Returns:
        True if a backup was written
    """
    if not Path(path).exists():
        logger.info("Nothing to back up", path=path)
        return False

    try:
        _copy(path, backup_path)
    except HostsFileError as e:
        logger.error("Backup failed", path=path, backup_path=backup_path, error=str(e))
        return False

    logger.info("Hosts file backed up", path=path, backup_path=backup_path)
    return True


def restore_hosts_file(backup_path: str, path: str) -> bool:
    """
    Copy ``backup_path`` over the hosts file.

    Returns:
        True if the hosts file was restored
    """
    if not Path(backup_path).exists():
        logger.error("Backup not found", backup_path=backup_path)
        return False

    try:
        _copy(backup_path, path)
    except HostsFileError as e:
        logger.error("Restore failed", path=path, backup_path=backup_path, error=str(e))
        return False

    logger.info("Hosts file restored", path=path, backup_path=backup_path)
    return True
