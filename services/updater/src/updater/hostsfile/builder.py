"""Hosts file content builder and counter."""

from datetime import datetime
from typing import List, Optional
import structlog
from common import HostsFileError, constants, local_timestamp
from schemas import UpdaterConfig

logger = structlog.get_logger()

# Bytes that are not valid UTF-8 survive a read/write round trip untouched.
HOSTS_ENCODING = "utf-8"
HOSTS_ERRORS = "surrogateescape"


def read_hosts_file(path: str) -> str:
    """
    Read a hosts file verbatim.

    Args:
        path: File to read

    Returns:
        File content with original line endings

    Raises:
        HostsFileError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding=HOSTS_ENCODING, errors=HOSTS_ERRORS, newline="") as f:
            return f.read()
    except OSError as e:
        raise HostsFileError(
            "Cannot read hosts file",
            context={"path": path, "operation": "read"},
            original_error=e,
        ) from e


def generated_header(now: Optional[datetime] = None) -> str:
    """Comment block separating user content from generated entries."""
    return (
        f"\n{constants.GENERATED_HEADER_MARKER} {local_timestamp(now)}\n"
        f"{constants.GENERATED_WARNING}\n\n"
    )


def strip_generated_block(content: str) -> str:
    """
    Drop everything from the first generated header onwards.

    The newline that ``generated_header`` puts in front of the marker is
    removed as well, so stripping a freshly built file gives back exactly
    the content it was built from, with or without a final newline.
    """
    lines = content.split("\n")

    for index, line in enumerate(lines):
        if constants.GENERATED_HEADER_MARKER in line:
            return "\n".join(lines[:index])

    return content


def build_final_hosts_file(
    blacklist: List[str],
    whitelist: List[str],
    config: UpdaterConfig,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the complete hosts file content.

    The prior content of ``config.input_path`` comes first (or a placeholder
    comment when it cannot be read), then the generated header, then one
    ``<sentinel> <domain>`` line per blacklisted domain.

    Unless ``config.replace_generated_block`` is set, a generated block that
    is already present in the prior content is kept, so every run appends a
    new block. The whitelist only takes effect with ``config.apply_whitelist``.

    Args:
        blacklist: Sorted unique domains to block
        whitelist: Sorted unique domains to exempt
        config: Updater settings
        now: Timestamp for the header (default: current time)

    Returns:
        Final hosts file content
    """
    try:
        prior = read_hosts_file(config.input_path)
    except HostsFileError as e:
        logger.warning(
            "Original hosts file unavailable, using placeholder",
            path=config.input_path,
            error=str(e),
        )
        prior = constants.MISSING_HOSTS_PLACEHOLDER

    if config.replace_generated_block:
        prior = strip_generated_block(prior)

    domains = blacklist
    if config.apply_whitelist and whitelist:
        exempt = set(whitelist)
        domains = [domain for domain in blacklist if domain not in exempt]
        logger.info(
            "Whitelist applied",
            exempted=len(blacklist) - len(domains),
        )

    parts = [prior, generated_header(now)]
    parts.extend(f"{config.sentinel_address} {domain}\n" for domain in domains)

    logger.debug(
        "Hosts file built",
        prior_length=len(prior),
        entries=len(domains),
    )

    return "".join(parts)


def count_blocked_websites(
    content: str, sentinel: str = constants.DEFAULT_SENTINEL_ADDRESS
) -> int:
    """Count lines that start with the sentinel address."""
    return sum(1 for line in content.split("\n") if line.startswith(sentinel))
