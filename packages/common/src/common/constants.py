"""Configuration constants for the updater."""

from typing import Final

# Release metadata
VERSION: Final[str] = "0.0.1"
RELEASE_DATE: Final[str] = "21/11/23"
PROJECT_URL: Final[str] = "swapless/aeigo"

# Hosts file defaults
DEFAULT_SENTINEL_ADDRESS: Final[str] = "0.0.0.0"
DEFAULT_HOSTS_PATH: Final[str] = "/etc/hosts"
BACKUP_SUFFIX: Final[str] = ".bak"
HOSTS_FILE_MODE: Final[int] = 0o644

# Source lists
DEFAULT_BLACKLIST_SOURCES: Final[str] = "./lists/blacklist.sources"
DEFAULT_WHITELIST_SOURCES: Final[str] = "./lists/whitelist.sources"
COMMENT_PREFIX: Final[str] = "#"
# Characters trimmed from both ends of a list line. ASCII separators \x1c-\x1f
# are not whitespace here and stay part of the line.
LINE_WHITESPACE: Final[str] = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Generated block
MISSING_HOSTS_PLACEHOLDER: Final[str] = (
    "# Original user hosts not found or couldn't be read\n"
)
GENERATED_HEADER_MARKER: Final[str] = "# Ad blocking hosts generated"
GENERATED_WARNING: Final[str] = (
    "# Don't write below this line. It will be lost if you run aeigo again."
)

# HTTP Fetcher Defaults
DEFAULT_HTTP_TIMEOUT: Final[int] = 30  # 0 disables the timeout
MAX_HTTP_TIMEOUT: Final[int] = 300  # 5 minutes

# Service Defaults
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
SERVICE_NAME: Final[str] = "updater"
