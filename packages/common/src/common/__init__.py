"""Common utilities package."""

from common.logging import setup_logging
from common.exceptions import (
    PipelineException,
    FetchError,
    SourceFileError,
    HostsFileError,
    ConfigurationError,
)
from common.utils import get_env, local_timestamp
from common import constants

__all__ = [
    "setup_logging",
    "PipelineException",
    "FetchError",
    "SourceFileError",
    "HostsFileError",
    "ConfigurationError",
    "get_env",
    "local_timestamp",
    "constants",
]
