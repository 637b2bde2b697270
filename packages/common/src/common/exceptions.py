"""Custom exceptions for the updater."""

from typing import Optional, Dict, Any


class PipelineException(Exception):
    """Base exception for all updater errors.

    Attributes:
        message: Error message
        context: Additional context about the error
        original_error: Original exception if this wraps another error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize exception with context.

        Args:
            message: Error message
            context: Additional context (e.g., url, path)
            original_error: Original exception if wrapping
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        """String representation with context."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}: {self.original_error}]"
        return base


class FetchError(PipelineException):
    """Raised when downloading a source fails at the transport level.

    Common context fields:
        - url: URL that failed
        - timeout: Timeout in effect for the request
    """

    pass


class SourceFileError(PipelineException):
    """Raised when a sources list exists but cannot be read.

    Common context fields:
        - path: Path to the sources file
        - lines_read: Number of sources read before the failure
    """

    pass


class HostsFileError(PipelineException):
    """Raised when the hosts file or its backup cannot be read or written.

    Common context fields:
        - path: Path that failed
        - operation: read, write, copy
    """

    pass


class ConfigurationError(PipelineException):
    """Raised when configuration is invalid.

    Common context fields:
        - config_path: Path to config file
        - field: Invalid field name
    """

    pass
