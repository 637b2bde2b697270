"""Schemas package."""

from schemas.config import RunMode, UpdaterConfig
from schemas.summary import RunSummary

__all__ = [
    "RunMode",
    "UpdaterConfig",
    "RunSummary",
]
