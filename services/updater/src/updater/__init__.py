"""Hosts-file blocklist updater service."""

from common.constants import VERSION as __version__

__all__ = ["__version__"]
