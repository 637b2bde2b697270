"""Source list loading package."""

from updater.sources.source_loader import read_sources_from_file

__all__ = ["read_sources_from_file"]
