"""Fetchers package."""

from updater.fetchers.base_fetcher import BaseFetcher
from updater.fetchers.http_fetcher import HTTPFetcher, download_and_merge_sources

__all__ = ["BaseFetcher", "HTTPFetcher", "download_and_merge_sources"]
