"""Parsers package."""

from updater.parsers.base_parser import BaseParser
from updater.parsers.domain_list_parser import DomainListParser, extract_domains

__all__ = ["BaseParser", "DomainListParser", "extract_domains"]
