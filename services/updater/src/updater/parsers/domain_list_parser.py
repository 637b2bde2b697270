"""Plain domain-per-line list parser."""

import structlog
from typing import List, Set
from common import constants
from .base_parser import BaseParser

logger = structlog.get_logger()


class DomainListParser(BaseParser):
    """Parser for line-oriented domain lists.

    Example format:
        # Comment line
        ads.example.com
        tracker.example.net

    Every surviving line is taken verbatim as a domain. Hosts-style entries
    such as ``0.0.0.0 ads.example.com`` are kept whole.
    """

    def __init__(self, category: str):
        super().__init__(category)
        self.stats = {"lines": 0, "skipped": 0, "duplicates": 0}

    def parse(self, content: str) -> List[str]:
        """
        Extract the distinct, non-blank, non-comment lines of ``content``.

        Args:
            content: Raw merged text

        Returns:
            Unique domains in ascending order
        """
        domains: Set[str] = set()
        lines = content.split("\n")

        for line in lines:
            line = line.strip(constants.LINE_WHITESPACE)

            if not line or line.startswith(constants.COMMENT_PREFIX):
                self.stats["skipped"] += 1
                continue

            if line in domains:
                self.stats["duplicates"] += 1
            domains.add(line)

        self.stats["lines"] += len(lines)
        extracted = sorted(domains)

        logger.info(
            "Domains extracted",
            category=self.category,
            total_lines=len(lines),
            unique=len(extracted),
            duplicates=self.stats["duplicates"],
        )

        return extracted


def extract_domains(content: str, category: str = "blacklist") -> List[str]:
    """Convenience wrapper returning the sorted unique domains of ``content``."""
    return DomainListParser(category).parse(content)
