"""Base parser abstract class."""

from abc import ABC, abstractmethod
from typing import List


class BaseParser(ABC):
    """Abstract base class for domain list parsers."""

    def __init__(self, category: str):
        """
        Initialize parser.

        Args:
            category: List category (blacklist or whitelist)
        """
        self.category = category

    @abstractmethod
    def parse(self, content: str) -> List[str]:
        """
        Parse merged source content and extract domains.

        Args:
            content: Raw text of all sources of the category

        Returns:
            Sorted list of unique domain strings
        """
        pass
