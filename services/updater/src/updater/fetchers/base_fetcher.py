"""Base fetcher abstract class."""

from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseFetcher(ABC):
    """Abstract base class for source fetchers."""

    def __init__(self, url: str):
        """
        Initialize fetcher.

        Args:
            url: URL to fetch from
        """
        self.url = url

    @abstractmethod
    async def fetch(self) -> Dict[str, Any]:
        """
        Fetch the raw text of the source.

        Returns:
            Dictionary containing:
                - content: The fetched body as string
                - metadata: Metadata about the fetch (status, size, etc.)

        Raises:
            FetchError: If the transfer itself fails
        """
        pass
