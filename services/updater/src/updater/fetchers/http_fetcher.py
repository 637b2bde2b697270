"""HTTP fetcher for blocklist sources."""

import asyncio
import aiohttp
import structlog
from typing import Dict, Any, List, Optional
from common import FetchError, constants
from .base_fetcher import BaseFetcher

logger = structlog.get_logger()

# Undecodable bytes of a list are carried through to the hosts file unchanged.
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"


class HTTPFetcher(BaseFetcher):
    """Single-shot HTTP fetcher.

    Only transport failures count as errors. A non-success status still
    yields its body so that the caller sees exactly what the server sent.
    """

    def __init__(self, url: str, timeout: int = constants.DEFAULT_HTTP_TIMEOUT):
        """
        Initialize HTTP fetcher.

        Args:
            url: URL to fetch from
            timeout: Request timeout in seconds, 0 for no timeout
        """
        super().__init__(url)
        self.timeout = timeout

    def _client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.timeout or None)

    async def fetch(self) -> Dict[str, Any]:
        """
        Fetch data from the HTTP source.

        Returns:
            Dictionary containing:
                - content: The fetched content as string
                - metadata: Metadata (http_status, content_length, etc.)

        Raises:
            FetchError: If the request fails at the transport level
        """
        logger.info("Downloading source", url=self.url, timeout=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=self._client_timeout()) as session:
                async with session.get(self.url) as response:
                    body = await response.read()
                    content = body.decode(SOURCE_ENCODING, SOURCE_ERRORS)

                    if response.status >= 400:
                        logger.warning(
                            "Source answered with error status",
                            url=self.url,
                            status=response.status,
                        )

                    metadata = {
                        "http_status": response.status,
                        "content_length": len(content),
                        "content_type": response.headers.get("Content-Type", ""),
                        "source_url": self.url,
                    }

                    logger.debug(
                        "HTTP fetch complete",
                        url=self.url,
                        status=response.status,
                        content_length=len(content),
                    )

                    return {
                        "content": content,
                        "metadata": metadata,
                    }

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(
                message=f"Failed to download {self.url}",
                context={"url": self.url, "timeout": self.timeout},
                original_error=e,
            ) from e


async def download_and_merge_sources(
    sources: List[str],
    timeout: int = constants.DEFAULT_HTTP_TIMEOUT,
    stats: Optional[Dict[str, int]] = None,
) -> str:
    """
    Download every source in order and concatenate the bodies.

    Sources are fetched one at a time. A failed download is logged and
    contributes an empty string; the remaining sources are still fetched.
    Bodies are joined without a separator.

    Args:
        sources: Source URLs in fetch order
        timeout: Per-source timeout in seconds, 0 for no timeout
        stats: Optional counters updated with sources_fetched/sources_failed

    Returns:
        The merged text of all sources
    """
    merged = []

    for url in sources:
        try:
            result = await HTTPFetcher(url, timeout=timeout).fetch()
        except FetchError as e:
            logger.error(
                "Error downloading source",
                url=url,
                error=str(e),
                error_type=type(e.original_error).__name__,
            )
            if stats is not None:
                stats["sources_failed"] = stats.get("sources_failed", 0) + 1
            continue

        merged.append(result["content"])
        if stats is not None:
            stats["sources_fetched"] = stats.get("sources_fetched", 0) + 1

    return "".join(merged)
