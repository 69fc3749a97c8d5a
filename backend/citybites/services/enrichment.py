"""Image enrichment: resolves dish photo URLs concurrently."""

import asyncio
import logging
from typing import Sequence

from citybites.services.image_client import UnsplashClient

logger = logging.getLogger(__name__)


class ImageEnricher:
    """Fans image lookups out in parallel and maps failures to ""."""

    def __init__(self, client: UnsplashClient):
        self._client = client

    @property
    def enabled(self) -> bool:
        return self._client.configured

    async def fetch_many(self, queries: Sequence[str]) -> list[str]:
        """Return one URL per query, in input order.

        A failed lookup yields "" for that query only. When no access key is
        configured, nothing is requested and every result is "".
        """
        if not self.enabled:
            return ["" for _ in queries]

        results = await asyncio.gather(
            *(self._fetch_one(q) for q in queries),
            return_exceptions=True,
        )

        urls: list[str] = []
        for query, result in zip(queries, results):
            if isinstance(result, BaseException):
                logger.warning(f"Image lookup failed for {query!r}: {result}")
                urls.append("")
            else:
                urls.append(result)
        return urls

    async def _fetch_one(self, query: str) -> str:
        if not query or not query.strip():
            return ""
        return await self._client.search_photo(query)

    async def close(self):
        await self._client.close()
