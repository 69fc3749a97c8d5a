"""Tavily web search adapter."""

import logging
from dataclasses import dataclass

from tavily import AsyncTavilyClient

from citybites.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Lean search hit mapped from the Tavily response."""
    title: str
    url: str
    content: str


@dataclass(frozen=True)
class SearchResponse:
    results: list[SearchResult]


class SearchClient:
    """Adapter for the Tavily search API."""

    def __init__(self, settings: Settings):
        self._api_key = settings.tavily_api_key
        self._client: AsyncTavilyClient | None = None

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> AsyncTavilyClient:
        if self._client is None:
            self._client = AsyncTavilyClient(api_key=self._api_key)
        return self._client

    async def search(
        self,
        query: str,
        *,
        search_depth: str = "basic",
        max_results: int = 5,
    ) -> SearchResponse:
        """Run one web search. Errors propagate to the caller."""
        client = self._get_client()
        data = await client.search(
            query=query,
            search_depth=search_depth,
            max_results=max_results,
        )

        results = []
        for r in data.get("results") or []:
            results.append(SearchResult(
                title=r.get("title") or "",
                url=r.get("url") or "",
                content=r.get("content") or "",
            ))
        logger.debug(f"Tavily returned {len(results)} results for {query!r}")
        return SearchResponse(results=results)
