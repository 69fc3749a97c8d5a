"""Unsplash API client: one landscape photo per dish query."""

import logging

import httpx

from citybites.config import Settings

logger = logging.getLogger(__name__)


class UnsplashClient:
    """Adapter for the Unsplash photo search endpoint."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._access_key = settings.unsplash_access_key
        self._base_url = settings.unsplash_base_url
        self._timeout = settings.http_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return bool(self._access_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def search_photo(self, query: str) -> str:
        """Return the small-size URL of the first landscape hit, or ""."""
        client = await self._get_client()
        resp = await client.get(
            "/search/photos",
            params={"query": query, "per_page": 1, "orientation": "landscape"},
            headers={"Authorization": f"Client-ID {self._access_key}"},
        )
        resp.raise_for_status()
        data = resp.json()

        results = data.get("results") or []
        if not results:
            return ""
        urls = results[0].get("urls") or {}
        return urls.get("small") or ""

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
