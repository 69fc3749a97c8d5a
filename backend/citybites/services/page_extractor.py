"""Page extractor: turns a restaurant web page into bounded plain text."""

import logging
import re

import httpx
from bs4 import BeautifulSoup

from citybites.config import Settings

logger = logging.getLogger(__name__)

NON_CONTENT_TAGS = ["script", "style", "nav", "footer", "header"]

_WHITESPACE = re.compile(r"\s+")


def extract_text(html: str, limit: int = 4000) -> str:
    """Strip non-content elements and return collapsed, truncated text."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    text = soup.get_text(separator=" ")
    return _WHITESPACE.sub(" ", text).strip()[:limit]


class PageExtractor:
    """Fetches a URL and extracts its text. Never raises."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._timeout = settings.page_fetch_timeout
        self._limit = settings.page_text_limit
        self._user_agent = settings.user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
                transport=self._transport,
            )
        return self._client

    async def fetch_text(self, url: str | None) -> str:
        """Return page text, or "" when the URL is unusable or the fetch fails."""
        if not url or not url.startswith("http"):
            return ""

        try:
            client = await self._get_client()
            resp = await client.get(url)
            if resp.status_code != 200:
                logger.warning(f"Page fetch for {url} returned HTTP {resp.status_code}")
                return ""
            return extract_text(resp.text, self._limit)
        except httpx.TimeoutException:
            logger.warning(f"Page fetch for {url} timed out after {self._timeout}s")
            return ""
        except Exception as e:
            logger.warning(f"Page fetch for {url} failed: {e}")
            return ""

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
