"""Shared fixtures: settings, fake clock and fake external clients."""

import json
from unittest.mock import AsyncMock

import pytest

from citybites.config import Settings
from citybites.services.cache_service import TTLCache
from citybites.services.enrichment import ImageEnricher
from citybites.services.food_guide import FoodGuide
from citybites.services.search_client import SearchResponse, SearchResult


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSearchClient:
    def __init__(self, configured: bool = True, results: list[SearchResult] | None = None):
        self.configured = configured
        self.search = AsyncMock(return_value=SearchResponse(results=results or SEARCH_RESULTS))


class FakeLLMClient:
    def __init__(self, payload: dict | None = None, configured: bool = True):
        self.configured = configured
        self.complete = AsyncMock(return_value=json.dumps(payload or {}))
        self.close = AsyncMock()

    def returns(self, payload) -> None:
        self.complete.return_value = json.dumps(payload)


class FakeUnsplashClient:
    def __init__(self, configured: bool = True):
        self.configured = configured
        self.search_photo = AsyncMock(side_effect=lambda q: f"https://images.test/{q.replace(' ', '-')}.jpg")
        self.close = AsyncMock()


class FakePageExtractor:
    def __init__(self, text: str = ""):
        self.fetch_text = AsyncMock(return_value=text)
        self.close = AsyncMock()


SEARCH_RESULTS = [
    SearchResult(
        title="Where locals eat in Lisbon",
        url="https://example.com/lisbon-food",
        content="Cervejaria Ramiro is famous for seafood. Taberna da Rua das Flores serves petiscos.",
    ),
    SearchResult(
        title="Lisbon food guide",
        url="https://example.com/guide",
        content="Pasteis de Belem has baked custard tarts since 1837.",
    ),
]

RESTAURANTS_PAYLOAD = {
    "restaurants": [
        {
            "name": "Cervejaria Ramiro",
            "neighborhood": "Intendente",
            "cuisineType": "Seafood",
            "vibeTagline": "Loud, buttery, garlicky seafood hall",
            "whyLocal": "Lisboetas finish with a steak sandwich here.",
            "url": "https://example.com/lisbon-food",
        },
        {
            "name": "Taberna da Rua das Flores",
            "neighborhood": "Chiado",
            "cuisineType": "Portuguese petiscos",
            "vibeTagline": "Tiny tavern, chalkboard menu",
            "whyLocal": "The daily menu follows the market.",
            "url": "",
        },
        {
            "name": "Pasteis de Belem",
            "neighborhood": "Belem",
            "cuisineType": "Bakery",
            "vibeTagline": "The original custard tart",
            "whyLocal": "The recipe has been secret since 1837.",
            "url": "https://example.com/guide",
        },
    ]
}


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        tavily_api_key="tvly-test",
        openai_api_key="sk-test",
        anthropic_api_key="",
        unsplash_access_key="unsplash-test",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(clock=clock)


@pytest.fixture
def search():
    return FakeSearchClient()


@pytest.fixture
def llm():
    return FakeLLMClient(RESTAURANTS_PAYLOAD)


@pytest.fixture
def unsplash():
    return FakeUnsplashClient()


@pytest.fixture
def pages():
    return FakePageExtractor()


@pytest.fixture
def guide(settings, cache, search, llm, unsplash, pages):
    return FoodGuide(
        settings=settings,
        cache=cache,
        search=search,
        llm=llm,
        enricher=ImageEnricher(unsplash),
        pages=pages,
    )
