from fastapi import Request

from citybites.config import Settings
from citybites.services.cache_service import TTLCache
from citybites.services.enrichment import ImageEnricher
from citybites.services.food_guide import FoodGuide
from citybites.services.image_client import UnsplashClient
from citybites.services.llm_client import LLMClient
from citybites.services.page_extractor import PageExtractor
from citybites.services.search_client import SearchClient


def build_food_guide(settings: Settings, cache: TTLCache | None = None) -> FoodGuide:
    """Wire a FoodGuide with real clients for the given settings."""
    if cache is None:
        cache = TTLCache(default_ttl=settings.cache_ttl_seconds)
    return FoodGuide(
        settings=settings,
        cache=cache,
        search=SearchClient(settings),
        llm=LLMClient(settings),
        enricher=ImageEnricher(UnsplashClient(settings)),
        pages=PageExtractor(settings),
    )


def get_food_guide(request: Request) -> FoodGuide:
    return request.app.state.food_guide
