"""Food guide pipelines: one per tool, all sharing the same shape.

    credentials check → cache lookup → context gathering → LLM extraction
    → image enrichment → cache write → response (payload + summary)

Search and extraction failures abort the invocation with an UpstreamError.
Image and page-fetch failures are absorbed by their collaborators.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

from citybites.config import Settings
from citybites.errors import CityBitesError, ConfigurationError, UpstreamError
from citybites.schemas.food import (
    CityFoodMap,
    DayItinerary,
    Dish,
    FoodRecord,
    ItineraryStop,
    MapStop,
    MenuHighlights,
    Restaurant,
    RestaurantSpots,
    TasteItinerary,
    ToolResponse,
)
from citybites.services.cache_service import TTLCache
from citybites.services.enrichment import ImageEnricher
from citybites.services.food_guide import prompts
from citybites.services.food_guide.extraction import (
    coerce_float,
    coerce_int,
    decode_records,
    parse_json_object,
)
from citybites.services.llm_client import LLMClient
from citybites.services.page_extractor import PageExtractor
from citybites.services.search_client import SearchClient, SearchResponse

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=FoodRecord)

TOOL_RESTAURANTS = "search-city-food"
TOOL_MENU = "get-menu-dishes"
TOOL_ITINERARY = "build-taste-itinerary"
TOOL_FOOD_MAP = "explore-city-food-map"

WIDGETS = {
    TOOL_RESTAURANTS: "restaurant-spots",
    TOOL_MENU: "menu-highlights",
    TOOL_ITINERARY: "taste-itinerary",
    TOOL_FOOD_MAP: "city-food-map",
}

# Context budgets (characters)
MAX_SNIPPET_CONTEXT = 8000
MAX_ITINERARY_CONTEXT = 5000

MIN_DAYS = 1
MAX_DAYS = 3

SLOT_ORDER = ["morning coffee", "midday snack", "lunch", "dinner", "late bites"]


def _slot_rank(time_slot: str) -> int:
    slot = time_slot.strip().lower()
    return SLOT_ORDER.index(slot) if slot in SLOT_ORDER else len(SLOT_ORDER)


def order_by_slot(stops: list[Any]) -> list[Any]:
    """Stable sort by time slot; unknown slots keep their order at the end."""
    return sorted(stops, key=lambda s: _slot_rank(s.time_slot))


def format_snippets(response: SearchResponse, limit: int = MAX_SNIPPET_CONTEXT) -> str:
    blocks = [
        f"Title: {r.title}\nURL: {r.url}\nSnippet: {r.content}"
        for r in response.results
    ]
    return "\n\n".join(blocks)[:limit]


class FoodGuide:
    """Runs the four recommendation tools against injected collaborators."""

    def __init__(
        self,
        settings: Settings,
        cache: TTLCache,
        search: SearchClient,
        llm: LLMClient,
        enricher: ImageEnricher,
        pages: PageExtractor,
    ):
        self._settings = settings
        self._cache = cache
        self._search = search
        self._llm = llm
        self._enricher = enricher
        self._pages = pages

    # ---- Tools ----

    async def search_restaurants(self, city: str) -> ToolResponse[RestaurantSpots]:
        """Locally representative restaurants for a city."""
        payload = await self._run(
            TOOL_RESTAURANTS,
            self._cache.restaurants_key(city),
            lambda: self._build_restaurants(city),
            f"Failed to search for restaurants in {city}",
        )
        names = ", ".join(r.name for r in payload.restaurants)
        summary = f"Found {len(payload.restaurants)} local food spots in {city}: {names}"
        return self._respond(TOOL_RESTAURANTS, payload, summary)

    async def get_menu_dishes(
        self,
        restaurant_name: str,
        city: str,
        url: str | None = None,
    ) -> ToolResponse[MenuHighlights]:
        """Signature dishes for one restaurant, with photos when available."""
        payload = await self._run(
            TOOL_MENU,
            self._cache.menu_key(city, restaurant_name),
            lambda: self._build_menu(restaurant_name, city, url),
            f"Failed to get menu for {restaurant_name}",
        )
        dishes = ", ".join(d.name for d in payload.dishes)
        return self._respond(TOOL_MENU, payload, f"{restaurant_name} serves: {dishes}")

    async def build_taste_itinerary(
        self,
        city: str,
        preferences: str | None = None,
    ) -> ToolResponse[TasteItinerary]:
        """A four-stop, time-aware food day with cultural context."""
        payload = await self._run(
            TOOL_ITINERARY,
            self._cache.itinerary_key(city, preferences),
            lambda: self._build_itinerary(city, preferences),
            f"Failed to build itinerary for {city}",
        )
        legs = " | ".join(
            f"{s.time_slot} → {s.restaurant_name} ({s.dish})" for s in payload.stops
        )
        return self._respond(TOOL_ITINERARY, payload, f"Taste itinerary for {city}: {legs}")

    async def explore_food_map(
        self,
        city: str,
        preferences: str | None = None,
        days: int = 1,
    ) -> ToolResponse[CityFoodMap]:
        """A multi-day food crawl, grouped by day and flattened for the map."""
        day_count = max(MIN_DAYS, min(MAX_DAYS, days))
        payload = await self._run(
            TOOL_FOOD_MAP,
            self._cache.food_map_key(city, preferences, day_count),
            lambda: self._build_food_map(city, preferences, day_count),
            f"Failed to build food map for {city}",
        )
        n_days = len(payload.days)
        pins = ", ".join(
            f"{i}. {s.name} ({s.signature_dish})" for i, s in enumerate(payload.stops, start=1)
        )
        summary = (
            f"Food map for {city} ({n_days} day{'s' if n_days > 1 else ''}) "
            f"with {len(payload.stops)} stops: {pins}"
        )
        return self._respond(TOOL_FOOD_MAP, payload, summary)

    async def close(self):
        await self._llm.close()
        await self._enricher.close()
        await self._pages.close()

    # ---- Shared steps ----

    def _require_credentials(self):
        if not self._search.configured:
            raise ConfigurationError.missing("TAVILY_API_KEY")
        if not self._llm.configured:
            raise ConfigurationError.missing("OPENAI_API_KEY")

    async def _run(
        self,
        tool: str,
        key: str,
        build: Callable[[], Awaitable[P]],
        failure: str,
    ) -> P:
        self._require_credentials()

        cached = self._cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit: {key}")
            return cached

        try:
            payload = await build()
        except CityBitesError:
            raise
        except Exception as e:
            logger.error(f"{tool} error: {e}")
            raise UpstreamError(tool, f"{failure}: {e}") from e

        self._cache.set(key, payload, self._settings.cache_ttl_seconds)
        return payload

    def _respond(self, tool: str, payload: P, summary: str) -> ToolResponse[P]:
        return ToolResponse[type(payload)](
            tool=tool,
            widget=WIDGETS[tool],
            summary=summary,
            props=payload,
        )

    async def _extract(self, system: str, user: str) -> Any:
        raw = await self._llm.complete(system=system, user=user, json_mode=True)
        try:
            return parse_json_object(raw)
        except ValueError as e:
            raise ValueError(f"LLM returned invalid JSON: {e}") from e

    # ---- Builders ----

    async def _build_restaurants(self, city: str) -> RestaurantSpots:
        response = await self._search.search(
            f"best local authentic restaurants to try in {city} food guide",
            search_depth="advanced",
            max_results=8,
        )
        parsed = await self._extract(
            prompts.RESTAURANTS_SYSTEM,
            prompts.RESTAURANTS_USER.format(city=city, snippets=format_snippets(response)),
        )
        restaurants = decode_records(parsed, "restaurants", Restaurant, allow_root_array=True)
        return RestaurantSpots(city=city, restaurants=restaurants)

    async def _build_menu(self, restaurant_name: str, city: str, url: str | None) -> MenuHighlights:
        page_text = await self._pages.fetch_text(url)
        if page_text:
            context = prompts.MENU_PAGE_CONTEXT.format(text=page_text)
        else:
            response = await self._search.search(
                f"{restaurant_name} {city} menu dishes food",
                search_depth="basic",
                max_results=4,
            )
            text = "\n".join(r.content for r in response.results)[:MAX_SNIPPET_CONTEXT]
            context = prompts.MENU_SEARCH_CONTEXT.format(text=text)

        parsed = await self._extract(
            prompts.MENU_SYSTEM,
            prompts.MENU_USER.format(restaurant_name=restaurant_name, city=city, context=context),
        )
        dishes = decode_records(parsed, "dishes", Dish)

        urls = await self._enricher.fetch_many([d.image_query for d in dishes])
        dishes = [d.model_copy(update={"image_url": u}) for d, u in zip(dishes, urls)]
        return MenuHighlights(restaurant_name=restaurant_name, city=city, dishes=dishes)

    async def _build_itinerary(self, city: str, preferences: str | None) -> TasteItinerary:
        food_search, culture_search = await asyncio.gather(
            self._search.search(
                f"{city} iconic local food dishes must try authentic",
                search_depth="advanced",
                max_results=5,
            ),
            self._search.search(
                f"{city} food culture history traditional cuisine",
                search_depth="basic",
                max_results=4,
            ),
        )
        context = "\n\n".join(
            r.content for r in food_search.results + culture_search.results
        )[:MAX_ITINERARY_CONTEXT]
        pref_note = f"\nUser preferences: {preferences}" if preferences else ""

        parsed = await self._extract(
            prompts.ITINERARY_SYSTEM,
            prompts.ITINERARY_USER.format(city=city, preferences=pref_note, context=context),
        )
        center = parsed if isinstance(parsed, dict) else {}
        stops = order_by_slot(decode_records(parsed, "stops", ItineraryStop))

        urls = await self._enricher.fetch_many([s.image_query for s in stops])
        stops = [s.model_copy(update={"dish_image_url": u}) for s, u in zip(stops, urls)]
        return TasteItinerary(
            city=city,
            preferences=preferences or "",
            stops=stops,
            center_lat=coerce_float(center.get("centerLat")),
            center_lng=coerce_float(center.get("centerLng")),
        )

    async def _build_food_map(self, city: str, preferences: str | None, day_count: int) -> CityFoodMap:
        focus = f" focusing on {preferences}" if preferences else ""
        response = await self._search.search(
            f"best local authentic restaurants food crawl in {city}{focus}",
            search_depth="advanced",
            max_results=10,
        )
        pref_note = f"\nPreferences: {preferences}" if preferences else ""
        parsed = await self._extract(
            prompts.FOOD_MAP_SYSTEM.format(days=day_count),
            prompts.FOOD_MAP_USER.format(
                city=city, preferences=pref_note, snippets=format_snippets(response),
            ),
        )
        root = parsed if isinstance(parsed, dict) else {}
        raw_days = root.get("days")
        if not isinstance(raw_days, list):
            raw_days = []

        grouped: list[tuple[int, str, list[MapStop]]] = []
        for position, raw_day in enumerate(raw_days, start=1):
            if not isinstance(raw_day, dict):
                continue
            number = coerce_int(raw_day.get("day"), position)
            label = str(raw_day.get("label") or f"Day {number}")
            stops = order_by_slot(decode_records(raw_day, "stops", MapStop))
            grouped.append((number, label, stops))
        grouped.sort(key=lambda g: g[0])

        # One fan-out across every day's stops
        queries = [s.image_query for _, _, stops in grouped for s in stops]
        urls = iter(await self._enricher.fetch_many(queries))

        days: list[DayItinerary] = []
        flat: list[MapStop] = []
        for number, label, stops in grouped:
            enriched = [s.model_copy(update={"dish_image_url": next(urls)}) for s in stops]
            days.append(DayItinerary(day=number, label=label, stops=enriched))
            flat.extend(enriched)

        return CityFoodMap(
            city=city,
            center_lat=coerce_float(root.get("centerLat")),
            center_lng=coerce_float(root.get("centerLng")),
            stops=flat,
            days=days,
        )
