"""Food router: the four CityBites tools over HTTP."""

from fastapi import APIRouter, Depends

from citybites.dependencies import get_food_guide
from citybites.schemas.food import (
    CityFoodMap,
    CityFoodRequest,
    FoodMapRequest,
    ItineraryRequest,
    MenuHighlights,
    MenuRequest,
    RestaurantSpots,
    TasteItinerary,
    ToolResponse,
)
from citybites.services.food_guide import FoodGuide


router = APIRouter()


@router.post("/restaurants", response_model=ToolResponse[RestaurantSpots])
async def search_city_food(
    req: CityFoodRequest,
    guide: FoodGuide = Depends(get_food_guide),
):
    """Locally representative restaurants in a city, for the card grid."""
    return await guide.search_restaurants(req.city)


@router.post("/menu", response_model=ToolResponse[MenuHighlights])
async def get_menu_dishes(
    req: MenuRequest,
    guide: FoodGuide = Depends(get_food_guide),
):
    """Signature dishes for a restaurant found by the restaurant search."""
    return await guide.get_menu_dishes(req.restaurant_name, req.city, req.url)


@router.post("/itinerary", response_model=ToolResponse[TasteItinerary])
async def build_taste_itinerary(
    req: ItineraryRequest,
    guide: FoodGuide = Depends(get_food_guide),
):
    """A one-day taste itinerary with a route map."""
    return await guide.build_taste_itinerary(req.city, req.preferences)


@router.post("/map", response_model=ToolResponse[CityFoodMap])
async def explore_city_food_map(
    req: FoodMapRequest,
    guide: FoodGuide = Depends(get_food_guide),
):
    """A food crawl map organized by day (1-3 days)."""
    return await guide.explore_food_map(req.city, req.preferences, req.days)
