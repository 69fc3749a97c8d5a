"""Food recommendation records and API request/response models.

Records are frozen and serialize with camelCase keys (the shape the widgets
consume). Every declared field always carries a value: missing or null
strings become "", missing or unparsable coordinates become 0.0.
"""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class FoodRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _fill_defaults(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        if value is None:
            return field.get_default(call_default_factory=True)
        if isinstance(value, bool):
            return field.get_default() if field.annotation in (str, float) else value
        if field.annotation is str and isinstance(value, (int, float)):
            return str(value)
        if field.annotation is float and isinstance(value, (str, int, float)):
            try:
                number = float(value)
            except (ValueError, OverflowError):
                return field.get_default()
            return number if math.isfinite(number) else field.get_default()
        return value


class Restaurant(FoodRecord):
    name: str = ""
    neighborhood: str = ""
    cuisine_type: str = ""
    vibe_tagline: str = ""
    why_local: str = ""
    url: str = ""


class Dish(FoodRecord):
    name: str = ""
    description: str = ""
    meal_type: str = ""
    image_query: str = ""
    image_url: str = ""


class ItineraryStop(FoodRecord):
    time_slot: str = ""
    time_range: str = ""
    restaurant_name: str = ""
    neighborhood: str = ""
    dish: str = ""
    dish_description: str = ""
    cultural_context: str = ""
    walking_note: str = ""
    lat: float = 0.0
    lng: float = 0.0
    dish_image_url: str = ""
    image_query: str = Field(default="", exclude=True)


class MapStop(FoodRecord):
    name: str = ""
    neighborhood: str = ""
    cuisine_type: str = ""
    lat: float = 0.0
    lng: float = 0.0
    signature_dish: str = ""
    dish_description: str = ""
    dish_image_url: str = ""
    why_local: str = ""
    time_slot: str = ""
    time_range: str = ""
    image_query: str = Field(default="", exclude=True)


class DayItinerary(FoodRecord):
    day: int = 0
    label: str = ""
    stops: list[MapStop] = Field(default_factory=list)


# Payloads (cached and returned as widget props)


class RestaurantSpots(FoodRecord):
    city: str
    restaurants: list[Restaurant] = Field(default_factory=list)


class MenuHighlights(FoodRecord):
    restaurant_name: str
    city: str
    dishes: list[Dish] = Field(default_factory=list)


class TasteItinerary(FoodRecord):
    city: str
    preferences: str = ""
    stops: list[ItineraryStop] = Field(default_factory=list)
    center_lat: float = 0.0
    center_lng: float = 0.0


class CityFoodMap(FoodRecord):
    city: str
    center_lat: float = 0.0
    center_lng: float = 0.0
    stops: list[MapStop] = Field(default_factory=list)
    days: list[DayItinerary] = Field(default_factory=list)


# API


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CityFoodRequest(ApiModel):
    city: str = Field(min_length=1, description="The city to search for food in (e.g. 'Tokyo', 'Lisbon')")


class MenuRequest(ApiModel):
    restaurant_name: str = Field(min_length=1, description="The name of the restaurant")
    city: str = Field(min_length=1, description="The city the restaurant is in")
    url: str | None = Field(default=None, description="The restaurant's website URL if available")


class ItineraryRequest(ApiModel):
    city: str = Field(min_length=1)
    preferences: str | None = Field(
        default=None,
        description="Dietary preferences or interests, e.g. 'vegetarian', 'street food only'",
    )


class FoodMapRequest(ApiModel):
    city: str = Field(min_length=1)
    preferences: str | None = None
    days: int = Field(default=1, ge=1, le=3, description="Number of days to plan (1-3)")


P = TypeVar("P", bound=FoodRecord)


class ToolResponse(ApiModel, Generic[P]):
    """Structured payload plus the one-line text summary for the caller."""
    tool: str
    widget: str
    summary: str
    props: P
