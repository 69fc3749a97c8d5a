"""CityBites: food-first city recommendations backed by web search and an LLM."""
