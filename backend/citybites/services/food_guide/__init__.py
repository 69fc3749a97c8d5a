"""Food guide: search + LLM extraction pipelines behind each tool.

Modules:
    prompts     System/user prompt templates per tool
    extraction  JSON parsing and defensive record decoding
    pipeline    FoodGuide: cache check → context → extraction → enrichment → cache write

Pipeline:
    TTLCache.get → SearchClient / PageExtractor → LLMClient.complete
    → decode_records → ImageEnricher.fetch_many → TTLCache.set
"""

from citybites.services.food_guide.pipeline import FoodGuide

__all__ = ["FoodGuide"]
