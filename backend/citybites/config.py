from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Tavily: web search
    tavily_api_key: str = ""

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Anthropic (fallback LLM provider)
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-5-20250929"

    # Unsplash: optional dish photos
    unsplash_access_key: str = ""
    unsplash_base_url: str = "https://api.unsplash.com"

    # Cache
    cache_ttl_seconds: int = 600  # 10 minutes

    # Outbound HTTP
    http_timeout: float = 15.0
    page_fetch_timeout: float = 8.0
    page_text_limit: int = 4000
    user_agent: str = "Mozilla/5.0 (compatible; CityBitesBot/1.0)"

    # CORS
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def llm_configured(self) -> bool:
        return bool(self.openai_api_key or self.anthropic_api_key)

    @property
    def images_enabled(self) -> bool:
        return bool(self.unsplash_access_key)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
