"""Unified LLM client: tries OpenAI first, falls back to Anthropic."""

import logging

import anthropic
from openai import AsyncOpenAI

from citybites.config import Settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Unified async LLM client with OpenAI primary + Anthropic fallback."""

    def __init__(self, settings: Settings):
        self._openai = None
        self._anthropic = None
        self._openai_model = settings.openai_model
        self._anthropic_model = settings.anthropic_model

        if settings.openai_api_key:
            self._openai = AsyncOpenAI(api_key=settings.openai_api_key)
        if settings.anthropic_api_key:
            self._anthropic = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)

    @property
    def configured(self) -> bool:
        return self._openai is not None or self._anthropic is not None

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int = 2000,
        temperature: float = 0.4,
        json_mode: bool = False,
    ) -> str:
        """Get a completion from the best available LLM.

        Args:
            system: System prompt
            user: User message
            max_tokens: Max output tokens
            temperature: Sampling temperature
            json_mode: If True, force JSON output (OpenAI response_format)

        Returns:
            Raw text response from the LLM.

        Raises:
            RuntimeError if no provider is configured or all of them fail.
        """
        errors = []
        chat_messages = [{"role": "user", "content": user}]

        if self._openai:
            try:
                kwargs: dict = {
                    "model": self._openai_model,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "messages": [{"role": "system", "content": system}] + chat_messages,
                }
                if json_mode:
                    kwargs["response_format"] = {"type": "json_object"}
                response = await self._openai.chat.completions.create(**kwargs)
                return (response.choices[0].message.content or "").strip()
            except Exception as e:
                errors.append(f"OpenAI: {e}")
                logger.warning(f"OpenAI failed, trying Anthropic: {e}")

        if self._anthropic:
            try:
                response = await self._anthropic.messages.create(
                    model=self._anthropic_model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=system,
                    messages=chat_messages,
                )
                return response.content[0].text.strip()
            except Exception as e:
                errors.append(f"Anthropic: {e}")
                logger.warning(f"Anthropic also failed: {e}")

        if not errors:
            errors.append("no provider configured")
        raise RuntimeError(f"All LLM providers failed: {'; '.join(errors)}")

    async def close(self):
        if self._openai:
            await self._openai.close()
        if self._anthropic:
            await self._anthropic.close()
