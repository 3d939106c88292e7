"""User-selected LLM configuration and display preferences."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]


class LlmProvider(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GROQ = "groq"


DEFAULT_PROVIDER = LlmProvider.GEMINI
DEFAULT_MODEL = "gemini-2.5-flash"

# (model id, display name); the first entry is the provider default
AVAILABLE_MODELS: dict[LlmProvider, list[tuple[str, str]]] = {
    LlmProvider.GEMINI: [
        ("gemini-2.5-flash", "Gemini 2.5 Flash"),
    ],
    LlmProvider.OPENAI: [
        ("gpt-4o", "GPT-4o"),
        ("gpt-4-turbo", "GPT-4 Turbo"),
        ("gpt-3.5-turbo", "GPT-3.5 Turbo"),
    ],
    LlmProvider.ANTHROPIC: [
        ("claude-3-opus-20240229", "Claude 3 Opus"),
        ("claude-3-sonnet-20240229", "Claude 3 Sonnet"),
        ("claude-3-haiku-20240307", "Claude 3 Haiku"),
    ],
    LlmProvider.GROQ: [
        ("llama3-8b-8192", "LLaMA3 8b"),
        ("llama3-70b-8192", "LLaMA3 70b"),
        ("mixtral-8x7b-32768", "Mixtral 8x7B"),
    ],
}


class ApiKeys(BaseModel):
    """Per-user keys for providers that are not environment scoped."""

    model_config = ConfigDict(frozen=True)

    openai: str | None = None
    anthropic: str | None = None
    groq: str | None = None

    @field_validator("openai", "anthropic", "groq", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class LlmConfig(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    provider: LlmProvider = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    api_keys: ApiKeys = Field(default_factory=ApiKeys, repr=False)

    @field_validator("provider", mode="before")
    @classmethod
    def _unknown_provider_falls_back(cls, value: object) -> object:
        if isinstance(value, LlmProvider):
            return value
        try:
            return LlmProvider(str(value).strip().lower())
        except ValueError:
            logger.warning("Unknown provider %r, falling back to %s", value, DEFAULT_PROVIDER.value)
            return DEFAULT_PROVIDER

    def key_for(self, provider: LlmProvider) -> str | None:
        return getattr(self.api_keys, provider.value, None)

    def with_provider(self, provider: LlmProvider) -> LlmConfig:
        """Switch provider and select that provider's default model."""
        return self.model_copy(update={"provider": provider, "model": default_model_for(provider)})

    def with_api_key(self, provider: LlmProvider, key: str | None) -> LlmConfig:
        if provider is LlmProvider.GEMINI:
            raise ValueError("The Gemini key is read from the environment, not stored in settings")
        keys = self.api_keys.model_dump()
        keys[provider.value] = key
        return self.model_copy(update={"api_keys": ApiKeys(**keys)})


def default_model_for(provider: LlmProvider) -> str:
    return AVAILABLE_MODELS[provider][0][0]
