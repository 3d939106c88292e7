"""Build the adapter for the user's selected provider."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping

from hiresight.clients.gemini_client import GeminiClient
from hiresight.config import LLMSettings
from hiresight.errors import MissingCredential
from hiresight.models.settings import DEFAULT_PROVIDER, LlmConfig, LlmProvider
from hiresight.providers.base import LLMService
from hiresight.providers.gemini_service import GeminiService
from hiresight.providers.placeholder import AnthropicService, GroqService, OpenAIService

logger = logging.getLogger(__name__)

GEMINI_KEY_ENV = "GEMINI_API_KEY"

Builder = Callable[[LlmConfig, LLMSettings, Mapping[str, str]], LLMService]


def _build_gemini(config: LlmConfig, settings: LLMSettings, env: Mapping[str, str]) -> LLMService:
    api_key = (env.get(GEMINI_KEY_ENV) or "").strip()
    if not api_key:
        raise MissingCredential(LlmProvider.GEMINI.value)
    client = GeminiClient(
        api_key=api_key,
        timeout=settings.timeout,
        max_attempts=settings.max_retries,
    )
    return GeminiService(client, model=config.model, temperature=settings.temperature)


def _placeholder_builder(provider: LlmProvider, cls: type) -> Builder:
    def build(config: LlmConfig, settings: LLMSettings, env: Mapping[str, str]) -> LLMService:
        api_key = config.key_for(provider)
        if not api_key:
            raise MissingCredential(provider.value)
        return cls(model=config.model, api_key=api_key)

    return build


BUILDERS: dict[LlmProvider, Builder] = {
    LlmProvider.GEMINI: _build_gemini,
    LlmProvider.OPENAI: _placeholder_builder(LlmProvider.OPENAI, OpenAIService),
    LlmProvider.ANTHROPIC: _placeholder_builder(LlmProvider.ANTHROPIC, AnthropicService),
    LlmProvider.GROQ: _placeholder_builder(LlmProvider.GROQ, GroqService),
}

_missing = set(LlmProvider) - set(BUILDERS)
if _missing:
    raise RuntimeError(f"No adapter registered for providers: {sorted(p.value for p in _missing)}")


def get_llm_service(
    config: LlmConfig,
    settings: LLMSettings | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> LLMService:
    """Construct the adapter for ``config.provider``.

    Credentials are checked here, so a missing key fails before any
    network call is attempted.
    """
    settings = settings or LLMSettings()
    env = os.environ if env is None else env
    builder = BUILDERS.get(config.provider, BUILDERS[DEFAULT_PROVIDER])
    service = builder(config, settings, env)
    logger.debug("Built %r for provider %s", service, config.provider.value)
    return service
