"""Tests for provider adapter selection and credential checks."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from hiresight.config import LLMSettings
from hiresight.errors import MissingCredential
from hiresight.models.settings import LlmConfig, LlmProvider
from hiresight.providers import get_llm_service
from hiresight.providers.factory import BUILDERS, GEMINI_KEY_ENV
from hiresight.providers.gemini_service import GeminiService
from hiresight.providers.placeholder import AnthropicService, GroqService, OpenAIService


class TestGetLlmService:
    def test_every_provider_registered(self):
        assert set(BUILDERS) == set(LlmProvider)

    def test_gemini_uses_environment_key(self):
        with patch("hiresight.clients.gemini_client.genai.Client") as mock_cls:
            service = get_llm_service(LlmConfig(), env={GEMINI_KEY_ENV: "env-key"})

        assert isinstance(service, GeminiService)
        assert service.model == "gemini-2.5-flash"
        assert mock_cls.call_args.kwargs["api_key"] == "env-key"

    def test_gemini_settings_applied(self):
        settings = LLMSettings(temperature=0.5, timeout=20, max_retries=3)
        with patch("hiresight.clients.gemini_client.genai.Client"):
            service = get_llm_service(LlmConfig(), settings, env={GEMINI_KEY_ENV: "k"})

        assert service.temperature == 0.5
        assert service.llm.max_attempts == 3

    def test_gemini_without_key(self):
        with patch("hiresight.clients.gemini_client.genai.Client") as mock_cls:
            with pytest.raises(MissingCredential) as exc_info:
                get_llm_service(LlmConfig(), env={GEMINI_KEY_ENV: "  "})

        assert exc_info.value.key == "error.geminiKeyMissing"
        mock_cls.assert_not_called()

    @pytest.mark.parametrize(
        "provider, cls",
        [
            (LlmProvider.OPENAI, OpenAIService),
            (LlmProvider.ANTHROPIC, AnthropicService),
            (LlmProvider.GROQ, GroqService),
        ],
    )
    def test_placeholder_with_key(self, provider, cls):
        config = LlmConfig().with_provider(provider).with_api_key(provider, "user-key")
        service = get_llm_service(config, env={})
        assert isinstance(service, cls)
        assert service.model == config.model

    def test_openai_without_key_fails_before_any_call(self):
        config = LlmConfig().with_provider(LlmProvider.OPENAI)
        with pytest.raises(MissingCredential) as exc_info:
            get_llm_service(config, env={})

        assert exc_info.value.provider == "openai"
        assert exc_info.value.localized("en") == "Please add your OpenAI API key in Settings."

    def test_other_provider_key_not_used(self):
        config = LlmConfig().with_provider(LlmProvider.GROQ).with_api_key(LlmProvider.OPENAI, "sk")
        with pytest.raises(MissingCredential):
            get_llm_service(config, env={})
