"""Gemini API wrapper with async structured output and token accounting."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from hiresight.errors import ProviderRequestFailure
from hiresight.models.content import BinaryPayload
from hiresight.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

PromptPart = str | BinaryPayload

# 4xx ClientErrors (bad key, rejected schema) fail on the first attempt
_RETRYABLE_ERRORS = (genai_errors.ServerError, httpx.TransportError)
_REQUEST_ERRORS = (genai_errors.APIError, httpx.HTTPError)


@dataclass
class LLMResponse:
    """Response from the model including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


def to_gemini_parts(parts: list[PromptPart]) -> list[types.Part]:
    """Text segments become text parts; binary payloads become inline data."""
    converted = []
    for part in parts:
        if isinstance(part, BinaryPayload):
            converted.append(types.Part.from_bytes(data=part.to_bytes(), mime_type=part.mime_type))
        else:
            converted.append(types.Part.from_text(text=part))
    return converted


class GeminiClient:
    """Async Gemini client.

    ``max_attempts`` counts the first call, so the default of 1 never retries.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float | None = None,
        max_attempts: int = 1,
    ):
        http_options = None
        if timeout is not None:
            http_options = types.HttpOptions(timeout=int(timeout * 1000))
        self.client = genai.Client(api_key=api_key, http_options=http_options)
        self.max_attempts = max_attempts
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(
        self,
        contents: list[types.Part],
        config: types.GenerateContentConfig,
        model: str,
    ) -> types.GenerateContentResponse:
        """Make the actual API call, retrying server and transport errors up to max_attempts."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(min=1, max=10),
            retry=retry_if_exception_type(_RETRYABLE_ERRORS),
            reraise=True,
        ):
            with attempt:
                return await self.client.aio.models.generate_content(
                    model=model,
                    contents=contents,
                    config=config,
                )
        raise AssertionError("unreachable")

    async def generate(
        self,
        parts: list[PromptPart],
        system: str = "",
        model: str = "gemini-2.5-flash",
        temperature: float = 0.2,
        response_schema: dict | None = None,
    ) -> LLMResponse:
        """Send prompt parts to Gemini and return the text response with usage."""
        config_kwargs: dict = {"temperature": temperature}
        if system:
            config_kwargs["system_instruction"] = system
        if response_schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = response_schema

        logger.debug("LLM call: model=%s parts=%d", model, len(parts))
        try:
            response = await self._call_api(
                contents=to_gemini_parts(parts),
                config=types.GenerateContentConfig(**config_kwargs),
                model=model,
            )
        except _REQUEST_ERRORS as exc:
            logger.error("LLM call failed", exc_info=True)
            raise ProviderRequestFailure(str(exc)) from exc

        usage = response.usage_metadata
        input_tokens = (usage.prompt_token_count or 0) if usage else 0
        output_tokens = (usage.candidates_token_count or 0) if usage else 0
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        return LLMResponse(
            text=response.text or "",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    async def generate_json(
        self,
        parts: list[PromptPart],
        system: str = "",
        model: str = "gemini-2.5-flash",
        temperature: float = 0.2,
        response_schema: dict | None = None,
    ) -> dict:
        """Send prompt parts and parse the JSON object from the response."""
        response = await self.generate(
            parts=parts,
            system=system,
            model=model,
            temperature=temperature,
            response_schema=response_schema,
        )
        return extract_json(response.text)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
