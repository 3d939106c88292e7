"""LLM provider adapters."""
from hiresight.providers.base import LLMService
from hiresight.providers.factory import get_llm_service

__all__ = ["LLMService", "get_llm_service"]
