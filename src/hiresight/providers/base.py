"""Capability contract shared by every LLM provider adapter."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from hiresight.clients.gemini_client import PromptPart
from hiresight.errors import ResponseParseFailure
from hiresight.models.analysis import CandidateAnalysisResult
from hiresight.models.content import ContentInput
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.rewrite import ChatTurn, RewrittenResumeResult

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


def build_content_part(content: ContentInput) -> PromptPart:
    """Text inputs become text segments; file inputs stay opaque binary payloads."""
    return content.content


def parse_result(model: type[ResultT], data: dict) -> ResultT:
    """Validate provider JSON against a result model.

    Missing required fields, wrong enum values and out-of-range scores all
    surface as :class:`ResponseParseFailure`.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.error("Provider response does not match %s: %s", model.__name__, exc)
        raise ResponseParseFailure(f"{model.__name__}: {exc}") from exc


def log_gap_coverage(result: InterviewPerformanceResult, gaps: list[str]) -> None:
    """Warn when gap resolutions do not line up one-to-one with the supplied gaps."""
    returned = len(result.gap_resolutions.items)
    if returned != len(gaps):
        logger.warning(
            "Expected %d gap resolutions, provider returned %d", len(gaps), returned
        )
    missing = result.unaddressed_gaps(gaps)
    if missing:
        logger.warning("Gaps without a resolution item: %s", missing)


class LLMService(ABC):
    """One implementation per provider; all return the same typed results."""

    provider: str = ""

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    async def analyze_for_candidate(
        self,
        job: ContentInput,
        resume: ContentInput,
        language: str,
    ) -> CandidateAnalysisResult:
        """Score the resume against the job description."""

    @abstractmethod
    async def analyze_interview_performance(
        self,
        job: ContentInput,
        resume: ContentInput,
        transcript: str,
        compatibility_gaps: list[str],
        language: str,
    ) -> InterviewPerformanceResult:
        """Review an interview transcript against the previously found gaps."""

    @abstractmethod
    async def rewrite_resume_for_job(
        self,
        job: ContentInput,
        resume: ContentInput,
        language: str,
        chat_history: list[ChatTurn] | None = None,
    ) -> RewrittenResumeResult:
        """Rewrite the resume for the job, honoring the latest chat instruction."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"
