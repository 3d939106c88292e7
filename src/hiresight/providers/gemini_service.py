"""Gemini adapter: the one provider backed by a real API."""

from __future__ import annotations

import logging

from hiresight.clients.gemini_client import GeminiClient
from hiresight.models.analysis import CandidateAnalysisResult
from hiresight.models.content import ContentInput
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.rewrite import ChatTurn, RewrittenResumeResult
from hiresight.providers import prompts
from hiresight.providers.base import LLMService, build_content_part, log_gap_coverage, parse_result
from hiresight.providers.schemas import (
    CANDIDATE_ANALYSIS_SCHEMA,
    INTERVIEW_PERFORMANCE_SCHEMA,
    REWRITTEN_RESUME_SCHEMA,
)

logger = logging.getLogger(__name__)


class GeminiService(LLMService):
    provider = "gemini"

    def __init__(self, llm: GeminiClient, model: str, temperature: float = 0.2):
        super().__init__(model)
        self.llm = llm
        self.temperature = temperature

    async def analyze_for_candidate(
        self,
        job: ContentInput,
        resume: ContentInput,
        language: str,
    ) -> CandidateAnalysisResult:
        logger.info("Candidate analysis: job=%s resume=%s", job.describe(), resume.describe())
        parts = [
            prompts.CANDIDATE_GUIDELINES,
            "Job Description:",
            build_content_part(job),
            "Candidate's Resume:",
            build_content_part(resume),
        ]
        data = await self.llm.generate_json(
            parts=parts,
            system=prompts.CANDIDATE_SYSTEM_PROMPT.format(language=prompts.language_name(language)),
            model=self.model,
            temperature=self.temperature,
            response_schema=CANDIDATE_ANALYSIS_SCHEMA,
        )
        return parse_result(CandidateAnalysisResult, data)

    async def analyze_interview_performance(
        self,
        job: ContentInput,
        resume: ContentInput,
        transcript: str,
        compatibility_gaps: list[str],
        language: str,
    ) -> InterviewPerformanceResult:
        logger.info(
            "Interview analysis: transcript=%d chars, %d gaps", len(transcript), len(compatibility_gaps)
        )
        parts = [
            prompts.INTERVIEW_GUIDELINES,
            "Job Description:",
            build_content_part(job),
            "Candidate's Resume:",
            build_content_part(resume),
            f"Interview Transcript:\n{transcript}",
            prompts.format_gaps(compatibility_gaps),
        ]
        data = await self.llm.generate_json(
            parts=parts,
            system=prompts.INTERVIEW_SYSTEM_PROMPT.format(language=prompts.language_name(language)),
            model=self.model,
            temperature=self.temperature,
            response_schema=INTERVIEW_PERFORMANCE_SCHEMA,
        )
        result = parse_result(InterviewPerformanceResult, data)
        log_gap_coverage(result, compatibility_gaps)
        return result

    async def rewrite_resume_for_job(
        self,
        job: ContentInput,
        resume: ContentInput,
        language: str,
        chat_history: list[ChatTurn] | None = None,
    ) -> RewrittenResumeResult:
        history = chat_history or []
        logger.info("Resume rewrite: %d chat turns", len(history))
        parts = [
            "Original Resume (Source of Truth):",
            build_content_part(resume),
            "Target Job Description:",
            build_content_part(job),
            prompts.REWRITE_TASK.format(history=prompts.format_chat_history(history)),
        ]
        data = await self.llm.generate_json(
            parts=parts,
            system=prompts.REWRITE_SYSTEM_PROMPT.format(language=prompts.language_name(language)),
            model=self.model,
            temperature=self.temperature,
            response_schema=REWRITTEN_RESUME_SCHEMA,
        )
        return parse_result(RewrittenResumeResult, data)
