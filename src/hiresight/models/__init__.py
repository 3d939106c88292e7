"""Data models shared by ingestion, providers and the controller."""

from hiresight.models.analysis import (
    AnalysisWithScore,
    CandidateAnalysisResult,
    MatchedItem,
    SectionMatch,
)
from hiresight.models.content import BinaryPayload, ContentInput
from hiresight.models.interview import (
    ConsistencySection,
    GapResolutionItem,
    InterviewPerformanceResult,
)
from hiresight.models.rewrite import ChatTurn, RewrittenResumeResult
from hiresight.models.settings import ApiKeys, LlmConfig, LlmProvider

__all__ = [
    "AnalysisWithScore",
    "ApiKeys",
    "BinaryPayload",
    "CandidateAnalysisResult",
    "ChatTurn",
    "ConsistencySection",
    "ContentInput",
    "GapResolutionItem",
    "InterviewPerformanceResult",
    "LlmConfig",
    "LlmProvider",
    "MatchedItem",
    "RewrittenResumeResult",
    "SectionMatch",
]
