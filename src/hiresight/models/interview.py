"""Pydantic models for the interview performance review."""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from hiresight.models.common import Score, WireModel

T = TypeVar("T")

OverallFeedback = Literal["Excellent", "Good", "Needs Improvement"]


class ConsistencySection(WireModel, Generic[T]):
    items: T
    score: Score


class GapResolutionItem(WireModel):
    gap: str
    resolution: str
    is_resolved: bool


class InterviewPerformanceResult(WireModel):
    performance_score: Score
    summary: str
    overall_feedback: OverallFeedback
    soft_skills_analysis: ConsistencySection[str]
    areas_to_improve_clarity: ConsistencySection[list[str]]
    missing_from_interview: ConsistencySection[list[str]]
    demonstrated_strengths: ConsistencySection[list[str]]
    gap_resolutions: ConsistencySection[list[GapResolutionItem]]
    post_interview_fit_score: Score

    def unaddressed_gaps(self, gaps: list[str]) -> list[str]:
        """Gaps from the first analysis with no matching resolution item."""
        covered = {item.gap.strip().lower() for item in self.gap_resolutions.items}
        return [g for g in gaps if g.strip().lower() not in covered]

    @property
    def resolved_count(self) -> int:
        return sum(1 for item in self.gap_resolutions.items if item.is_resolved)
