"""Pydantic models for the candidate fit analysis."""

from __future__ import annotations

from typing import Literal

from hiresight.models.common import Score, WireModel

MatchStatus = Literal["Match", "Partial", "No Match"]


class MatchedItem(WireModel):
    item: str
    status: MatchStatus
    explanation: str


class SectionMatch(WireModel):
    items: list[MatchedItem]
    score: Score


class AnalysisWithScore(WireModel):
    analysis: str
    score: Score


class CandidateAnalysisResult(WireModel):
    job_title: str
    summary: str
    key_responsibilities_match: SectionMatch
    required_skills_match: SectionMatch
    nice_to_have_skills_match: SectionMatch
    company_culture_fit: AnalysisWithScore
    salary_and_benefits: str
    areas_for_improvement: list[str]
    potential_interview_questions: list[str]
    overall_fit_score: Score
    fit_explanation: str
    compatibility_gaps: list[str]
    strengths: list[str]
    action_plan: list[str]

    def sections(self) -> dict[str, SectionMatch]:
        """The three itemised match sections keyed by their wire name."""
        return {
            "keyResponsibilitiesMatch": self.key_responsibilities_match,
            "requiredSkillsMatch": self.required_skills_match,
            "niceToHaveSkillsMatch": self.nice_to_have_skills_match,
        }
