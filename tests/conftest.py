"""Shared test fixtures."""

from __future__ import annotations

import copy
from unittest.mock import AsyncMock

import pytest

from hiresight.clients.gemini_client import GeminiClient, LLMResponse
from hiresight.models.content import ContentInput

ANALYSIS_PAYLOAD = {
    "jobTitle": "Senior Backend Engineer",
    "summary": "Strong Go background that lines up with the core of this role.",
    "keyResponsibilitiesMatch": {
        "items": [
            {
                "item": "Build and operate payment services",
                "status": "Match",
                "explanation": "Resume lists building payment systems.",
            }
        ],
        "score": 85,
    },
    "requiredSkillsMatch": {
        "items": [
            {
                "item": "5+ years Go experience",
                "status": "Match",
                "explanation": "Resume states 5 years of Go.",
            }
        ],
        "score": 90,
    },
    "niceToHaveSkillsMatch": {"items": [], "score": 50},
    "companyCultureFit": {"analysis": "Not enough information.", "score": 60},
    "salaryAndBenefits": "Not mentioned in the resume.",
    "areasForImprovement": ["Quantify payment volume."],
    "potentialInterviewQuestions": ["Describe a payment outage you handled."],
    "overallFitScore": 82,
    "fitExplanation": "Required Go experience is fully covered.",
    "compatibilityGaps": ["No Kubernetes experience", "No team lead experience"],
    "strengths": ["5 years of Go", "Payment systems"],
    "actionPlan": ["Add metrics to payment bullets."],
}

INTERVIEW_PAYLOAD = {
    "performanceScore": 74,
    "summary": "Clear answers on Go, vague on leadership.",
    "overallFeedback": "Good",
    "softSkillsAnalysis": {"items": "Communicates clearly.", "score": 80},
    "areasToImproveClarity": {"items": ["Leadership examples were vague."], "score": 30},
    "missingFromInterview": {"items": ["Payment fraud work"], "score": 40},
    "demonstratedStrengths": {"items": ["Incident handling"], "score": 85},
    "gapResolutions": {
        "items": [
            {
                "gap": "No Kubernetes experience",
                "resolution": "Ran services on Nomad, learning Kubernetes.",
                "isResolved": False,
            },
            {
                "gap": "No team lead experience",
                "resolution": "Mentored two engineers for a year.",
                "isResolved": True,
            },
        ],
        "score": 50,
    },
    "postInterviewFitScore": 80,
}

REWRITE_PAYLOAD = {
    "rewrittenResume": (
        "## Professional Summary\n"
        "Backend engineer with 5 years of Go building payment systems that move money reliably "
        "at scale for fintech customers.\n\n"
        "## Professional Experience\n"
        "**Backend Engineer**\n*PayCo | 2019 - Present*\n- Built payment systems in Go"
    ),
    "chatResponse": "Welcome! Here is your resume tailored to the Senior Backend Engineer role.",
}


@pytest.fixture
def analysis_payload() -> dict:
    return copy.deepcopy(ANALYSIS_PAYLOAD)


@pytest.fixture
def interview_payload() -> dict:
    return copy.deepcopy(INTERVIEW_PAYLOAD)


@pytest.fixture
def rewrite_payload() -> dict:
    return copy.deepcopy(REWRITE_PAYLOAD)


@pytest.fixture
def sample_job_text() -> str:
    return "Looking for a Senior Backend Engineer with 5+ years Go experience"


@pytest.fixture
def sample_resume_text() -> str:
    return "5 years Go, built payment systems"


@pytest.fixture
def job_input(sample_job_text) -> ContentInput:
    return ContentInput.from_text(sample_job_text)


@pytest.fixture
def resume_input(sample_resume_text) -> ContentInput:
    return ContentInput.from_text(sample_resume_text)


@pytest.fixture
def mock_gemini_client() -> GeminiClient:
    """Create a mock Gemini client."""
    client = AsyncMock(spec=GeminiClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client
