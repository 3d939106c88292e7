"""Structured-output contracts handed to the provider with every request.

Each schema doubles as prompt guidance (field descriptions) and must list
the same required fields as the pydantic result model it is parsed into.
Shapes follow the Gemini ``Schema`` dict format (upper-case type names).
"""

from __future__ import annotations

import copy

STRING = {"type": "STRING"}
STRING_LIST = {"type": "ARRAY", "items": STRING}


def _number(description: str) -> dict:
    return {"type": "NUMBER", "description": description}


def _text(description: str) -> dict:
    return {"type": "STRING", "description": description}


def _text_list(description: str) -> dict:
    return {"type": "ARRAY", "items": STRING, "description": description}


def _object(properties: dict, description: str | None = None) -> dict:
    schema = {"type": "OBJECT", "properties": properties, "required": list(properties)}
    if description:
        schema["description"] = description
    return schema


def _with_items(section: dict, items: dict, description: str | None = None) -> dict:
    """Copy a reusable section schema, overriding its ``items`` field."""
    schema = copy.deepcopy(section)
    schema["properties"]["items"] = items
    if description:
        schema["description"] = description
    return schema


# ---------------------------------------------------------------------------
# Shared sub-shapes
# ---------------------------------------------------------------------------

MATCHED_ITEM_SCHEMA = _object({
    "item": _text("The specific responsibility or skill from the job description."),
    "status": {
        "type": "STRING",
        "enum": ["Match", "Partial", "No Match"],
        "description": (
            "The match status. 'Match' requires direct evidence. 'Partial' indicates "
            "related but not direct experience. 'No Match' means the skill is absent."
        ),
    },
    "explanation": _text(
        "A brief, factual explanation of why this status was given, "
        "referencing specific parts of the resume."
    ),
})

SECTION_MATCH_SCHEMA = _object({
    "items": {"type": "ARRAY", "items": MATCHED_ITEM_SCHEMA},
    "score": _number(
        "A score from 0 to 100 representing the match for this section, "
        "heavily weighted by 'Match' statuses on required items."
    ),
})

ANALYSIS_WITH_SCORE_SCHEMA = _object({
    "analysis": _text("The detailed analysis text."),
    "score": _number("A score from 0 to 100 for this analysis."),
})

CONSISTENCY_STRING_SCHEMA = _object({
    "items": STRING,
    "score": _number("Score from 0 to 100 based on the analysis."),
})

CONSISTENCY_STRING_LIST_SCHEMA = _object({
    "items": STRING_LIST,
    "score": _number("Score from 0 to 100. For areas to improve, a lower score is better."),
})

GAP_RESOLUTION_ITEM_SCHEMA = _object({
    "gap": _text("The specific compatibility gap identified before the interview."),
    "resolution": _text(
        "The candidate's response or clarification from the interview transcript that "
        "addresses this gap. If the gap was not addressed, explain why."
    ),
    "isResolved": {
        "type": "BOOLEAN",
        "description": (
            "Set to true only if the candidate's response fully and satisfactorily resolves "
            "the gap. Set to false if the response is insufficient, evasive, or if the gap "
            "was not addressed at all."
        ),
    },
})

GAP_RESOLUTION_SECTION_SCHEMA = _object({
    "items": {"type": "ARRAY", "items": GAP_RESOLUTION_ITEM_SCHEMA},
    "score": _number("A score from 0-100 representing the percentage of gaps successfully resolved."),
})


# ---------------------------------------------------------------------------
# Per-capability result schemas
# ---------------------------------------------------------------------------

CANDIDATE_ANALYSIS_SCHEMA = _object({
    "jobTitle": _text("The job title from the job description."),
    "summary": _text(
        "A concise summary of the candidate's fit for the role, framed as advice to the candidate."
    ),
    "keyResponsibilitiesMatch": SECTION_MATCH_SCHEMA,
    "requiredSkillsMatch": SECTION_MATCH_SCHEMA,
    "niceToHaveSkillsMatch": SECTION_MATCH_SCHEMA,
    "companyCultureFit": ANALYSIS_WITH_SCORE_SCHEMA,
    "salaryAndBenefits": _text(
        "Analysis of salary expectations and benefits, only if explicitly mentioned in the resume."
    ),
    "areasForImprovement": _text_list(
        "A list of potential areas for improvement or concerns for the candidate to address."
    ),
    "potentialInterviewQuestions": _text_list(
        "A list of potential interview questions the candidate might be asked, "
        "based on their resume and the job description."
    ),
    "overallFitScore": _number(
        "An overall fit score from 0 to 100, weighting required skills and key "
        "responsibilities most heavily."
    ),
    "fitExplanation": _text(
        "A detailed explanation for the overall fit score, justifying the number with "
        "concrete evidence from the analysis."
    ),
    "compatibilityGaps": _text_list(
        "A list of specific, crucial gaps between the resume and the job description's "
        "core requirements."
    ),
    "strengths": _text_list(
        "A list of the candidate's strongest qualifications and experiences that directly "
        "match the job requirements."
    ),
    "actionPlan": _text_list(
        "A list of concrete, actionable steps the candidate can take to improve their "
        "resume and application for this role."
    ),
})

INTERVIEW_PERFORMANCE_SCHEMA = _object({
    "performanceScore": _number(
        "A percentage (0-100) measuring how effectively the candidate performed in the interview."
    ),
    "summary": _text("A concise narrative summary of the candidate's interview performance."),
    "overallFeedback": {
        "type": "STRING",
        "enum": ["Excellent", "Good", "Needs Improvement"],
        "description": "A final, clear performance feedback for the candidate.",
    },
    "softSkillsAnalysis": _with_items(
        CONSISTENCY_STRING_SCHEMA,
        _text(
            "Based on language and responses, an analysis of soft skills demonstrated "
            "(communication, problem-solving, etc.)."
        ),
    ),
    "areasToImproveClarity": _with_items(
        CONSISTENCY_STRING_LIST_SCHEMA,
        _text_list(
            "List of answers that were vague, inconsistent, or could be strengthened. Empty if none."
        ),
    ),
    "missingFromInterview": _with_items(
        CONSISTENCY_STRING_LIST_SCHEMA,
        _text_list(
            "List of important points from the resume that were missed opportunities to discuss."
        ),
    ),
    "demonstratedStrengths": _with_items(
        CONSISTENCY_STRING_LIST_SCHEMA,
        _text_list(
            "List of new, positive skills or experiences revealed in the interview that "
            "were not on the resume."
        ),
    ),
    "gapResolutions": _with_items(
        GAP_RESOLUTION_SECTION_SCHEMA,
        {"type": "ARRAY", "items": GAP_RESOLUTION_ITEM_SCHEMA},
        description=(
            "An analysis of how well the candidate addressed pre-identified compatibility "
            "gaps during the interview. Include exactly one item per pre-identified gap."
        ),
    ),
    "postInterviewFitScore": _number(
        "The initial overall fit score, recalculated (0-100) to include interview performance."
    ),
})

REWRITTEN_RESUME_SCHEMA = _object({
    "rewrittenResume": _text("The full text of the rewritten resume in Markdown format."),
    "chatResponse": _text(
        "A short, friendly reply to the user describing the changes made in this revision."
    ),
})
