"""Tests for result models, score normalization and settings."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from hiresight.errors import ResponseParseFailure
from hiresight.models.analysis import CandidateAnalysisResult, SectionMatch
from hiresight.models.common import normalize_score
from hiresight.models.content import BinaryPayload, ContentInput
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.rewrite import RewrittenResumeResult
from hiresight.models.settings import (
    AVAILABLE_MODELS,
    ApiKeys,
    LlmConfig,
    LlmProvider,
    default_model_for,
)
from hiresight.providers.base import parse_result
from hiresight.providers.schemas import (
    CANDIDATE_ANALYSIS_SCHEMA,
    INTERVIEW_PERFORMANCE_SCHEMA,
    REWRITTEN_RESUME_SCHEMA,
)
from hiresight.utils.json_parser import extract_json


class TestNormalizeScore:
    def test_integer_passthrough(self):
        assert normalize_score(85) == 85

    def test_float_rounded(self):
        assert normalize_score(72.6) == 73

    def test_fraction_rescaled(self):
        assert normalize_score(0.85) == 85

    def test_bounds_accepted(self):
        assert normalize_score(0) == 0
        assert normalize_score(100) == 100

    @pytest.mark.parametrize("value", [1, 1.0])
    def test_one_is_full_fraction(self, value):
        assert normalize_score(value) == 100

    @pytest.mark.parametrize("value", [-1, 101, 250.0, 100.4, -0.2])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValueError, match="0-100"):
            normalize_score(value)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError, match="finite"):
            normalize_score(value)

    @pytest.mark.parametrize("literal", ["Infinity", "NaN"])
    def test_non_finite_json_score_is_parse_failure(self, literal):
        data = extract_json(f'{{"items": [], "score": {literal}}}')
        with pytest.raises(ResponseParseFailure):
            parse_result(SectionMatch, data)

    @pytest.mark.parametrize("value", ["85", None, True])
    def test_non_numbers_rejected(self, value):
        with pytest.raises(ValueError, match="must be a number"):
            normalize_score(value)

    def test_section_score_normalized_on_validation(self):
        section = SectionMatch.model_validate({"items": [], "score": 0.5})
        assert section.score == 50


class TestContentInput:
    def test_text(self):
        content = ContentInput.from_text("hello")
        assert content.format == "text"
        assert not content.is_file
        assert content.describe() == "text(5 chars)"

    def test_file(self):
        content = ContentInput.from_file(b"%PDF-1.4", "application/pdf")
        assert content.is_file
        assert content.content.to_bytes() == b"%PDF-1.4"
        assert content.describe().startswith("file(application/pdf")

    def test_file_format_requires_payload(self):
        with pytest.raises(ValidationError):
            ContentInput(content="not binary", format="file")

    def test_text_format_requires_string(self):
        payload = BinaryPayload.from_bytes(b"x", "application/pdf")
        with pytest.raises(ValidationError):
            ContentInput(content=payload, format="text")

    def test_payload_serializes_camel_case(self):
        payload = BinaryPayload.from_bytes(b"abc", "application/pdf")
        assert payload.model_dump(by_alias=True) == {"data": "YWJj", "mimeType": "application/pdf"}


class TestResultModels:
    def test_analysis_from_wire(self, analysis_payload):
        result = CandidateAnalysisResult.model_validate(analysis_payload)
        assert result.job_title == "Senior Backend Engineer"
        assert result.required_skills_match.items[0].status == "Match"
        assert set(result.sections()) == {
            "keyResponsibilitiesMatch",
            "requiredSkillsMatch",
            "niceToHaveSkillsMatch",
        }

    def test_analysis_round_trips_aliases(self, analysis_payload):
        result = CandidateAnalysisResult.model_validate(analysis_payload)
        assert result.model_dump(by_alias=True) == analysis_payload

    def test_analysis_missing_field(self, analysis_payload):
        del analysis_payload["overallFitScore"]
        with pytest.raises(ValidationError):
            CandidateAnalysisResult.model_validate(analysis_payload)

    def test_invalid_status(self, analysis_payload):
        analysis_payload["requiredSkillsMatch"]["items"][0]["status"] = "Maybe"
        with pytest.raises(ValidationError):
            CandidateAnalysisResult.model_validate(analysis_payload)

    def test_results_are_immutable(self, analysis_payload):
        result = CandidateAnalysisResult.model_validate(analysis_payload)
        with pytest.raises(ValidationError):
            result.job_title = "Other"

    def test_interview_from_wire(self, interview_payload):
        result = InterviewPerformanceResult.model_validate(interview_payload)
        assert result.soft_skills_analysis.items == "Communicates clearly."
        assert result.gap_resolutions.items[1].is_resolved is True
        assert result.resolved_count == 1

    def test_unaddressed_gaps(self, interview_payload):
        result = InterviewPerformanceResult.model_validate(interview_payload)
        gaps = ["No Kubernetes experience", "no team lead experience ", "No AWS"]
        assert result.unaddressed_gaps(gaps) == ["No AWS"]

    def test_invalid_feedback(self, interview_payload):
        interview_payload["overallFeedback"] = "Great"
        with pytest.raises(ValidationError):
            InterviewPerformanceResult.model_validate(interview_payload)

    def test_rewrite_from_wire(self, rewrite_payload):
        result = RewrittenResumeResult.model_validate(rewrite_payload)
        assert result.rewritten_resume.startswith("## Professional Summary")


def _aliases(model: type[BaseModel]) -> set[str]:
    return {field.alias or name for name, field in model.model_fields.items()}


class TestSchemaModelLockstep:
    """Every schema field must be required and map onto a model field."""

    @pytest.mark.parametrize(
        "schema, model",
        [
            (CANDIDATE_ANALYSIS_SCHEMA, CandidateAnalysisResult),
            (INTERVIEW_PERFORMANCE_SCHEMA, InterviewPerformanceResult),
            (REWRITTEN_RESUME_SCHEMA, RewrittenResumeResult),
        ],
    )
    def test_required_fields_match(self, schema, model):
        assert set(schema["required"]) == set(schema["properties"])
        assert set(schema["required"]) == _aliases(model)

    def test_nested_sections_required(self):
        section = CANDIDATE_ANALYSIS_SCHEMA["properties"]["requiredSkillsMatch"]
        assert section["required"] == ["items", "score"]
        item = section["properties"]["items"]["items"]
        assert item["properties"]["status"]["enum"] == ["Match", "Partial", "No Match"]

    def test_gap_items_use_wire_names(self):
        gaps = INTERVIEW_PERFORMANCE_SCHEMA["properties"]["gapResolutions"]
        item = gaps["properties"]["items"]["items"]
        assert item["required"] == ["gap", "resolution", "isResolved"]

    def test_soft_skills_items_is_text(self):
        soft = INTERVIEW_PERFORMANCE_SCHEMA["properties"]["softSkillsAnalysis"]
        assert soft["properties"]["items"]["type"] == "STRING"
        clarity = INTERVIEW_PERFORMANCE_SCHEMA["properties"]["areasToImproveClarity"]
        assert clarity["properties"]["items"]["type"] == "ARRAY"


class TestLlmConfig:
    def test_defaults(self):
        config = LlmConfig()
        assert config.provider is LlmProvider.GEMINI
        assert config.model == "gemini-2.5-flash"
        assert config.key_for(LlmProvider.OPENAI) is None

    def test_unknown_provider_falls_back(self):
        config = LlmConfig.model_validate({"provider": "mistral", "model": "x"})
        assert config.provider is LlmProvider.GEMINI

    def test_provider_case_insensitive(self):
        assert LlmConfig(provider="OpenAI").provider is LlmProvider.OPENAI

    def test_with_provider_selects_default_model(self):
        config = LlmConfig().with_provider(LlmProvider.GROQ)
        assert config.provider is LlmProvider.GROQ
        assert config.model == "llama3-8b-8192"

    def test_with_api_key(self):
        config = LlmConfig().with_api_key(LlmProvider.OPENAI, "  sk-test  ")
        assert config.key_for(LlmProvider.OPENAI) == "sk-test"
        assert config.key_for(LlmProvider.GROQ) is None

    def test_blank_key_is_missing(self):
        assert ApiKeys(openai="   ").openai is None

    def test_gemini_key_not_stored(self):
        with pytest.raises(ValueError, match="environment"):
            LlmConfig().with_api_key(LlmProvider.GEMINI, "key")

    def test_camel_case_wire_format(self):
        config = LlmConfig().with_api_key(LlmProvider.ANTHROPIC, "ak")
        data = config.model_dump(mode="json", by_alias=True)
        assert data["apiKeys"]["anthropic"] == "ak"
        assert LlmConfig.model_validate(data) == config

    def test_keys_hidden_from_repr(self):
        config = LlmConfig().with_api_key(LlmProvider.OPENAI, "sk-secret")
        assert "sk-secret" not in repr(config)

    def test_every_provider_has_models(self):
        for provider in LlmProvider:
            assert AVAILABLE_MODELS[provider]
            assert default_model_for(provider) == AVAILABLE_MODELS[provider][0][0]
