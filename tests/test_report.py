"""Tests for the Markdown report and its labels."""

from __future__ import annotations

import pytest

from hiresight.export.report import (
    compatibility_label,
    feedback_style,
    render_report_markdown,
    report_filename,
)
from hiresight.models.analysis import CandidateAnalysisResult
from hiresight.models.interview import InterviewPerformanceResult
from hiresight.models.rewrite import RewrittenResumeResult


@pytest.fixture
def analysis(analysis_payload) -> CandidateAnalysisResult:
    return CandidateAnalysisResult.model_validate(analysis_payload)


class TestLabels:
    @pytest.mark.parametrize(
        "score, label",
        [(100, "high"), (80, "high"), (79, "medium"), (60, "medium"), (59, "low"), (0, "low")],
    )
    def test_compatibility_label(self, score, label):
        assert compatibility_label(score) == label

    @pytest.mark.parametrize(
        "feedback, style",
        [("Excellent", "success"), ("Good", "warning"), ("Needs Improvement", "danger")],
    )
    def test_feedback_style(self, feedback, style):
        assert feedback_style(feedback) == style


class TestReportFilename:
    def test_replaces_non_alphanumerics(self):
        assert report_filename("Senior Dev (Go)") == "Senior_Dev__Go__Analysis_Report.pdf"

    def test_accented_title(self):
        assert report_filename("Engenheiro Sênior") == "Engenheiro_S_nior_Analysis_Report.pdf"


class TestRenderReportMarkdown:
    def test_analysis_only(self, analysis):
        md = render_report_markdown(analysis)

        assert md.startswith("# Analysis Report: Senior Backend Engineer\n")
        assert "**Overall Fit Score:** 82/100 (High Compatibility)" in md
        assert "### Required Skills (90/100)" in md
        assert "- **5+ years Go experience** [Match]: Resume states 5 years of Go." in md
        assert "1. Add metrics to payment bullets." in md
        assert "Interview Performance" not in md
        assert md.endswith("\n")

    def test_empty_section_placeholder(self, analysis):
        md = render_report_markdown(analysis)
        nice = md.split("### Nice-to-have Skills (50/100)")[1]
        assert nice.lstrip().startswith("- —")

    def test_localized(self, analysis):
        md = render_report_markdown(analysis, language="pt")
        assert md.startswith("# Relatório de Análise: Senior Backend Engineer")
        assert "Alta Compatibilidade" in md

    def test_with_interview_and_rewrite(self, analysis, interview_payload, rewrite_payload):
        interview = InterviewPerformanceResult.model_validate(interview_payload)
        rewrite = RewrittenResumeResult.model_validate(rewrite_payload)

        md = render_report_markdown(analysis, interview, rewrite)

        assert "## Interview Performance: Good" in md
        assert "**Post-interview Fit Score:** 80/100" in md
        assert "- **No team lead experience** (Resolved): Mentored two engineers for a year." in md
        assert "- **No Kubernetes experience** (Not resolved):" in md
        assert "## Rewritten Resume\n\n## Professional Summary" in md
