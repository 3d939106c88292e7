"""Render analysis results as a downloadable Markdown report."""

from __future__ import annotations

import re

from hiresight.i18n import translate
from hiresight.models.analysis import CandidateAnalysisResult, SectionMatch
from hiresight.models.interview import InterviewPerformanceResult, OverallFeedback
from hiresight.models.rewrite import RewrittenResumeResult

REWRITTEN_RESUME_FILENAME = "Rewritten-Resume.txt"

_FEEDBACK_STYLES = {
    "Excellent": "success",
    "Good": "warning",
    "Needs Improvement": "danger",
}
_FEEDBACK_KEYS = {
    "Excellent": "interview.feedback.excellent",
    "Good": "interview.feedback.good",
    "Needs Improvement": "interview.feedback.improvement",
}


def compatibility_label(score: int) -> str:
    if score >= 80:
        return "high"
    if score >= 60:
        return "medium"
    return "low"


def feedback_style(feedback: OverallFeedback) -> str:
    return _FEEDBACK_STYLES.get(feedback, "warning")


def report_filename(job_title: str) -> str:
    """``Senior Dev (Go)`` -> ``Senior_Dev__Go__Analysis_Report.pdf``"""
    return re.sub(r"[^a-zA-Z0-9]", "_", job_title) + "_Analysis_Report.pdf"


def _bullets(items: list[str]) -> list[str]:
    return [f"- {item}" for item in items] or ["- —"]


def _section(title: str, section: SectionMatch) -> list[str]:
    lines = [f"### {title} ({section.score}/100)", ""]
    for item in section.items:
        lines.append(f"- **{item.item}** [{item.status}]: {item.explanation}")
    if not section.items:
        lines.append("- —")
    lines.append("")
    return lines


def render_report_markdown(
    analysis: CandidateAnalysisResult,
    interview: InterviewPerformanceResult | None = None,
    rewrite: RewrittenResumeResult | None = None,
    *,
    language: str = "en",
) -> str:
    """The full results view as one Markdown document."""

    def t(key: str) -> str:
        return translate(key, language)

    label = t(f"results.score.{compatibility_label(analysis.overall_fit_score)}")
    lines = [
        f"# {t('report.title')}: {analysis.job_title}",
        "",
        f"**{t('report.overallScore')}:** {analysis.overall_fit_score}/100 ({label})",
        "",
        analysis.summary,
        "",
        f"## {t('report.fitExplanation')}",
        "",
        analysis.fit_explanation,
        "",
        f"## {t('report.strengths')}",
        "",
        *_bullets(analysis.strengths),
        "",
        f"## {t('report.gaps')}",
        "",
        *_bullets(analysis.compatibility_gaps),
        "",
        *_section(t("report.keyResponsibilities"), analysis.key_responsibilities_match),
        *_section(t("report.requiredSkills"), analysis.required_skills_match),
        *_section(t("report.niceToHaveSkills"), analysis.nice_to_have_skills_match),
        f"### {t('report.cultureFit')} ({analysis.company_culture_fit.score}/100)",
        "",
        analysis.company_culture_fit.analysis,
        "",
        f"### {t('report.salary')}",
        "",
        analysis.salary_and_benefits,
        "",
        f"## {t('report.improvements')}",
        "",
        *_bullets(analysis.areas_for_improvement),
        "",
        f"## {t('report.actionPlan')}",
        "",
        *[f"{n}. {step}" for n, step in enumerate(analysis.action_plan, start=1)],
        "",
        f"## {t('report.questions')}",
        "",
        *_bullets(analysis.potential_interview_questions),
        "",
    ]

    if interview is not None:
        lines.extend(_interview_lines(interview, t))
    if rewrite is not None:
        lines.extend([f"## {t('report.rewrittenResume')}", "", rewrite.rewritten_resume, ""])

    return "\n".join(lines).rstrip() + "\n"


def _interview_lines(interview: InterviewPerformanceResult, t) -> list[str]:
    feedback = t(_FEEDBACK_KEYS.get(interview.overall_feedback, "interview.feedback.good"))
    lines = [
        f"## {t('report.interview')}: {feedback}",
        "",
        f"**{t('report.performanceScore')}:** {interview.performance_score}/100",
        f"**{t('report.postInterviewFitScore')}:** {interview.post_interview_fit_score}/100",
        "",
        interview.summary,
        "",
        f"### {t('report.gapResolutions')} ({interview.gap_resolutions.score}/100)",
        "",
    ]
    for item in interview.gap_resolutions.items:
        verdict = t("report.resolved") if item.is_resolved else t("report.unresolved")
        lines.append(f"- **{item.gap}** ({verdict}): {item.resolution}")
    lines.extend([
        "",
        f"### {t('report.softSkills')} ({interview.soft_skills_analysis.score}/100)",
        "",
        interview.soft_skills_analysis.items,
        "",
        f"### {t('report.clarity')} ({interview.areas_to_improve_clarity.score}/100)",
        "",
        *_bullets(interview.areas_to_improve_clarity.items),
        "",
        f"### {t('report.demonstrated')} ({interview.demonstrated_strengths.score}/100)",
        "",
        *_bullets(interview.demonstrated_strengths.items),
        "",
        f"### {t('report.missing')} ({interview.missing_from_interview.score}/100)",
        "",
        *_bullets(interview.missing_from_interview.items),
        "",
    ])
    return lines
