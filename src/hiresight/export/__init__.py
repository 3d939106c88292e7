"""Downloadable artifacts: Markdown/HTML/PDF reports."""
from hiresight.export.pdf_renderer import (
    AVAILABLE_THEMES,
    render_report_html,
    render_report_pdf,
)
from hiresight.export.report import (
    REWRITTEN_RESUME_FILENAME,
    compatibility_label,
    feedback_style,
    render_report_markdown,
    report_filename,
)

__all__ = [
    "AVAILABLE_THEMES",
    "REWRITTEN_RESUME_FILENAME",
    "compatibility_label",
    "feedback_style",
    "render_report_html",
    "render_report_markdown",
    "render_report_pdf",
    "report_filename",
]
