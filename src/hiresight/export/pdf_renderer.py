"""Markdown report -> themed HTML -> PDF."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader, Template
from markupsafe import Markup

logger = logging.getLogger(__name__)

CSS_THEMES_DIR = Path(__file__).parent / "css_themes"
BASE_TEMPLATE_DIR = Path(__file__).parent

AVAILABLE_THEMES = ("light", "dark")
_MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]


@lru_cache(maxsize=1)
def _page_template() -> Template:
    env = Environment(loader=FileSystemLoader(str(BASE_TEMPLATE_DIR)), autoescape=True)
    return env.get_template("base.html")


def _theme_css(theme: str) -> str:
    if theme not in AVAILABLE_THEMES:
        logger.warning("Unknown report theme %r, using light", theme)
        theme = "light"
    css_path = CSS_THEMES_DIR / f"{theme}.css"
    return css_path.read_text(encoding="utf-8") if css_path.exists() else ""


def render_report_html(
    report_markdown: str,
    title: str = "Analysis Report",
    theme: str = "light",
    language: str = "en",
) -> str:
    """Convert the report markdown to a standalone themed HTML page."""
    body = markdown.markdown(report_markdown, extensions=_MARKDOWN_EXTENSIONS)
    return _page_template().render(
        title=title,
        lang=language,
        css=Markup(_theme_css(theme)),
        body=Markup(body),
    )


def render_report_pdf(
    report_markdown: str,
    title: str = "Analysis Report",
    theme: str = "light",
    language: str = "en",
) -> bytes:
    """Convert the report markdown to PDF bytes.

    WeasyPrint is used when it and its system libraries are installed;
    otherwise the page is drawn with fpdf2, without the theme colours.
    """
    page = render_report_html(report_markdown, title, theme=theme, language=language)
    try:
        from weasyprint import HTML
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")
        from hiresight.export.pdf_fallback import html_to_pdf_fpdf2

        return html_to_pdf_fpdf2(page)
    return HTML(string=page, base_url=str(BASE_TEMPLATE_DIR)).write_pdf()
