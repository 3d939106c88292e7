"""Fallback PDF renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFException

logger = logging.getLogger(__name__)

# Unicode TTF fonts (dashes, bullets, accents beyond latin-1)
_UNICODE_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

# heading tag -> (font size, line height, space above)
_HEADINGS = {
    "h1": (16, 10, 0),
    "h2": (13, 8, 3),
    "h3": (11, 7, 3),
}
_BODY_SIZE = 10
_BODY_HEIGHT = 6

_BODY_RE = re.compile(r"<body[^>]*>(.*?)</body>", re.DOTALL | re.IGNORECASE)
_BLOCK_TAG_RE = re.compile(r"<(/?)(h[1-3]|p|li|ul|ol|br)\s*/?>")
_ANY_TAG_RE = re.compile(r"<[^>]+>")
_LATIN1_SUBSTITUTES = str.maketrans({"\u2014": "-", "\u2013": "-", "\u2022": "-", "\u00b7": "-"})


def _find_unicode_font() -> str | None:
    return next((p for p in _UNICODE_FONT_PATHS if Path(p).exists()), None)


def _new_document() -> FPDF:
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()

    family = "Helvetica"
    font_path = _find_unicode_font()
    if font_path:
        try:
            pdf.add_font("ReportFont", "", font_path)
            family = "ReportFont"
        except (OSError, RuntimeError, FPDFException):
            logger.debug("Could not load %s, using core font", font_path)
    pdf.set_font(family, size=_BODY_SIZE)
    return pdf


def html_to_pdf_fpdf2(html_content: str) -> bytes:
    """Render the report HTML with fpdf2; pages break automatically."""
    found = _BODY_RE.search(html_content)
    pdf = _new_document()

    for kind, text in _parse_html_to_lines(found.group(1) if found else html_content):
        text = _safe_text(text, pdf)
        try:
            _write_line(pdf, kind, text)
        except FPDFException:
            logger.debug("Skipped unrenderable %s line: %.30s", kind, text)

    return bytes(pdf.output())


def _write_line(pdf: FPDF, kind: str, text: str) -> None:
    if kind in _HEADINGS:
        size, height, above = _HEADINGS[kind]
        pdf.ln(above)
        pdf.set_font_size(size)
        pdf.multi_cell(0, height, text)
        if kind == "h1":
            y = pdf.get_y()
            pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.ln(2)
        pdf.set_font_size(_BODY_SIZE)
    elif kind == "bullet":
        pdf.multi_cell(0, _BODY_HEIGHT, f"  - {text}")
    elif kind == "numbered":
        pdf.multi_cell(0, _BODY_HEIGHT, f"  {text}")
    elif kind == "break":
        pdf.ln(3)
    elif text.strip():
        pdf.multi_cell(0, _BODY_HEIGHT, text)


def _safe_text(text: str, pdf: FPDF) -> str:
    """Core fonts only cover latin-1; replace anything else."""
    if pdf.is_ttf_font:
        return text
    return text.translate(_LATIN1_SUBSTITUTES).encode("latin-1", errors="replace").decode("latin-1")


def _parse_html_to_lines(body_html: str) -> list[tuple[str, str]]:
    """Flatten the rendered report HTML into (type, text) pairs.

    Types are ``h1``-``h3``, ``text``, ``bullet``, ``numbered`` and ``break``.
    Items of an ``<ol>`` come back as ``numbered`` with their position
    prefixed ("2. Add metrics"); inline markup is dropped.
    """
    lines: list[tuple[str, str]] = []
    lists: list[int | None] = []  # open lists, innermost last; None for <ul>
    item: str | None = None  # "bullet"/"numbered" while inside an <li>
    kind = "text"
    prefix = ""

    pos = 0
    for match in _BLOCK_TAG_RE.finditer(body_html):
        text = _strip_html(body_html[pos:match.start()])
        pos = match.end()
        if text:
            lines.append((kind, prefix + text))
            prefix = ""

        closing, tag = match.group(1) == "/", match.group(2)
        if tag == "br":
            lines.append(("break", ""))
        elif tag in ("ul", "ol"):
            if not closing:
                lists.append(0 if tag == "ol" else None)
                continue
            if lists:
                lists.pop()
            lines.append(("break", ""))
            kind = item or "text"
        elif tag == "li":
            item = None
            kind = "text"
            if not closing:
                if lists and lists[-1] is not None:
                    lists[-1] += 1
                    item, prefix = "numbered", f"{lists[-1]}. "
                else:
                    item = "bullet"
                kind = item
        elif tag == "p" or closing:
            # loose lists wrap item text in <p>
            kind = item or "text"
        else:
            kind = tag

    tail = _strip_html(body_html[pos:])
    if tail:
        lines.append((kind, prefix + tail))
    return lines


def _strip_html(fragment: str) -> str:
    return html.unescape(_ANY_TAG_RE.sub("", fragment)).strip()
