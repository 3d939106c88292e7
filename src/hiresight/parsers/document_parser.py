"""Turn uploaded PDF/DOCX documents into provider-ready content.

PDFs are forwarded as opaque base64 payloads (the provider parses them
natively). DOCX files are reduced to their paragraph and table text.
"""

from __future__ import annotations

import io
import logging
import re
import zipfile
from pathlib import Path

from hiresight.errors import DocumentReadError, UnsupportedFormat
from hiresight.models.content import ContentInput

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
SUPPORTED_EXTENSIONS = (".pdf", ".docx")


def file_extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def parse_document_file(file_path: str | Path) -> ContentInput:
    """Read a document from disk and convert it to a ContentInput."""
    path = Path(file_path)
    ext = file_extension(path.name)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(ext)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(f"Cannot read {path}: {exc}") from exc
    return parse_document_bytes(raw, path.name)


def parse_document_bytes(
    raw: bytes,
    filename: str,
    mime_type: str | None = None,
) -> ContentInput:
    """Convert an in-memory upload (e.g. from a file picker) to a ContentInput."""
    ext = file_extension(filename)
    if ext == ".pdf":
        _check_pdf(raw, filename)
        logger.info("Prepared PDF %s (%d bytes) as inline payload", filename, len(raw))
        return ContentInput.from_file(raw, mime_type or PDF_MIME_TYPE)
    if ext == ".docx":
        text = extract_docx_text(raw, filename)
        logger.info("Extracted %d chars from DOCX %s", len(text), filename)
        return ContentInput.from_text(text)
    raise UnsupportedFormat(ext)


def extract_docx_text(raw: bytes, filename: str = "document.docx") -> str:
    """Extract plain text from DOCX bytes with normalized whitespace."""
    from docx import Document
    from docx.opc.exceptions import PackageNotFoundError

    try:
        doc = Document(io.BytesIO(raw))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise DocumentReadError(f"Cannot open {filename} as DOCX: {exc}") from exc

    blocks = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                blocks.append(" | ".join(cells))
    return normalize_text("\n".join(blocks))


def normalize_text(text: str) -> str:
    """Collapse runs of spaces/tabs and cap blank-line runs at one."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[\u200b\u200c\u200d\u2060\ufeff]", "", text)
    text = re.sub(r"[ \t\u00a0]+", " ", text)
    lines = [line.strip() for line in text.split("\n")]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _check_pdf(raw: bytes, filename: str) -> None:
    """Reject empty, corrupt or password-protected PDFs before upload."""
    import fitz  # pymupdf

    if not raw:
        raise DocumentReadError(f"{filename} is empty")
    try:
        doc = fitz.open(stream=raw, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise DocumentReadError(f"Cannot open {filename} as PDF: {exc}") from exc
    try:
        if doc.needs_pass:
            raise DocumentReadError(f"{filename} is password protected")
        if doc.page_count == 0:
            raise DocumentReadError(f"{filename} has no pages")
        logger.debug("PDF %s has %d pages", filename, doc.page_count)
    finally:
        doc.close()
