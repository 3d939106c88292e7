"""Normalize pasted text, files, uploads and URLs into ContentInput."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from hiresight.config import IngestConfig
from hiresight.errors import DocumentReadError, MissingInput, UnsupportedFormat
from hiresight.models.content import ContentInput
from hiresight.parsers.document_parser import (
    SUPPORTED_EXTENSIONS,
    file_extension,
    parse_document_bytes,
    parse_document_file,
)
from hiresight.parsers.url_extractor import URLContentExtractor

logger = logging.getLogger(__name__)

SourceKind = Literal["text", "file", "upload", "url"]


@dataclass(frozen=True)
class InputSource:
    """Raw user input before normalization.

    ``value`` holds the pasted text, the file path, the upload filename or
    the URL depending on ``kind``; ``data`` carries upload bytes.
    """

    kind: SourceKind
    value: str = ""
    data: bytes = field(default=b"", repr=False)
    mime_type: str | None = None

    @classmethod
    def text(cls, text: str) -> InputSource:
        return cls(kind="text", value=text)

    @classmethod
    def file(cls, path: str | Path) -> InputSource:
        return cls(kind="file", value=str(path))

    @classmethod
    def upload(cls, filename: str, data: bytes, mime_type: str | None = None) -> InputSource:
        return cls(kind="upload", value=filename, data=data, mime_type=mime_type)

    @classmethod
    def url(cls, url: str) -> InputSource:
        return cls(kind="url", value=url)

    @property
    def is_empty(self) -> bool:
        if self.kind == "upload":
            return not self.value or not self.data
        return not self.value.strip()


def _check_size(size: int, name: str, ingest: IngestConfig) -> None:
    if size > ingest.max_upload_bytes:
        raise DocumentReadError(
            f"{name} is {size} bytes, limit is {ingest.max_upload_bytes}",
            key="error.fileTooLarge",
        )


def _check_extension(name: str) -> None:
    ext = file_extension(name)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(ext)


async def resolve_input(
    source: InputSource | None,
    field_name: str,
    *,
    ingest: IngestConfig | None = None,
    extractor: URLContentExtractor | None = None,
) -> ContentInput:
    """Turn one raw source into a ContentInput.

    ``field_name`` identifies the form field (``jobDescription``/``resume``)
    so an empty input raises a field-specific :class:`MissingInput`.
    """
    ingest = ingest or IngestConfig()
    if source is None or source.is_empty:
        raise MissingInput(field_name)

    if source.kind == "text":
        return ContentInput.from_text(source.value)

    if source.kind == "file":
        path = Path(source.value).expanduser()
        _check_extension(path.name)
        try:
            size = path.stat().st_size
        except OSError as exc:
            raise DocumentReadError(f"Cannot read {path}: {exc}") from exc
        _check_size(size, path.name, ingest)
        return parse_document_file(path)

    if source.kind == "upload":
        _check_extension(source.value)
        _check_size(len(source.data), source.value, ingest)
        return parse_document_bytes(source.data, source.value, source.mime_type)

    if source.kind == "url":
        extractor = extractor or URLContentExtractor(
            ingest.relay_url,
            timeout=ingest.fetch_timeout,
            min_line_length=ingest.min_line_length,
        )
        text = await extractor.extract(source.value)
        if not text.strip():
            raise MissingInput(field_name)
        return ContentInput.from_text(text)

    raise ValueError(f"Unknown input source kind: {source.kind!r}")
