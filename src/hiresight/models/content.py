"""Normalized job/resume payloads handed to provider adapters."""

from __future__ import annotations

import base64
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

ContentFormat = Literal["text", "file"]


class BinaryPayload(BaseModel):
    """An opaque document forwarded to the provider as inline data."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    data: str  # base64
    mime_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> BinaryPayload:
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


class ContentInput(BaseModel):
    """Tagged union of pasted text, scraped text and uploaded binaries.

    ``format == "file"`` always carries a :class:`BinaryPayload`;
    ``format == "text"`` always carries a string.
    """

    model_config = ConfigDict(frozen=True)

    content: str | BinaryPayload
    format: ContentFormat

    @model_validator(mode="after")
    def _content_matches_format(self) -> ContentInput:
        if self.format == "file" and not isinstance(self.content, BinaryPayload):
            raise ValueError("format 'file' requires a binary payload")
        if self.format == "text" and not isinstance(self.content, str):
            raise ValueError("format 'text' requires string content")
        return self

    @classmethod
    def from_text(cls, text: str) -> ContentInput:
        return cls(content=text, format="text")

    @classmethod
    def from_file(cls, raw: bytes, mime_type: str) -> ContentInput:
        return cls(content=BinaryPayload.from_bytes(raw, mime_type), format="file")

    @property
    def is_file(self) -> bool:
        return self.format == "file"

    def describe(self) -> str:
        """Short, secret-free description for logs."""
        if isinstance(self.content, BinaryPayload):
            return f"file({self.content.mime_type}, {len(self.content.data)} b64 chars)"
        return f"text({len(self.content)} chars)"
