"""Pydantic models for the conversational resume rewrite."""

from __future__ import annotations

from typing import Literal

from hiresight.models.common import WireModel

ChatRole = Literal["user", "model"]


class ChatTurn(WireModel):
    role: ChatRole
    text: str


class RewrittenResumeResult(WireModel):
    rewritten_resume: str  # Markdown
    chat_response: str
