"""Typed views of upstream provider payloads.

Every field is optional so that validation never fails on partial payloads; the
provider adapters decide which missing fields make a response malformed.
"""

from typing import Any, List, Optional

from pydantic import BaseModel


class UpstreamErrorDetail(BaseModel):
    message: Optional[str] = None
    code: Any = None
    status: Optional[str] = None


class UpstreamErrorBody(BaseModel):
    """Error envelope shared by OpenAI and Gemini (`{"error": {"message": ...}}`)."""

    error: Optional[UpstreamErrorDetail] = None


# ============================================================
# OpenAI chat completions
# ============================================================

class ChatMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class ChatChoice(BaseModel):
    index: Optional[int] = None
    message: Optional[ChatMessage] = None
    finish_reason: Optional[str] = None


class ChatCompletionResponse(BaseModel):
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[ChatChoice] = []


# ============================================================
# Gemini generateContent
# ============================================================

class ContentPart(BaseModel):
    text: Optional[str] = None


class Content(BaseModel):
    role: Optional[str] = None
    parts: List[ContentPart] = []


class Candidate(BaseModel):
    content: Optional[Content] = None
    finishReason: Optional[str] = None


class GenerateContentResponse(BaseModel):
    candidates: List[Candidate] = []
