from __future__ import annotations

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: str = Field(..., description="Question for the cybersecurity tutor.")


class ChatResponse(BaseModel):
    response: str = Field(..., description="Tutor reply, exactly as generated.")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="User-facing error message.")
