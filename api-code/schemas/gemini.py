from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: List[Part] = Field(default_factory=list)
    role: Optional[str] = None


class GenerateContentRequest(BaseModel):
    """Body of a ``models/{model}:generateContent`` call."""

    system_instruction: Optional[Content] = Field(default=None, alias="systemInstruction")
    contents: List[Content]

    model_config = {"populate_by_name": True}

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Candidate(BaseModel):
    content: Content


class GenerateContentResponse(BaseModel):
    """Subset of the generateContent response that the relay reads."""

    candidates: List[Candidate]
