from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    role: str = Field(..., description="'user' or 'assistant'")
    content: str


class ChatRequest(BaseModel):
    message: str = Field(..., description="User's latest message")
    history: List[ChatTurn] = Field(
        default_factory=list,
        description="Previous turns, oldest first (frontend-managed)",
    )


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
    fallback: bool = False
