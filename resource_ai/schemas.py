from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    # Optional so a missing question yields our 400 instead of a 422
    question: Optional[str] = None
    chat_history: List[ChatTurn] = Field(default_factory=list)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class SuccessEnvelope(BaseModel):
    success: Literal[True] = True
    data: Any = None


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    error: str
