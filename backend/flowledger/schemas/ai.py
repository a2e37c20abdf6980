"""
AI tool schemas.
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from flowledger.models.found import FoundTransaction


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class ChatChoiceMessage(BaseModel):
    content: str


class ChatChoice(BaseModel):
    message: ChatChoiceMessage


class ChatUsage(BaseModel):
    total_tokens: int


class ChatCompletion(BaseModel):
    choices: List[ChatChoice]
    usage: Optional[ChatUsage] = None


class AskRequest(BaseModel):
    question: str


class StatementRequest(BaseModel):
    statement_text: str
    context: str = "bank statement"


class InsightsResponse(BaseModel):
    insights: str
    notification: str


class StatementResponse(BaseModel):
    items: List[FoundTransaction]
    notification: str


class ProcessingStatus(BaseModel):
    processing: bool


class FoundList(BaseModel):
    items: List[FoundTransaction] = Field(default_factory=list)
    total: int = 0
