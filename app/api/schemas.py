from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, List

from ..models import Role

class AnswerIn(BaseModel):
    # extra keys are kept so the raw answers can be passed to the model as-is
    model_config = ConfigDict(extra="allow")

    score: Optional[int] = 0
    # 1-based question number (1-21); any other value falls back to list order
    position: Optional[Any] = None

class AssessmentRequest(BaseModel):
    answers: List[AnswerIn] = Field(default_factory=list)

class ChatMessageIn(BaseModel):
    role: Role
    content: str

class ChatRequest(BaseModel):
    messages: List[ChatMessageIn] = Field(default_factory=list)

class ErrorOut(BaseModel):
    detail: str
