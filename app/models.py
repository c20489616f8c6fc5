from enum import Enum

from pydantic import BaseModel


class RiskLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class Role(str, Enum):
    system = "system"
    user = "user"
    assistant = "assistant"


class RiskLevels(BaseModel):
    stress: RiskLevel
    anxiety: RiskLevel
    depression: RiskLevel


class RiskAssessment(BaseModel):
    """Same shape whether it came from the model or from local scoring."""
    summary: str
    risks: RiskLevels
    recommendations: str


class ChatReply(BaseModel):
    reply: str
