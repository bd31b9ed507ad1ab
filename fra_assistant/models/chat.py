"""
Pydantic models for chat queries and responses
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Literal, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

from .scheme import Scheme


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


def generate_message_id():
    return uuid.uuid4().hex


class ResponseKind(str, Enum):
    """How the widget should present a response"""
    INFORMATIONAL = "informational"
    SUGGESTION = "suggestion"


class QueryIntent(str, Enum):
    """Classification bucket that produced a response"""
    SCHEME = "scheme"
    VILLAGE = "village"
    RECOMMENDATION = "recommendation"
    CATEGORY = "category"
    OCCUPATION = "occupation"
    FALLBACK = "fallback"


class QueryResponse(BaseModel):
    """Result of classifying a single user query"""
    kind: ResponseKind
    intent: QueryIntent
    text: str
    schemes: List[Scheme] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def scheme_ids(self) -> List[str]:
        return [scheme.id for scheme in self.schemes]


class ChatMessage(BaseModel):
    """A message as rendered by the chat widget"""
    id: str = Field(default_factory=generate_message_id)
    type: Literal["user", "bot", "suggestion"]
    content: str
    schemes: List[Scheme] = Field(default_factory=list)
    intent: Optional[QueryIntent] = None
    timestamp: datetime = Field(default_factory=get_current_utc_time)


class ChatRequest(BaseModel):
    """A user query sent by the chat widget"""
    query: str = Field(..., max_length=1000, description="Free-text question")
    selected_village_id: Optional[str] = Field(None, description="Village currently selected in the widget")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "query": "Which schemes are best for my village?",
                "selected_village_id": "khandwa"
            }
        }
    )


class WelcomeResponse(BaseModel):
    """Initial state of the chat widget"""
    message: ChatMessage
    prompts: List[str]
    typing_delay_ms: int = Field(..., ge=0, description="Cosmetic delay the widget may show before replies")


class VillageSelectionResponse(BaseModel):
    """Messages produced when the user picks a village"""
    village_id: str
    messages: List[ChatMessage]
