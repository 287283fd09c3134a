"""Pipeline data models.

PipelineState is immutable. Each stage returns a new state via
``model_copy(update=...)`` so stages can be tested in isolation.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hr_assistant.core.language import LanguageCode
from hr_assistant.models.schemas.chat import ChatMessage


class PipelineState(BaseModel):
    """Accumulated results of one chat request as it moves through the stages."""

    model_config = ConfigDict(frozen=True)

    # Input
    message: str = Field(..., description="User message as received")
    history: List[ChatMessage] = Field(default_factory=list, description="Client-supplied history")

    # Stage outputs
    detected_language: Optional[LanguageCode] = Field(default=None, description="Language of the message")
    pivot_message: Optional[str] = Field(default=None, description="Message in the pivot language")
    pivot_history: Optional[List[ChatMessage]] = Field(default=None, description="Normalized history")
    pivot_response: Optional[str] = Field(default=None, description="Generated answer, pivot language")
    response: Optional[str] = Field(default=None, description="Answer in the user's language")


class ResponseEnvelope(BaseModel):
    """Final result of one chat request."""

    model_config = ConfigDict(frozen=True)

    response: str
    detected_language: LanguageCode
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    provider: str
    model: str
