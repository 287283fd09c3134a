"""Request and response schemas for the chat API.

Fields are snake_case in Python and camelCase on the wire, matching what
the chat widget sends (``conversationHistory``, ``sourceLang`` ...).
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hr_assistant.core.language import LanguageCode


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageRole(str, Enum):
    """Conversation roles accepted in history."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(CamelModel):
    """Single turn of client-supplied conversation history."""

    role: MessageRole
    content: str


class ChatRequest(CamelModel):
    """Body of ``POST /chat``."""

    # Optional so a missing message is reported as a 400, not a schema error
    message: Optional[str] = None
    conversation_history: Optional[List[ChatMessage]] = Field(default_factory=list)


class ChatResponse(CamelModel):
    """Body of a successful ``POST /chat``."""

    response: str
    timestamp: datetime
    provider: str
    detected_language: LanguageCode
    model: str


class TranslateRequest(CamelModel):
    """Body of ``POST /translate``."""

    text: str
    source_lang: LanguageCode
    target_lang: LanguageCode


class TranslateResponse(CamelModel):
    original: str
    translated: str
    source_lang: LanguageCode
    target_lang: LanguageCode


class DetectLanguageRequest(CamelModel):
    text: Optional[str] = None


class DetectLanguageResponse(CamelModel):
    language_code: LanguageCode
    language_name: str


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    details: Optional[str] = None
