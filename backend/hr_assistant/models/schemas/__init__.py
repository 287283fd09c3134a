"""Shared Pydantic schemas for API requests and responses."""

from .chat import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    DetectLanguageRequest,
    DetectLanguageResponse,
    ErrorResponse,
    MessageRole,
    TranslateRequest,
    TranslateResponse,
)

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "DetectLanguageRequest",
    "DetectLanguageResponse",
    "ErrorResponse",
    "MessageRole",
    "TranslateRequest",
    "TranslateResponse",
]
