"""LLM integration package.

This package provides:
- LLMRuntimeConfig: generation parameters resolved from settings
- LLMGateway: LiteLLM chat-completion calls with consistent logging
- ResponseGenerator: grounded answers from the HR knowledge base
"""

from .gateway import LLMGateway, LLMResponse
from .generator import ResponseGenerator
from .runtime_config import LLMRuntimeConfig

__all__ = [
    "LLMGateway",
    "LLMResponse",
    "ResponseGenerator",
    "LLMRuntimeConfig",
]
