"""LLM runtime configuration for the generation stage.

LLMRuntimeConfig is the single place generation parameters come from, so
the configured temperature and max_tokens actually reach the LLM call.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from hr_assistant.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LLMRuntimeConfig:
    """Complete LLM configuration for a generation call."""

    # Connection parameters
    provider: str
    model: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None

    # Low temperature and a short cap keep answers deterministic and concise
    temperature: float = 0.1
    max_tokens: int = 500

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_litellm_model(self) -> str:
        """Get model string in LiteLLM format (provider/model)."""
        if not self.provider or self.model.startswith(f"{self.provider}/"):
            return self.model
        return f"{self.provider}/{self.model}"

    def to_litellm_kwargs(self) -> Dict[str, Any]:
        """Convert to kwargs for litellm.acompletion()."""
        kwargs: Dict[str, Any] = {
            "model": self.get_litellm_model(),
            "api_key": self.api_key,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        if self.base_url:
            kwargs["api_base"] = self.base_url

        return kwargs

    def with_overrides(
        self,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> "LLMRuntimeConfig":
        """Create a copy with specific overrides applied."""
        return replace(
            self,
            temperature=temperature if temperature is not None else self.temperature,
            max_tokens=max_tokens if max_tokens is not None else self.max_tokens,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMRuntimeConfig":
        """Build the generation config from application settings."""
        if not settings.cohere_api_key:
            logger.warning("COHERE_API_KEY is not set; chat requests will fail")
        return cls(
            provider=settings.generation_provider,
            model=settings.generation_model,
            api_key=settings.cohere_api_key,
            temperature=settings.generation_temperature,
            max_tokens=settings.generation_max_tokens,
        )
