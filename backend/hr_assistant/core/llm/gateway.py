"""LLM gateway for chat-completion calls.

All generation goes through this gateway. It takes LLMRuntimeConfig
directly, so configured parameters (temperature, max_tokens) reach the
LiteLLM call unchanged, and it gives every call the same logging.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from litellm import acompletion

from .runtime_config import LLMRuntimeConfig

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Standardized LLM response."""

    content: str
    model: str
    provider: str
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    latency_ms: int = 0


class LLMGateway:
    """Gateway for all LLM interactions.

    Usage:
        config = LLMRuntimeConfig.from_settings(settings)
        response = await LLMGateway.execute_with_messages(
            messages=[{"role": "system", "content": "..."}, {"role": "user", "content": "Hi"}],
            config=config,
        )
    """

    @classmethod
    async def execute_with_messages(
        cls,
        messages: List[Dict[str, str]],
        config: LLMRuntimeConfig,
    ) -> LLMResponse:
        """Execute LLM call with a pre-built messages array.

        Args:
            messages: List of message dicts with 'role' and 'content'
            config: Complete LLM configuration

        Returns:
            Standardized LLMResponse

        Raises:
            ValueError: If the provider returned no choices
            Exception: Any transport or provider error from LiteLLM
        """
        start_time = time.time()

        kwargs = config.to_litellm_kwargs()
        kwargs["messages"] = messages

        logger.info(
            f"LLM call (messages): model={config.model}, provider={config.provider}, "
            f"temperature={config.temperature}, max_tokens={config.max_tokens}, "
            f"message_count={len(messages)}"
        )

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            logger.error(f"LLM call (messages) failed: model={config.model}, error={e}")
            raise

        choices = getattr(response, "choices", None)
        if not choices:
            logger.error(f"LLM response had no choices: model={config.model}")
            raise ValueError("LLM response contained no choices")

        latency_ms = int((time.time() - start_time) * 1000)
        usage = getattr(response, "usage", None)

        result = LLMResponse(
            content=choices[0].message.content or "",
            model=config.model,
            provider=config.provider,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            latency_ms=latency_ms,
        )

        logger.info(f"LLM response: tokens={result.total_tokens}, latency={latency_ms}ms")
        return result

    @classmethod
    async def health_check(cls, config: LLMRuntimeConfig) -> Optional[str]:
        """Send a one-word prompt and return the reply, or None on failure."""
        try:
            response = await cls.execute_with_messages(
                [{"role": "user", "content": "Say hello in one word"}],
                config.with_overrides(max_tokens=5),
            )
            return response.content
        except Exception as e:
            logger.warning(f"Health check failed for {config.model}: {e}")
            return None


def describe_error(error: Any) -> str:
    """Short, user-presentable description of an upstream error."""
    status = getattr(error, "status_code", None)
    message = str(error) or type(error).__name__
    if status:
        return f"{status} - {message}"
    return message
