"""Grounded response generation."""

import logging
from typing import Dict, List

from hr_assistant.core.errors import UpstreamGenerationError
from hr_assistant.core.knowledge_base import KnowledgeBase
from hr_assistant.models.schemas.chat import ChatMessage, MessageRole
from hr_assistant.utils.text import log_preview

from .gateway import LLMGateway, describe_error
from .prompts import EMPTY_RESPONSE_FALLBACK, build_system_prompt
from .runtime_config import LLMRuntimeConfig

logger = logging.getLogger(__name__)


class ResponseGenerator:
    """Answers pivot-language questions from the embedded knowledge base.

    Unlike translation, generation failures are never degraded: every error
    surfaces as UpstreamGenerationError and aborts the request.
    """

    def __init__(self, knowledge_base: KnowledgeBase, config: LLMRuntimeConfig):
        self.config = config
        # The knowledge base never changes, so the prompt is rendered once
        self.system_prompt = build_system_prompt(knowledge_base)

    def build_messages(
        self, message: str, history: List[ChatMessage]
    ) -> List[Dict[str, str]]:
        """Assemble system prompt, history and the current question."""
        messages = [{"role": "system", "content": self.system_prompt}]
        for turn in history:
            role = "user" if turn.role == MessageRole.USER else "assistant"
            messages.append({"role": role, "content": turn.content})
        messages.append({"role": "user", "content": message})
        return messages

    async def generate(self, message: str, history: List[ChatMessage]) -> str:
        """Generate an English answer.

        Args:
            message: Current question, already in the pivot language
            history: Normalized conversation history

        Returns:
            Answer text in the pivot language

        Raises:
            UpstreamGenerationError: If the service is unconfigured or the call fails
        """
        if not self.config.is_configured:
            raise UpstreamGenerationError(
                "Generation service is not configured",
                details="COHERE_API_KEY is not set",
            )

        messages = self.build_messages(message, history)

        try:
            response = await LLMGateway.execute_with_messages(messages, self.config)
        except Exception as e:
            raise UpstreamGenerationError(
                "Generation service call failed",
                details=f"Generation API Error: {describe_error(e)}",
            ) from e

        content = response.content.strip()
        if not content:
            logger.warning("Generation returned empty content; using fallback reply")
            return EMPTY_RESPONSE_FALLBACK

        logger.info(f"AI response (English): {log_preview(content)}")
        return content
