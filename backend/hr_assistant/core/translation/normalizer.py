"""Conversation history normalization."""

import logging
from typing import List

from hr_assistant.core.language import PIVOT_LANGUAGE, LanguageDetector
from hr_assistant.models.schemas.chat import ChatMessage, MessageRole

from .gateway import TranslationGateway

logger = logging.getLogger(__name__)


class ConversationNormalizer:
    """Brings client-supplied history into the pivot language.

    Only ``user`` turns are translated. ``assistant`` turns are passed through
    as-is on the assumption that they are already in the pivot language, which
    does not hold once a localized reply is echoed back by the client. Such
    turns reach the generator untranslated.
    """

    def __init__(self, detector: LanguageDetector, gateway: TranslationGateway):
        self.detector = detector
        self.gateway = gateway

    async def normalize(self, history: List[ChatMessage]) -> List[ChatMessage]:
        """Return a same-length, same-order copy of ``history`` in the pivot language."""
        normalized: List[ChatMessage] = []

        for message in history:
            language = self.detector.detect(message.content)
            content = message.content

            if message.role == MessageRole.USER and not language.is_pivot:
                content = await self.gateway.translate(content, language, PIVOT_LANGUAGE)

            normalized.append(ChatMessage(role=message.role, content=content))

        logger.debug(f"Normalized {len(normalized)} history messages")
        return normalized
