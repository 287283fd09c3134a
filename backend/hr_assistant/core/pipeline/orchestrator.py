"""Chat pipeline orchestrator.

Flow for one request (strictly sequential, no retries):
detect -> pivot -> normalize_history -> generate -> localize -> envelope
"""

import logging
from typing import List, Optional

from hr_assistant.core.errors import InputError
from hr_assistant.core.language import PIVOT_LANGUAGE, LanguageDetector
from hr_assistant.core.llm.generator import ResponseGenerator
from hr_assistant.core.translation import ConversationNormalizer, TranslationGateway
from hr_assistant.models.schemas.chat import ChatMessage
from hr_assistant.utils.text import log_preview

from .models import PipelineState, ResponseEnvelope

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Composes detection, translation and generation into one chat reply.

    The orchestrator holds no per-request state; every call to ``run`` builds
    its own PipelineState chain, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        detector: LanguageDetector,
        gateway: TranslationGateway,
        generator: ResponseGenerator,
        provider_label: str,
        model_label: str,
        normalizer: Optional[ConversationNormalizer] = None,
    ):
        """Initialize the orchestrator.

        Args:
            detector: Language detector
            gateway: Translation gateway (best effort)
            generator: Grounded response generator
            provider_label: Static provider label for the envelope
            model_label: Static model label for the envelope
            normalizer: History normalizer (built from detector and gateway if omitted)
        """
        self.detector = detector
        self.gateway = gateway
        self.generator = generator
        self.normalizer = normalizer or ConversationNormalizer(detector, gateway)
        self.provider_label = provider_label
        self.model_label = model_label

    async def run(
        self, message: Optional[str], history: Optional[List[ChatMessage]] = None
    ) -> ResponseEnvelope:
        """Handle one chat request end to end.

        Raises:
            InputError: If the message is missing or blank
            UpstreamGenerationError: If generation fails
        """
        if not message or not message.strip():
            raise InputError("Message is required")

        state = PipelineState(message=message, history=list(history or []))
        logger.info("--- New Message ---")
        logger.info(f"User message: {log_preview(message)}")

        state = await self.detect(state)
        state = await self.pivot(state)
        state = await self.normalize_history(state)
        state = await self.generate(state)
        state = await self.localize(state)
        return self.envelope(state)

    async def detect(self, state: PipelineState) -> PipelineState:
        language = self.detector.detect(state.message)
        logger.info(f"Detected language: {language.value}")
        return state.model_copy(update={"detected_language": language})

    async def pivot(self, state: PipelineState) -> PipelineState:
        if state.detected_language.is_pivot:
            return state.model_copy(update={"pivot_message": state.message})

        pivot_message = await self.gateway.translate(
            state.message, state.detected_language, PIVOT_LANGUAGE
        )
        logger.info(f"English translation: {log_preview(pivot_message)}")
        return state.model_copy(update={"pivot_message": pivot_message})

    async def normalize_history(self, state: PipelineState) -> PipelineState:
        pivot_history = await self.normalizer.normalize(state.history)
        return state.model_copy(update={"pivot_history": pivot_history})

    async def generate(self, state: PipelineState) -> PipelineState:
        # UpstreamGenerationError propagates and ends the request
        pivot_response = await self.generator.generate(
            state.pivot_message, state.pivot_history or []
        )
        return state.model_copy(update={"pivot_response": pivot_response})

    async def localize(self, state: PipelineState) -> PipelineState:
        if state.detected_language.is_pivot:
            return state.model_copy(update={"response": state.pivot_response})

        # The gateway falls back to the English answer if translation fails
        response = await self.gateway.translate(
            state.pivot_response, PIVOT_LANGUAGE, state.detected_language
        )
        logger.info(f"Translated response: {log_preview(response)}")
        return state.model_copy(update={"response": response})

    def envelope(self, state: PipelineState) -> ResponseEnvelope:
        return ResponseEnvelope(
            response=state.response,
            detected_language=state.detected_language,
            provider=self.provider_label,
            model=self.model_label,
        )
