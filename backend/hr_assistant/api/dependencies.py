"""API dependencies.

Pipeline components are built once in the application lifespan and kept on
``app.state``. These dependencies hand them to route handlers and are the
seam tests override.
"""

import logging

from fastapi import Request

from hr_assistant.config import Settings
from hr_assistant.core.knowledge_base import KnowledgeBase
from hr_assistant.core.language import LanguageDetector
from hr_assistant.core.llm import LLMRuntimeConfig, ResponseGenerator
from hr_assistant.core.pipeline import PipelineOrchestrator
from hr_assistant.core.translation import TranslationGateway

logger = logging.getLogger(__name__)


def build_orchestrator(settings: Settings, knowledge_base: KnowledgeBase) -> PipelineOrchestrator:
    """Wire the pipeline components from settings and the loaded knowledge base."""
    if not settings.sarvam_api_key:
        logger.warning("SARVAM_API_KEY is not set; translation is disabled")

    gateway = TranslationGateway(
        api_key=settings.sarvam_api_key,
        url=settings.translation_url,
        model=settings.translation_model,
    )
    generator = ResponseGenerator(
        knowledge_base=knowledge_base,
        config=LLMRuntimeConfig.from_settings(settings),
    )
    return PipelineOrchestrator(
        detector=LanguageDetector(),
        gateway=gateway,
        generator=generator,
        provider_label=settings.provider_label,
        model_label=settings.model_label,
    )


def get_knowledge_base(request: Request) -> KnowledgeBase:
    return request.app.state.knowledge_base


def get_orchestrator(request: Request) -> PipelineOrchestrator:
    return request.app.state.orchestrator


def get_detector(request: Request) -> LanguageDetector:
    return request.app.state.orchestrator.detector


def get_translation_gateway(request: Request) -> TranslationGateway:
    return request.app.state.orchestrator.gateway


def get_response_generator(request: Request) -> ResponseGenerator:
    return request.app.state.orchestrator.generator
