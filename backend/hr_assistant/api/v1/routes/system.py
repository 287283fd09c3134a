"""Health and diagnostic routes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from hr_assistant.api.dependencies import (
    get_knowledge_base,
    get_response_generator,
    get_translation_gateway,
)
from hr_assistant.config import Settings, get_settings
from hr_assistant.core.knowledge_base import KnowledgeBase
from hr_assistant.core.language import LanguageCode
from hr_assistant.core.llm import LLMGateway, ResponseGenerator
from hr_assistant.core.translation import TranslationGateway

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    knowledge_base: KnowledgeBase = Depends(get_knowledge_base),
):
    """Static status document; makes no upstream calls."""
    return {
        "status": "OK",
        "provider": settings.provider_label,
        "model": settings.generation_model,
        "translation": f"Sarvam AI ({settings.translation_model})",
        "supportedLanguages": [language.display_name for language in LanguageCode],
        "generationConfigured": bool(settings.cohere_api_key),
        "translationConfigured": bool(settings.sarvam_api_key),
        "knowledgeBaseTopics": len(knowledge_base.topics),
    }


@router.get("/test")
async def test_upstreams(
    generator: ResponseGenerator = Depends(get_response_generator),
    gateway: TranslationGateway = Depends(get_translation_gateway),
):
    """Make one small call to each upstream service and report the outcome."""
    try:
        reply = await LLMGateway.health_check(generator.config)

        if gateway.is_configured:
            sample = await gateway.translate("Hello", LanguageCode.ENGLISH, LanguageCode.HINDI)
        else:
            sample = "Not configured"
        translation_ok = sample not in ("Hello", "Not configured")

        return {
            "status": "OK" if reply is not None and translation_ok else "Degraded",
            "generation": {
                "status": "OK" if reply is not None else "Error",
                "model": generator.config.model,
                "response": reply if reply is not None else "Error",
            },
            "translation": {
                "status": "OK" if translation_ok else "Not configured",
                "testTranslation": sample,
                "note": (
                    "Translation working!"
                    if gateway.is_configured
                    else "Add SARVAM_API_KEY to .env for translation"
                ),
            },
        }
    except Exception as e:
        logger.error(f"Diagnostics failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "status": "Error",
                "error": str(e),
                "hint": "Check your COHERE_API_KEY and SARVAM_API_KEY in .env",
            },
        )
