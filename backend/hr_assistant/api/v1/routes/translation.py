"""Translation API routes."""

from fastapi import APIRouter, Depends

from hr_assistant.api.dependencies import get_translation_gateway
from hr_assistant.core.translation import TranslationGateway
from hr_assistant.models.schemas.chat import TranslateRequest, TranslateResponse

router = APIRouter()


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    gateway: TranslationGateway = Depends(get_translation_gateway),
):
    """Translate text directly. Returns the input unchanged if translation is unavailable."""
    translated = await gateway.translate(request.text, request.source_lang, request.target_lang)

    return TranslateResponse(
        original=request.text,
        translated=translated,
        source_lang=request.source_lang,
        target_lang=request.target_lang,
    )
