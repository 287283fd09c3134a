"""Language detection API routes."""

from fastapi import APIRouter, Depends

from hr_assistant.api.dependencies import get_detector
from hr_assistant.core.language import LanguageDetector
from hr_assistant.models.schemas.chat import DetectLanguageRequest, DetectLanguageResponse

router = APIRouter()


@router.post("/detect-language", response_model=DetectLanguageResponse)
async def detect_language(
    request: DetectLanguageRequest,
    detector: LanguageDetector = Depends(get_detector),
):
    language = detector.detect(request.text)
    return DetectLanguageResponse(
        language_code=language,
        language_name=language.display_name,
    )
