"""Chat API routes."""

import logging

from fastapi import APIRouter, Depends

from hr_assistant.api.dependencies import get_orchestrator
from hr_assistant.core.pipeline import PipelineOrchestrator
from hr_assistant.models.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    orchestrator: PipelineOrchestrator = Depends(get_orchestrator),
):
    """Answer an HR question in the user's language.

    InputError and UpstreamGenerationError are turned into 400 / 500
    responses by the application's exception handlers.
    """
    envelope = await orchestrator.run(request.message, request.conversation_history)

    return ChatResponse(
        response=envelope.response,
        timestamp=envelope.timestamp,
        provider=envelope.provider,
        detected_language=envelope.detected_language,
        model=envelope.model,
    )
