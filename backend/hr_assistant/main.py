"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hr_assistant.api.dependencies import build_orchestrator
from hr_assistant.api.v1.routes import chat, language, system, translation
from hr_assistant.config import settings
from hr_assistant.core.errors import InputError, UpstreamGenerationError
from hr_assistant.core.knowledge_base import load_knowledge_base

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: the knowledge base is loaded once and never reloaded
    knowledge_base = load_knowledge_base(settings.knowledge_base_path)
    app.state.knowledge_base = knowledge_base
    app.state.orchestrator = build_orchestrator(settings, knowledge_base)

    logger.info(
        "Server ready: generation=%s, translation=%s",
        settings.generation_model,
        settings.translation_model if settings.sarvam_api_key else "disabled",
    )
    yield


app = FastAPI(
    title=settings.app_name,
    description="Multilingual HR policy assistant",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError):
    logger.info(f"Rejected request to {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(UpstreamGenerationError)
async def upstream_error_handler(request: Request, exc: UpstreamGenerationError):
    logger.error(f"Upstream generation failed: {exc} ({exc.details})")
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to process request", "details": exc.details},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": str(exc.errors())},
    )


# Include routers
app.include_router(chat.router, prefix=settings.api_prefix, tags=["chat"])
app.include_router(translation.router, prefix=settings.api_prefix, tags=["translation"])
app.include_router(language.router, prefix=settings.api_prefix, tags=["language"])
app.include_router(system.router, tags=["system"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "HR Assistant API", "version": "0.1.0"}


if __name__ == "__main__":
    uvicorn.run("hr_assistant.main:app", host=settings.host, port=settings.port, reload=settings.debug)
