"""Shared fixtures: fake upstream services and a wired-up pipeline."""

import json
from types import SimpleNamespace
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from hr_assistant.core.knowledge_base import KnowledgeBase
from hr_assistant.core.language import LanguageDetector
from hr_assistant.core.llm import LLMRuntimeConfig, ResponseGenerator
from hr_assistant.core.pipeline import PipelineOrchestrator
from hr_assistant.core.translation import TranslationGateway

HINDI_QUESTION = "मुझे कितनी आकस्मिक छुट्टी मिलती है?"
ENGLISH_QUESTION = "How many casual leaves do I get?"
ENGLISH_ANSWER = "You are entitled to 12 days of casual leave per calendar year."
HINDI_ANSWER = "आपको प्रति कैलेंडर वर्ष 12 दिन की आकस्मिक छुट्टी मिलती है।"

# (text, source, target) -> translation served by the fake translate API
TRANSLATIONS: Dict[tuple, str] = {
    (HINDI_QUESTION, "hi-IN", "en-IN"): ENGLISH_QUESTION,
    (ENGLISH_ANSWER, "en-IN", "hi-IN"): HINDI_ANSWER,
    ("Hello", "en-IN", "hi-IN"): "नमस्ते",
}


class FakeTranslateAPI:
    """Stand-in for the Sarvam translate endpoint behind httpx.MockTransport."""

    def __init__(self, translations: Optional[Dict[tuple, str]] = None):
        self.translations = translations if translations is not None else dict(TRANSLATIONS)
        self.requests: List[dict] = []
        self.headers: List[httpx.Headers] = []
        self.error: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)
        self.headers.append(request.headers)

        if self.error is not None:
            return self.error(request)

        key = (
            payload["input"],
            payload["source_language_code"],
            payload["target_language_code"],
        )
        translated = self.translations.get(key, f"[{payload['target_language_code']}] {payload['input']}")
        return httpx.Response(200, json={"translated_text": translated})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


class FakeCompletion:
    """Records litellm.acompletion calls and returns a canned answer."""

    def __init__(self, content: Optional[str] = ENGLISH_ANSWER, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[dict] = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))],
            usage=SimpleNamespace(prompt_tokens=120, completion_tokens=20, total_tokens=140),
        )


class UpstreamHTTPError(Exception):
    """Mimics a provider error carrying an HTTP status."""

    status_code = 503


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    return KnowledgeBase(
        policies={
            "leave_policy": {
                "casual_leave": "Employees are entitled to 12 days of casual leave per calendar year.",
            },
            "work_hours": {"standard_hours": "9:30 AM to 6:30 PM, Monday to Friday."},
        },
        source="test",
    )


@pytest.fixture
def llm_config() -> LLMRuntimeConfig:
    return LLMRuntimeConfig(
        provider="cohere_chat",
        model="command-r-plus-08-2024",
        api_key="test-cohere-key",
    )


@pytest.fixture
def translate_api() -> FakeTranslateAPI:
    return FakeTranslateAPI()


@pytest.fixture
def gateway(translate_api: FakeTranslateAPI) -> TranslationGateway:
    return TranslationGateway(api_key="test-sarvam-key", http_client=translate_api.client())


@pytest.fixture
def completion(monkeypatch) -> FakeCompletion:
    fake = FakeCompletion()
    monkeypatch.setattr("hr_assistant.core.llm.gateway.acompletion", fake)
    return fake


@pytest.fixture
def generator(knowledge_base, llm_config) -> ResponseGenerator:
    return ResponseGenerator(knowledge_base=knowledge_base, config=llm_config)


@pytest.fixture
def orchestrator(gateway, generator) -> PipelineOrchestrator:
    return PipelineOrchestrator(
        detector=LanguageDetector(),
        gateway=gateway,
        generator=generator,
        provider_label="Cohere + Sarvam AI",
        model_label="command-r-plus + Sarvam Translate",
    )
