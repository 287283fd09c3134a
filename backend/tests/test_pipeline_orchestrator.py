import httpx
import pytest

from hr_assistant.core.errors import InputError, UpstreamGenerationError
from hr_assistant.core.language import LanguageCode, LanguageDetector
from hr_assistant.core.pipeline import PipelineOrchestrator, PipelineState
from hr_assistant.core.translation import TranslationGateway
from hr_assistant.models.schemas.chat import ChatMessage, MessageRole

from conftest import (
    ENGLISH_ANSWER,
    ENGLISH_QUESTION,
    HINDI_ANSWER,
    HINDI_QUESTION,
    FakeCompletion,
    UpstreamHTTPError,
)


async def test_hindi_question_round_trip(orchestrator, completion, translate_api):
    envelope = await orchestrator.run(HINDI_QUESTION, [])

    assert envelope.response == HINDI_ANSWER
    assert envelope.detected_language == LanguageCode.HINDI
    assert envelope.provider == "Cohere + Sarvam AI"
    assert envelope.model == "command-r-plus + Sarvam Translate"
    assert envelope.timestamp.tzinfo is not None

    # Generator only ever saw English
    assert completion.calls[0]["messages"][-1]["content"] == ENGLISH_QUESTION
    assert [(r["source_language_code"], r["target_language_code"]) for r in translate_api.requests] == [
        ("hi-IN", "en-IN"),
        ("en-IN", "hi-IN"),
    ]


async def test_english_question_never_calls_translation(orchestrator, completion, translate_api):
    history = [ChatMessage(role=MessageRole.USER, content="Hello")]

    envelope = await orchestrator.run(ENGLISH_QUESTION, history)

    assert envelope.response == ENGLISH_ANSWER
    assert envelope.detected_language == LanguageCode.ENGLISH
    assert translate_api.requests == []


async def test_translation_failure_degrades_to_english(orchestrator, completion, translate_api):
    def fail(request):
        raise httpx.ConnectError("translation service down", request=request)

    translate_api.error = fail

    envelope = await orchestrator.run(HINDI_QUESTION, [])

    # Untranslated question went to the generator; the English answer came back as-is
    assert completion.calls[0]["messages"][-1]["content"] == HINDI_QUESTION
    assert envelope.response == ENGLISH_ANSWER
    assert envelope.detected_language == LanguageCode.HINDI


async def test_generation_failure_aborts_before_localizing(orchestrator, translate_api, monkeypatch):
    monkeypatch.setattr(
        "hr_assistant.core.llm.gateway.acompletion",
        FakeCompletion(error=UpstreamHTTPError("Service Unavailable")),
    )

    with pytest.raises(UpstreamGenerationError) as excinfo:
        await orchestrator.run(HINDI_QUESTION, [])

    assert excinfo.value.details
    # Inbound translation happened, outbound never did
    assert [r["target_language_code"] for r in translate_api.requests] == ["en-IN"]


@pytest.mark.parametrize("message", [None, "", "   "])
async def test_missing_message_makes_no_external_calls(orchestrator, completion, translate_api, message):
    with pytest.raises(InputError):
        await orchestrator.run(message, [])

    assert completion.calls == []
    assert translate_api.requests == []


async def test_localized_assistant_history_reaches_generator_untranslated(
    orchestrator, completion
):
    # The client echoes back the Hindi reply from the previous turn
    history = [
        ChatMessage(role=MessageRole.USER, content=HINDI_QUESTION),
        ChatMessage(role=MessageRole.ASSISTANT, content=HINDI_ANSWER),
    ]

    await orchestrator.run("And sick leave?", history)

    messages = completion.calls[0]["messages"]
    assert messages[1] == {"role": "user", "content": ENGLISH_QUESTION}
    assert messages[2] == {"role": "assistant", "content": HINDI_ANSWER}


async def test_stages_return_new_states(orchestrator):
    state = PipelineState(message=HINDI_QUESTION)

    detected = await orchestrator.detect(state)
    pivoted = await orchestrator.pivot(detected)

    assert state.detected_language is None
    assert detected.detected_language == LanguageCode.HINDI
    assert detected.pivot_message is None
    assert pivoted.pivot_message == ENGLISH_QUESTION


async def test_pivot_stage_skips_gateway_for_english(orchestrator, translate_api):
    state = PipelineState(message="Hi", detected_language=LanguageCode.ENGLISH)

    pivoted = await orchestrator.pivot(state)

    assert pivoted.pivot_message == "Hi"
    assert translate_api.requests == []


async def test_localize_stage_for_tamil(orchestrator, translate_api):
    state = PipelineState(
        message="விடுப்பு",
        detected_language=LanguageCode.TAMIL,
        pivot_response=ENGLISH_ANSWER,
    )

    localized = await orchestrator.localize(state)

    assert localized.response == f"[ta-IN] {ENGLISH_ANSWER}"
    assert translate_api.requests[0]["target_language_code"] == "ta-IN"


async def test_unencodable_translation_credential_degrades_to_english(
    generator, completion, translate_api
):
    orchestrator = PipelineOrchestrator(
        detector=LanguageDetector(),
        gateway=TranslationGateway(api_key="key\u2019", http_client=translate_api.client()),
        generator=generator,
        provider_label="Cohere + Sarvam AI",
        model_label="command-r-plus + Sarvam Translate",
    )

    envelope = await orchestrator.run(HINDI_QUESTION, [])

    assert completion.calls[0]["messages"][-1]["content"] == HINDI_QUESTION
    assert envelope.response == ENGLISH_ANSWER
    assert envelope.detected_language == LanguageCode.HINDI
