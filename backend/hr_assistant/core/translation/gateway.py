"""Translation gateway for the Sarvam AI translate API.

Translation is a best-effort stage. The gateway never raises: when the
service is not configured, unreachable, or returns something unusable, the
caller gets the original text back and the failure is only logged.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from hr_assistant.core.language import LanguageCode
from hr_assistant.utils.text import log_preview

logger = logging.getLogger(__name__)


class TranslationGateway:
    """Stateless wrapper around the external translation service.

    Usage:
        gateway = TranslationGateway(api_key=settings.sarvam_api_key)
        english = await gateway.translate(text, LanguageCode.HINDI, LanguageCode.ENGLISH)
    """

    DEFAULT_URL = "https://api.sarvam.ai/translate"
    DEFAULT_MODEL = "mayura:v1"

    def __init__(
        self,
        api_key: Optional[str],
        url: str = DEFAULT_URL,
        model: str = DEFAULT_MODEL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the gateway.

        Args:
            api_key: Sarvam subscription key; None disables translation
            url: Translate endpoint
            model: Translation model identifier
            http_client: Optional client to reuse (a fresh one is opened per call otherwise)
        """
        self._api_key = api_key
        self._url = url
        self._model = model
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _build_payload(
        self, text: str, source_lang: LanguageCode, target_lang: LanguageCode
    ) -> Dict[str, Any]:
        return {
            "input": text,
            "source_language_code": LanguageCode(source_lang).value,
            "target_language_code": LanguageCode(target_lang).value,
            "speaker_gender": "Male",
            "mode": "formal",
            "model": self._model,
            "enable_preprocessing": True,
        }

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        headers = {"API-Subscription-Key": self._api_key or ""}
        if self._http_client is not None:
            return await self._http_client.post(self._url, json=payload, headers=headers)
        async with httpx.AsyncClient() as client:
            return await client.post(self._url, json=payload, headers=headers)

    async def translate(
        self,
        text: str,
        source_lang: LanguageCode,
        target_lang: LanguageCode,
    ) -> str:
        """Translate text, falling back to the original on any failure.

        Args:
            text: Text to translate
            source_lang: Language of ``text``
            target_lang: Desired output language

        Returns:
            Translated text, or ``text`` unchanged if translation is skipped or fails
        """
        if source_lang == target_lang or not self.is_configured:
            return text

        pair = f"{LanguageCode(source_lang).value}->{LanguageCode(target_lang).value}"
        logger.info(f"Translating {pair}: {log_preview(text)}")

        try:
            response = await self._post(self._build_payload(text, source_lang, target_lang))
        except Exception as e:
            logger.warning(f"Translation request failed ({pair}): {e!r}; using original text")
            return text

        if not response.is_success:
            logger.warning(
                f"Translation service error ({pair}): status={response.status_code}, "
                f"body={log_preview(response.text, 200)}; using original text"
            )
            return text

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Translation response was not JSON ({pair}): {e}; using original text")
            return text

        if not isinstance(data, dict):
            logger.warning(f"Unexpected translation payload ({pair}): {type(data).__name__}")
            return text

        translated = data.get("translated_text")
        if not translated or not isinstance(translated, str):
            logger.warning(f"Translation payload missing translated_text ({pair})")
            return text

        logger.info(f"Translated {pair}: {log_preview(translated)}")
        return translated
