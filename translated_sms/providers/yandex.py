"""Yandex Translate provider: single GET against the v1.5 JSON API."""

import logging

import httpx

from translated_sms.errors import ResponseFormatError, TranslationProviderError, TransportError
from translated_sms.providers.base import TranslationProvider

logger = logging.getLogger(__name__)


class YandexProvider(TranslationProvider):
    """Translates text using the Yandex Translate JSON API."""

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str = "",
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        # Import here so an explicitly configured provider skips .env loading
        if api_key is None or not endpoint or timeout is None:
            from translated_sms.config import (
                HTTP_TIMEOUT,
                YANDEX_API_KEY,
                YANDEX_TRANSLATE_URL,
            )

            api_key = YANDEX_API_KEY if api_key is None else api_key
            endpoint = endpoint or YANDEX_TRANSLATE_URL
            timeout = HTTP_TIMEOUT if timeout is None else timeout

        self.api_key: str = api_key
        self.endpoint: str = endpoint
        self._owns_client: bool = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        params = {
            "lang": f"{source_lang}-{target_lang}",
            "key": self.api_key,
            "text": text,
        }

        try:
            response = await self._client.get(self.endpoint, params=params)
        except httpx.DecodingError as exc:
            logger.error("Yandex response body could not be decoded: %s", exc)
            raise ResponseFormatError(f"Translation response body could not be decoded: {exc}") from exc
        except httpx.TransportError as exc:
            logger.error("Yandex request failed: %s", exc)
            raise TransportError(f"Could not reach translation provider: {exc}") from exc

        if not response.is_success:
            detail = self._error_detail(response)
            logger.error(
                "Yandex API error: %s %s", response.status_code, detail or response.reason_phrase
            )
            raise TranslationProviderError(response.status_code, detail)

        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseFormatError("Translation response is not valid JSON") from exc

        match data:
            case {"text": [str() as translated, *_]}:
                logger.debug("Yandex translated %d chars into %s", len(text), target_lang)
                return translated
            case {"text": []}:
                raise ResponseFormatError("Translation response holds no translated text")

        raise ResponseFormatError("Translation response has an unexpected structure")

    @staticmethod
    def _error_detail(response: httpx.Response) -> str | None:
        """Extract Yandex's error message from a failed response, if any."""
        try:
            data = response.json()
        except ValueError:
            return None

        match data:
            case {"message": str() as message}:
                return message

        return None

    async def close(self) -> None:
        """Close the underlying HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()
