"""
MyMemory translation provider.

Uses the public MyMemory REST endpoint:
    GET <base>/get?q=<text>&langpair=<src>|<tgt>

The endpoint is unauthenticated and rate-limited, so every failure mode is
expected and reported as a failed TranslationResult.
"""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from translateme.errors import TranslationError
from translateme.services.translation.base import TranslationProvider, TranslationResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mymemory.translated.net"

DEFAULT_HEADERS = {
    "User-Agent": "TranslateMe/1.0",
    "Accept": "application/json",
}

REQUEST_TIMEOUT = aiohttp.ClientTimeout(total=30)


class MyMemoryProvider(TranslationProvider):
    """MyMemory translation provider."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        contact_email: str | None = None,
        timeout: aiohttp.ClientTimeout = REQUEST_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.contact_email = contact_email
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    @property
    def name(self) -> str:
        return "mymemory"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=DEFAULT_HEADERS,
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    def normalize_language_code(self, lang_code: str) -> str:
        """MyMemory accepts ISO codes in any case; send them lower-cased."""
        return lang_code.strip().lower()

    def _build_params(self, text: str, target_lang: str, source_lang: str) -> dict[str, str]:
        source = self.normalize_language_code(source_lang)
        target = self.normalize_language_code(target_lang)
        params = {
            "q": text,
            "langpair": f"{source}|{target}",
        }
        if self.contact_email:
            params["de"] = self.contact_email
        return params

    async def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str,
    ) -> TranslationResult:
        """Translate text using the MyMemory API."""
        url = f"{self.base_url}/get"
        params = self._build_params(text, target_lang, source_lang)

        try:
            session = await self._get_session()
            async with session.get(url, params=params) as response:
                if not 200 <= response.status < 300:
                    raise TranslationError(f"HTTP {response.status}: {response.reason}")

                body = await response.text()
                logger.debug(f"Raw MyMemory response: {body}")

            translated = self.extract_translation(body)
            logger.debug(f"Extracted translated text: {translated}")
            return TranslationResult(success=True, translated_text=translated)

        except TranslationError as e:
            logger.warning(f"Translation failed: {e}")
            return TranslationResult.failure(str(e))
        except asyncio.TimeoutError:
            logger.warning(f"Timeout requesting translation from {url}")
            return TranslationResult.failure("Request timeout")
        except aiohttp.ClientError as e:
            logger.warning(f"Network error requesting translation: {e}")
            return TranslationResult.failure(f"Network error: {e}")
        except Exception as e:
            logger.exception(f"Unexpected MyMemory error: {e}")
            return TranslationResult.failure(f"Unexpected error: {e}")

    @staticmethod
    def extract_translation(body: str) -> str:
        """
        Pull `responseData.translatedText` out of a MyMemory envelope.

        Raises:
            TranslationError: if the body is not JSON, reports a non-200
                `responseStatus`, or lacks the nested text field.
        """
        try:
            payload: Any = json.loads(body)
        except ValueError as e:
            raise TranslationError(f"Failed to decode response: {e}") from e

        if not isinstance(payload, dict):
            raise TranslationError("Invalid response data: expected a JSON object")

        # Quota and argument errors arrive with HTTP 200 and the real status inside
        status = payload.get("responseStatus")
        if status is not None and str(status) != "200":
            details = payload.get("responseDetails") or "no details"
            raise TranslationError(f"Provider status {status}: {details}")

        response_data = payload.get("responseData")
        if not isinstance(response_data, dict):
            raise TranslationError("Invalid response data: missing responseData")

        translated = response_data.get("translatedText")
        if not isinstance(translated, str):
            raise TranslationError("Invalid response data: missing translatedText")

        return translated
