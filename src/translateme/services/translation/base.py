"""
Translation provider abstraction.

Provides a common interface for translation providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class TranslationResult:
    """Result of a translation request."""

    success: bool
    translated_text: str = ""
    error: str | None = None

    @classmethod
    def failure(cls, error: str) -> "TranslationResult":
        return cls(success=False, error=error)


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging and identification."""
        pass

    @abstractmethod
    async def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str,
    ) -> TranslationResult:
        """
        Translate text from the source to the target language.

        Implementations make exactly one attempt and never raise; every
        failure is reported through the returned result.

        Args:
            text: Text to translate, passed through unvalidated.
            target_lang: Target language code (e.g., "es").
            source_lang: Source language code (e.g., "en").

        Returns:
            TranslationResult with translated text or error.
        """
        pass

    def normalize_language_code(self, lang_code: str) -> str:
        """
        Normalize language code to provider-specific format.

        Override this method if the provider uses different codes.
        """
        return lang_code

    async def close(self) -> None:
        """Release network resources held by the provider."""
        pass
