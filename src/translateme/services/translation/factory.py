"""
Translation provider factory.

Creates the translation provider from configuration.
"""

import logging

import aiohttp

from translateme.config import Settings, get_settings
from translateme.services.translation.base import TranslationProvider
from translateme.services.translation.mymemory import MyMemoryProvider

logger = logging.getLogger(__name__)


def create_translation_provider(settings: Settings | None = None) -> TranslationProvider:
    """
    Create a translation provider based on settings.

    Returns:
        TranslationProvider instance.
    """
    settings = settings or get_settings()

    logger.info(
        f"Using MyMemory translation provider at {settings.provider_base_url} "
        f"({settings.langpair})"
    )
    return MyMemoryProvider(
        base_url=settings.provider_base_url,
        contact_email=settings.contact_email,
        timeout=aiohttp.ClientTimeout(total=settings.request_timeout_seconds),
    )
