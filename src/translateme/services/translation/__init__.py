"""
Translation services.

Provides abstraction for translation providers.
"""

from translateme.services.translation.base import (
    TranslationProvider,
    TranslationResult,
)
from translateme.services.translation.mymemory import MyMemoryProvider

__all__ = [
    "MyMemoryProvider",
    "TranslationProvider",
    "TranslationResult",
]
