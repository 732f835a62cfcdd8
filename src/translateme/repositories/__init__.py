"""
Repository layer for database operations.
"""

from translateme.repositories.translation_repository import TranslationRepository

__all__ = [
    "TranslationRepository",
]
