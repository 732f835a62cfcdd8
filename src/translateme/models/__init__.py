"""
Database models for TranslateMe.
"""

from translateme.models.base import (
    Base,
    create_engine,
    create_session_factory,
    init_db,
    session_scope,
)
from translateme.models.translation import TranslationDocument

__all__ = [
    "Base",
    "TranslationDocument",
    "create_engine",
    "create_session_factory",
    "init_db",
    "session_scope",
]
