"""
Presentation adapters.
"""

from translateme.adapters.screen import TranslatorScreen

__all__ = [
    "TranslatorScreen",
]
