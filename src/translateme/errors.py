"""
Error taxonomy.

Gateways raise these internally and turn them into result objects at their
boundary, so they never reach the presentation layer.
"""


class TranslateMeError(Exception):
    """Base class for TranslateMe errors."""


class TranslationError(TranslateMeError):
    """The provider could not produce a translation (transport, status or envelope)."""


class StoreError(TranslateMeError):
    """The history store is unavailable or rejected an operation."""
