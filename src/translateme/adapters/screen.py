"""
Translator screen model.

Holds what a front-end displays: the latest translation and its own copy of
the saved history. State flows one way, from the sync client into the
screen; nothing here is shared between screens.
"""

import logging

from translateme.services.history.base import DeleteReport, TranslationRecord
from translateme.services.sync_client import TranslationOutcome, TranslationSyncClient

logger = logging.getLogger(__name__)


class TranslatorScreen:
    """
    Presentation state for the translate / history / erase screen.

    Concurrent translate() calls are not sequenced: each completion
    overwrites `translated_text`, so the last one to finish is displayed.
    """

    def __init__(self, client: TranslationSyncClient) -> None:
        self.client = client
        self.translated_text = ""
        self.history: list[TranslationRecord] = []
        self.history_error: str | None = None
        self.erase_error: str | None = None
        self.last_outcome: TranslationOutcome | None = None

    async def translate(self, text: str) -> TranslationOutcome:
        """Translate text and show the result (or the failure sentinel)."""
        outcome = await self.client.request_translation(text)
        self.last_outcome = outcome
        self.translated_text = outcome.display_text
        return outcome

    async def open_history(self) -> list[TranslationRecord]:
        """Refresh the local history copy from the store."""
        view = await self.client.load_history()
        self.history = list(view.records)
        self.history_error = view.error
        return self.history

    async def erase_history(self) -> DeleteReport:
        """Erase the remote history and clear the local copy."""
        report = await self.client.erase_history()
        self.erase_error = report.error
        if report.error:
            return report
        self.history = []
        if report.failed:
            logger.warning(f"{report.failed} of {report.attempted} translations could not be deleted")
        return report
