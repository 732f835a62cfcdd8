"""
Translation sync client.

Orchestrates the translation provider and the history store:
1. Translate text, then persist successful translations
2. Load the saved history
3. Erase the saved history
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from translateme.config import Settings, get_settings
from translateme.services.history.base import (
    DeleteReport,
    HistoryService,
    TranslationRecord,
)
from translateme.services.history.factory import create_history_service
from translateme.services.translation.base import TranslationProvider
from translateme.services.translation.factory import create_translation_provider

logger = logging.getLogger(__name__)

# Display text for a failed attempt
TRANSLATION_FAILED = "Translation failed"


class AttemptState(str, Enum):
    """Lifecycle of one translation attempt."""

    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


_TRANSITIONS = {
    AttemptState.IDLE: {AttemptState.REQUESTING},
    AttemptState.REQUESTING: {AttemptState.SUCCEEDED, AttemptState.FAILED},
    AttemptState.SUCCEEDED: set(),
    AttemptState.FAILED: set(),
}


class TranslationAttempt:
    """One logical translation attempt, from IDLE to a terminal state."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.state = AttemptState.IDLE

    def advance(self, state: AttemptState) -> None:
        if state not in _TRANSITIONS[self.state]:
            raise ValueError(f"Invalid attempt transition: {self.state.value} -> {state.value}")
        self.state = state


@dataclass
class TranslationOutcome:
    """What a translation attempt produced, including the history write."""

    original: str
    state: AttemptState
    translated_text: str = ""
    error: str | None = None
    saved: bool = False
    record_id: str | None = None
    store_error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == AttemptState.SUCCEEDED

    @property
    def display_text(self) -> str:
        """Text to show the user: the translation or the failure sentinel."""
        return self.translated_text if self.succeeded else TRANSLATION_FAILED


@dataclass
class HistoryView:
    """Records returned by a history load, plus the error if the load failed."""

    records: list[TranslationRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[TranslationRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> TranslationRecord:
        return self.records[index]


class TranslationSyncClient:
    """
    Keeps the remote history consistent with user actions.

    No method raises: failures degrade to the failure sentinel, an empty
    history or an empty report, and are logged.
    """

    def __init__(
        self,
        provider: TranslationProvider,
        history: HistoryService,
        source_lang: str = "en",
        target_lang: str = "es",
    ) -> None:
        self.provider = provider
        self.history = history
        self.source_lang = source_lang
        self.target_lang = target_lang

    async def request_translation(self, text: str) -> TranslationOutcome:
        """
        Translate text and, on success, save it to history.

        The history write is awaited and reported in the outcome; a failed
        write does not change the translation shown to the user.
        """
        attempt = TranslationAttempt(text)
        attempt.advance(AttemptState.REQUESTING)

        result = await self.provider.translate(text, self.target_lang, self.source_lang)

        if not result.success:
            attempt.advance(AttemptState.FAILED)
            logger.info(f"Translation via {self.provider.name} failed: {result.error}")
            return TranslationOutcome(
                original=text,
                state=attempt.state,
                error=result.error,
            )

        attempt.advance(AttemptState.SUCCEEDED)
        outcome = TranslationOutcome(
            original=text,
            state=attempt.state,
            translated_text=result.translated_text,
        )

        saved = await self.history.append(text, result.translated_text)
        outcome.saved = saved.success
        outcome.record_id = saved.record_id
        outcome.store_error = saved.error
        if not saved.success:
            logger.warning(f"Translation shown but not saved: {saved.error}")

        return outcome

    async def load_history(self) -> HistoryView:
        """Fetch saved translations in the order the store returns them."""
        listing = await self.history.list_all()
        if not listing.success:
            logger.warning(f"Error fetching history: {listing.error}")
            return HistoryView(error=listing.error)
        return HistoryView(records=listing.records)

    async def erase_history(self) -> DeleteReport:
        """Delete every saved translation, one record at a time."""
        result = await self.history.delete_all()
        if not result.success:
            logger.warning(f"Error fetching documents for deletion: {result.error}")
        return result.report

    async def close(self) -> None:
        """Release the provider session and store connections."""
        await self.provider.close()
        await self.history.close()


def create_sync_client(settings: Settings | None = None) -> TranslationSyncClient:
    """Create a sync client wired to the configured provider and store."""
    settings = settings or get_settings()
    return TranslationSyncClient(
        provider=create_translation_provider(settings),
        history=create_history_service(settings),
        source_lang=settings.source_lang,
        target_lang=settings.target_lang,
    )
