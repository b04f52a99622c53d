"""Aggregate state container for the site document.

``SiteStore`` is the single writer of the in-memory ``SiteData``. Readers
call ``get()``; writers pass an updater to ``set()``; interested parties
``subscribe()`` to be told about every new document.

Lifecycle:

1. ``start()`` loads the document once: durable store first, then the
   legacy key (migrated write-through into the durable store), then the
   built-in default.
2. Until that finishes the store is not ready and nothing is persisted,
   so a transient default can never overwrite real durable state.
3. After that every ``set()`` restarts a debounce timer; when it fires
   the document as it is *at that moment* is saved. A burst of edits
   collapses into one write.

Save failures are reported through the notification channel and never
roll back memory: the UI model is optimistic and durability is best
effort.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from storefront.application.notification_channel import NotificationChannel
from storefront.domain.exceptions import (
    LoadError,
    MigrationParseError,
    QuotaExceededError,
    StorageError,
    StorageUnavailableError,
)
from storefront.domain.model.default_site_data import default_site_data
from storefront.domain.model.site_data import SiteData
from storefront.domain.repository.key_value_store import LEGACY_SITE_DATA_KEY, KeyValueStore
from storefront.domain.repository.site_data_repository import SiteDataRepository

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 1.0
SAVE_FAILED_MESSAGE = "Error saving data. Please try using smaller images."
STORAGE_UNAVAILABLE_MESSAGE = "Durable storage is unavailable; changes will not be kept."

Updater = Callable[[SiteData], SiteData]
Listener = Callable[[SiteData], None]


class LoadSource:
    DURABLE = "durable"
    LEGACY = "legacy"
    DEFAULT = "default"


class SiteStore:

    def __init__(
        self,
        durable: SiteDataRepository,
        legacy: KeyValueStore,
        notifications: NotificationChannel,
        legacy_decoder: Callable[[str], SiteData],
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        default_factory: Callable[[], SiteData] = default_site_data,
    ) -> None:
        self._durable = durable
        self._legacy = legacy
        self._notifications = notifications
        self._legacy_decoder = legacy_decoder
        self._debounce_seconds = debounce_seconds
        self._default_factory = default_factory

        self._state = default_factory()
        self._listeners: list[Listener] = []
        self._started = False
        self._ready = False
        self._disposed = False
        self._durable_available = True
        self._timer: asyncio.TimerHandle | None = None
        self._in_flight: asyncio.Task[None] | None = None
        self.load_source: str | None = None

    # --- Read / write contract ------------------------------------------------

    def get(self) -> SiteData:
        return self._state

    def set(self, updater: Updater) -> None:
        """Apply *updater* to the current document and schedule a save.

        If the updater raises, the document is left untouched and the
        exception propagates to the caller.
        """
        self._state = updater(self._state)
        self._emit()
        if self._ready and not self._disposed:
            self._schedule_save()

    def is_ready(self) -> bool:
        return self._ready

    @property
    def has_pending_save(self) -> bool:
        return self._timer is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Startup --------------------------------------------------------------

    async def start(self) -> None:
        """Load the initial document. Only the first call does anything."""
        if self._started:
            return
        self._started = True

        loaded = await self._load_durable()
        if loaded is not None:
            self._state = loaded
            self.load_source = LoadSource.DURABLE
        else:
            migrated = self._read_legacy()
            if migrated is not None:
                self._state = migrated
                self.load_source = LoadSource.LEGACY
                await self._save(migrated)
                logger.info("Migrated site data from the legacy store")
            else:
                self._state = self._default_factory()
                self.load_source = LoadSource.DEFAULT

        logger.info("Site data ready (source=%s)", self.load_source)
        self._ready = True
        self._emit()

    async def _load_durable(self) -> SiteData | None:
        try:
            return await self._durable.load()
        except StorageUnavailableError as exc:
            self._durable_available = False
            logger.error("Durable store unavailable: %s", exc)
            self._notifications.error(STORAGE_UNAVAILABLE_MESSAGE)
        except LoadError as exc:
            logger.error("Error loading site data from the durable store: %s", exc)
        return None

    def _read_legacy(self) -> SiteData | None:
        try:
            text = self._legacy.get(LEGACY_SITE_DATA_KEY)
        except StorageError as exc:
            logger.error("Legacy store unreadable: %s", exc)
            return None
        if text is None:
            return None
        try:
            return self._parse_legacy(text)
        except MigrationParseError as exc:
            logger.error("Migration failed: %s", exc)
            return None

    # --- Persistence ----------------------------------------------------------

    def _schedule_save(self) -> None:
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = loop.call_later(self._debounce_seconds, self._on_timer)

    def _on_timer(self) -> None:
        self._timer = None
        previous = self._in_flight
        self._in_flight = asyncio.get_running_loop().create_task(
            self._save_after(previous)
        )

    async def _save_after(self, previous: asyncio.Task[None] | None) -> None:
        # One write at a time: wait for the earlier save to settle first.
        if previous is not None and not previous.done():
            await previous
        await self._save(self._state)

    async def _save(self, site_data: SiteData) -> None:
        if not self._durable_available:
            logger.debug("Skipping save, durable store unavailable")
            return
        try:
            await self._durable.save(site_data.normalized())
        except QuotaExceededError as exc:
            logger.error("Durable store quota exceeded: %s", exc)
            self._notifications.error(SAVE_FAILED_MESSAGE)
        except StorageError as exc:
            logger.error("Error saving site data: %s", exc)
            self._notifications.error(SAVE_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected error saving site data")
            self._notifications.error(SAVE_FAILED_MESSAGE)

    async def flush(self) -> None:
        """Write any pending change now and wait for in-flight saves."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            previous = self._in_flight
            self._in_flight = asyncio.get_running_loop().create_task(
                self._save_after(previous)
            )
        if self._in_flight is not None:
            await self._in_flight

    def dispose(self) -> None:
        """Cancel any pending save and stop scheduling new ones."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._disposed = True
        self._listeners.clear()

    # --- Internal helpers -----------------------------------------------------

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    def _parse_legacy(self, text: str) -> SiteData:
        try:
            return self._legacy_decoder(text)
        except ValueError as exc:
            raise MigrationParseError(f"Legacy site data is unreadable: {exc}") from exc
