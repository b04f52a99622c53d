"""Application service: the cookie-consent answer."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.key_value_store import COOKIE_CONSENT_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class ConsentService:

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def status(self) -> bool | None:
        """True/False once answered, None while the banner should still show."""
        raw = self._store.get(COOKIE_CONSENT_KEY)
        if raw == "true":
            return True
        if raw == "false":
            return False
        return None

    def accept(self) -> None:
        self._record(True)

    def decline(self) -> None:
        self._record(False)

    def _record(self, accepted: bool) -> None:
        try:
            self._store.set(COOKIE_CONSENT_KEY, "true" if accepted else "false")
        except StorageError as exc:
            logger.error("Error saving cookie consent: %s", exc)
