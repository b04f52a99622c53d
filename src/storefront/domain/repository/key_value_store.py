"""Abstract synchronous, size-limited string store.

Holds only small values (wishlist, consent flag) plus the legacy site
document that is read once for migration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

LEGACY_SITE_DATA_KEY = "naturesKnackSiteData"
WISHLIST_KEY = "naturesKnackWishlist"
COOKIE_CONSENT_KEY = "naturesKnackCookieConsent"


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*.

        Raises QuotaExceededError when the store would grow past its limit.
        """

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key* if present."""
