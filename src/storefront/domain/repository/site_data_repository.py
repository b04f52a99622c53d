"""Abstract durable store for the site document.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete backend is slow and asynchronous; both
operations may suspend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.site_data import SiteData


class SiteDataRepository(ABC):

    @abstractmethod
    async def load(self) -> SiteData | None:
        """Return the stored document, or None if nothing was saved yet.

        Raises StorageUnavailableError or LoadError on backend failure.
        """

    @abstractmethod
    async def save(self, site_data: SiteData) -> None:
        """Replace the stored document.

        Raises StorageUnavailableError, SaveError or QuotaExceededError.
        """
