"""Application service: Save Product use case (create or update)."""

from __future__ import annotations

from storefront.application.notification_channel import NotificationChannel
from storefront.application.site_store import SiteStore
from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import MonotonicIdGenerator
from storefront.domain.model.product import Product
from storefront.domain.model.site_data import SiteData
from storefront.domain.service import catalog_service


class SaveProductHandler:

    def __init__(
        self,
        store: SiteStore,
        notifications: NotificationChannel,
        ids: MonotonicIdGenerator,
    ) -> None:
        self._store = store
        self._notifications = notifications
        self._ids = ids

    def handle(self, product: Product) -> Product:
        """Save an edited product.

        A product with ``id == 0`` is new and gets a clock-derived id.
        Invalid input is reported and re-raised; the document is only
        replaced when the whole edit succeeds.
        """
        saved: list[Product] = []

        def apply(site_data: SiteData) -> SiteData:
            updated, product_saved = catalog_service.upsert_product(site_data, product, self._ids)
            saved.append(product_saved)
            return updated

        try:
            self._store.set(apply)
        except DomainException as exc:
            self._notifications.error(str(exc))
            raise

        if product.id == catalog_service.NEW_RECORD_ID:
            self._notifications.show("Product created successfully")
        else:
            self._notifications.show("Product updated successfully")
        return saved[0]
