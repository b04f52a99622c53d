"""Application service: Delete Product use case."""

from __future__ import annotations

from storefront.application.notification_channel import NotificationChannel
from storefront.application.site_store import SiteStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.service import catalog_service


class DeleteProductHandler:

    def __init__(self, store: SiteStore, notifications: NotificationChannel) -> None:
        self._store = store
        self._notifications = notifications

    def handle(self, product_id: int) -> None:
        if self._store.get().find_product(product_id) is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        self._store.set(lambda site: catalog_service.delete_product(site, product_id))
        self._notifications.show("Product deleted successfully")
