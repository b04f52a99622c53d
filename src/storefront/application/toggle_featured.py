"""Application service: Toggle Featured use case."""

from __future__ import annotations

from storefront.application.site_store import SiteStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.service import catalog_service


class ToggleFeaturedHandler:

    def __init__(self, store: SiteStore) -> None:
        self._store = store

    def handle(self, product_id: int) -> bool:
        """Flip whether a product is featured; return the new state."""
        if self._store.get().find_product(product_id) is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        self._store.set(lambda site: catalog_service.toggle_featured(site, product_id))
        return product_id in self._store.get().featured_product_ids
