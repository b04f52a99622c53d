"""Application service: Record Product View use case.

Called once per navigation to a product's detail page, not once per
render, so re-rendering the same page does not inflate the counter.
"""

from __future__ import annotations

from storefront.application.site_store import SiteStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.service import catalog_service


class RecordProductViewHandler:

    def __init__(self, store: SiteStore) -> None:
        self._store = store

    def handle(self, product_id: int) -> int:
        """Increment the product's view counter and return the new count."""
        if self._store.get().find_product(product_id) is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        self._store.set(lambda site: catalog_service.record_view(site, product_id))
        return self._store.get().find_product(product_id).views  # type: ignore[union-attr]
