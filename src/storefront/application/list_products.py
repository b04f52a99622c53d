"""Application service: List Products and Related Products queries."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.site_store import SiteStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.service.recommendation_service import DEFAULT_LIMIT, related_products


class ListProductsHandler:

    def __init__(self, store: SiteStore) -> None:
        self._store = store

    def handle(self) -> list[ProductDTO]:
        site = self._store.get()
        featured = set(site.featured_product_ids)
        return [self._to_dto(p, p.id in featured) for p in site.products]

    def related(self, product_id: int, limit: int = DEFAULT_LIMIT) -> list[ProductDTO]:
        site = self._store.get()
        target = site.find_product(product_id)
        if target is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        featured = set(site.featured_product_ids)
        return [
            self._to_dto(p, p.id in featured)
            for p in related_products(target, site.products, limit)
        ]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(product: Product, featured: bool) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),
            from_price=product.has_variants,
            views=product.views,
            featured=featured,
        )
