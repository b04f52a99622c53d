"""Wishlist — the set of product ids a shopper has saved for later."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Wishlist:
    product_ids: frozenset[int] = frozenset()

    def toggle(self, product_id: int) -> Wishlist:
        return Wishlist(self.product_ids ^ {product_id})

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.product_ids

    def __len__(self) -> int:
        return len(self.product_ids)

    def ids(self) -> list[int]:
        return sorted(self.product_ids)

    @staticmethod
    def of(product_ids: list[int]) -> Wishlist:
        return Wishlist(frozenset(product_ids))
