"""Application service: the shopper's cart.

Holds the current ``Cart`` value and swaps it for the reducer's result
on every intent. The cart lives for the session only; it is never
persisted.
"""

from __future__ import annotations

from storefront.application.notification_channel import NotificationChannel
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.product import Product, VariantOption


class CartService:

    def __init__(self, notifications: NotificationChannel) -> None:
        self._notifications = notifications
        self._cart = Cart()

    @property
    def cart(self) -> Cart:
        return self._cart

    def items(self) -> list[CartItem]:
        return list(self._cart.items)

    def add(
        self,
        product: Product,
        quantity: int = 1,
        option: VariantOption | None = None,
    ) -> None:
        self._cart = self._cart.add(product, quantity, option)
        prefix = f"{quantity} x " if quantity > 1 else ""
        self._notifications.show(f"Added {prefix}{product.name} to cart")

    def update_quantity(self, cart_item_id: str, quantity: int) -> None:
        self._cart = self._cart.update_quantity(cart_item_id, quantity)

    def remove(self, cart_item_id: str) -> None:
        self._cart = self._cart.remove(cart_item_id)

    def clear(self) -> None:
        self._cart = self._cart.clear()
