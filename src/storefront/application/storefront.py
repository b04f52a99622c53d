"""The surface the presentation layer talks to.

One object wires the site store, cart, wishlist and notification channel
together and exposes exactly the intents the UI needs.
"""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.application.consent_service import ConsentService
from storefront.application.notification_channel import NotificationChannel
from storefront.application.record_product_view import RecordProductViewHandler
from storefront.application.site_store import SiteStore, Updater
from storefront.application.wishlist_service import WishlistService
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartItem
from storefront.domain.model.notification import Notification, NotificationKind
from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.site_data import SiteData
from storefront.domain.service.recommendation_service import DEFAULT_LIMIT, related_products


class Storefront:

    def __init__(
        self,
        store: SiteStore,
        cart: CartService,
        wishlist: WishlistService,
        consent: ConsentService,
        notifications: NotificationChannel,
    ) -> None:
        self.store = store
        self.cart = cart
        self.wishlist = wishlist
        self.consent = consent
        self.notifications = notifications
        self._record_view = RecordProductViewHandler(store)

    # --- Lifecycle ------------------------------------------------------------

    async def start(self) -> None:
        await self.store.start()

    async def close(self) -> None:
        """Flush pending edits, then stop the store from scheduling more."""
        await self.store.flush()
        self.store.dispose()

    # --- Site document --------------------------------------------------------

    def get_site_data(self) -> SiteData:
        return self.store.get()

    def set_site_data(self, updater: Updater) -> None:
        self.store.set(updater)

    def is_ready(self) -> bool:
        return self.store.is_ready()

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(
        self,
        product: Product,
        quantity: int = 1,
        option: VariantOption | None = None,
    ) -> None:
        self.cart.add(product, quantity, option)

    def update_cart_quantity(self, cart_item_id: str, quantity: int) -> None:
        self.cart.update_quantity(cart_item_id, quantity)

    def remove_from_cart(self, cart_item_id: str) -> None:
        self.cart.remove(cart_item_id)

    def clear_cart(self) -> None:
        self.cart.clear()

    def get_cart(self) -> list[CartItem]:
        return self.cart.items()

    # --- Wishlist -------------------------------------------------------------

    def toggle_wishlist(self, product_id: int) -> None:
        self.wishlist.toggle(product_id)

    def get_wishlist(self) -> list[int]:
        return self.wishlist.ids()

    # --- Notifications --------------------------------------------------------

    def show_notification(
        self,
        message: str,
        kind: NotificationKind = NotificationKind.SUCCESS,
    ) -> Notification:
        return self.notifications.show(message, kind)

    def clear_notification(self) -> None:
        self.notifications.clear()

    def get_notification(self) -> Notification | None:
        return self.notifications.current

    # --- Product detail -------------------------------------------------------

    def related_products(self, product_id: int, limit: int = DEFAULT_LIMIT) -> list[Product]:
        site = self.store.get()
        target = site.find_product(product_id)
        if target is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return related_products(target, site.products, limit)

    def record_view(self, product_id: int) -> int:
        return self._record_view.handle(product_id)
