"""Shopping cart — a pure reducer over an ordered list of line items.

A line is identified by ``cart_item_id``: the product id, suffixed with
the chosen option's value when the product has variants. Adding the
same product+option combination again merges into the existing line;
no two lines ever share an id.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.value_objects import Money, Quantity


def cart_item_id_for(product: Product, option: VariantOption | None) -> str:
    if option is not None:
        return f"{product.id}-{option.value}"
    return f"{product.id}"


@dataclass(frozen=True)
class CartItem:
    """Snapshot of a product taken when it was added to the cart.

    ``unit_price`` is locked at add time: later catalog edits do not
    reprice lines that are already in the cart.
    """

    cart_item_id: str
    product: Product
    quantity: int
    unit_price: Money
    selected_option: VariantOption | None = None

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Cart:
    items: tuple[CartItem, ...] = ()

    # --- Reducers -------------------------------------------------------------

    def add(
        self,
        product: Product,
        quantity: int = 1,
        option: VariantOption | None = None,
    ) -> Cart:
        """Add *quantity* units, merging with an existing line if any.

        Without an explicit option, products with variants fall back to
        their first option.
        """
        qty = Quantity(quantity).value
        chosen = option if option is not None else product.default_option
        item_id = cart_item_id_for(product, chosen)

        if self.find(item_id) is not None:
            return Cart(tuple(
                replace(item, quantity=item.quantity + qty)
                if item.cart_item_id == item_id
                else item
                for item in self.items
            ))

        line = CartItem(
            cart_item_id=item_id,
            product=product,
            quantity=qty,
            unit_price=chosen.price if chosen is not None else product.price,
            selected_option=chosen,
        )
        return Cart(self.items + (line,))

    def update_quantity(self, cart_item_id: str, quantity: int) -> Cart:
        """Set a line's quantity in place; zero or less removes the line."""
        if quantity <= 0:
            return self.remove(cart_item_id)
        return Cart(tuple(
            replace(item, quantity=quantity) if item.cart_item_id == cart_item_id else item
            for item in self.items
        ))

    def remove(self, cart_item_id: str) -> Cart:
        return Cart(tuple(i for i in self.items if i.cart_item_id != cart_item_id))

    def clear(self) -> Cart:
        return Cart()

    # --- Queries --------------------------------------------------------------

    def find(self, cart_item_id: str) -> CartItem | None:
        for item in self.items:
            if item.cart_item_id == cart_item_id:
                return item
        return None

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
