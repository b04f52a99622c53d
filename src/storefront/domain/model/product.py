"""Product aggregate.

Products live inside the site document. Prices change, variants are
added and removed in the admin editor, and the view counter ticks up
every time a shopper opens the detail page.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class VariantOption:
    """One purchasable choice of a variant, e.g. the "250g" size."""

    id: str
    value: str
    price: Money


@dataclass
class ProductVariant:
    name: str
    options: list[VariantOption] = field(default_factory=list)

    def find_option(self, option_id: str) -> VariantOption | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


@dataclass
class Product:
    """A product in the catalog.

    When ``variant`` is set, ``price`` is derived from the option prices
    and is only kept on the product as the "From $x" display price. Use
    ``normalized()`` to bring a freshly edited product back in line.
    """

    id: int
    name: str
    category: str
    price: Money
    description: str = ""
    image_url: str = ""
    images: list[str] = field(default_factory=list)
    video_url: str | None = None
    variant: ProductVariant | None = None
    tags: list[str] = field(default_factory=list)
    views: int = 0

    @property
    def has_variants(self) -> bool:
        return self.variant is not None and len(self.variant.options) > 0

    @property
    def default_option(self) -> VariantOption | None:
        if self.has_variants:
            return self.variant.options[0]  # type: ignore[union-attr]
        return None

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required.")

    def normalized(self) -> Product:
        """Return a copy that satisfies the price and image invariants.

        - A variant with no options is dropped.
        - With options, ``price`` is the lowest positive option price,
          or zero when none is positive.
        - ``image_url`` mirrors the first gallery image; a product with
          only ``image_url`` gets a one-image gallery.
        """
        variant = self.variant
        price = self.price
        if variant is not None and variant.options:
            positive = [o.price for o in variant.options if not o.price.is_zero]
            price = min(positive) if positive else Money.zero(price.currency)
            variant = ProductVariant(name=variant.name, options=list(variant.options))
        else:
            variant = None

        images = [img for img in self.images if img]
        image_url = self.image_url
        if images:
            image_url = images[0]
        elif image_url:
            images = [image_url]

        return replace(
            self,
            price=price,
            variant=variant,
            images=images,
            image_url=image_url,
            tags=list(self.tags),
        )

    def with_view_recorded(self) -> Product:
        return replace(self, views=self.views + 1)
