"""Unit tests for the Product aggregate's invariants."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import ProductVariant
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


class TestNormalizedPrice:

    def test_price_is_cheapest_option(self):
        p = make_product(price="99", options=[("500g", "22.99"), ("250g", "12.99")])
        assert p.normalized().price == Money.of("12.99")

    def test_zero_priced_options_are_ignored(self):
        p = make_product(options=[("sample", "0"), ("250g", "12.99")])
        assert p.normalized().price == Money.of("12.99")

    def test_all_zero_options_give_zero_price(self):
        p = make_product(price="8.49", options=[("a", "0"), ("b", "0")])
        assert p.normalized().price.is_zero

    def test_empty_variant_is_removed(self):
        p = make_product(price="8.49")
        p.variant = ProductVariant(name="Size", options=[])
        normalized = p.normalized()
        assert normalized.variant is None
        assert normalized.price == Money.of("8.49")

    def test_without_variant_price_is_untouched(self):
        assert make_product(price="4.99").normalized().price == Money.of("4.99")

    def test_original_is_not_mutated(self):
        p = make_product(price="99", options=[("250g", "12.99")])
        p.normalized()
        assert p.price == Money.of("99")


class TestNormalizedImages:

    def test_image_url_follows_first_gallery_image(self):
        p = make_product()
        p.images = ["a.webp", "b.webp"]
        p.image_url = "old.png"
        assert p.normalized().image_url == "a.webp"

    def test_lone_image_url_becomes_gallery(self):
        p = make_product()
        p.image_url = "only.png"
        assert p.normalized().images == ["only.png"]

    def test_blank_gallery_entries_are_dropped(self):
        p = make_product()
        p.images = ["", "b.webp"]
        assert p.normalized().images == ["b.webp"]


class TestProductBehaviour:

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            make_product(name="   ").validate()

    def test_default_option_is_first(self):
        p = make_product(options=[("250g", "12.99"), ("500g", "22.99")])
        assert p.default_option.id == "250g"

    def test_no_default_option_without_variant(self):
        assert make_product().default_option is None

    def test_with_view_recorded_increments_copy(self):
        p = make_product(views=10)
        viewed = p.with_view_recorded()
        assert viewed.views == 11
        assert p.views == 10
