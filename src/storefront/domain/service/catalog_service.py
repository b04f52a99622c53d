"""Domain service: catalog and content edits made in the admin editor.

Every function is a pure transformation: it takes a document (or a
draft product) and returns a new one, so handlers can pass them
straight to the state container as updaters.

Records with ``id == 0`` are drafts that have never been saved; saving
one assigns a clock-derived id.
"""

from __future__ import annotations

from dataclasses import replace

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.identity import MonotonicIdGenerator
from storefront.domain.model.product import Product, ProductVariant, VariantOption
from storefront.domain.model.site_data import BlogPost, SiteData
from storefront.domain.model.value_objects import Money

NEW_RECORD_ID = 0
DEFAULT_VARIANT_NAME = "Size"


# --- Products -----------------------------------------------------------------


def upsert_product(
    site_data: SiteData,
    product: Product,
    ids: MonotonicIdGenerator,
) -> tuple[SiteData, Product]:
    """Insert a draft or replace an existing product.

    The product is validated and normalized first, so the variant price
    invariant holds for everything that reaches the document.
    """
    product.validate()
    to_save = product.normalized()

    if to_save.id == NEW_RECORD_ID:
        to_save = replace(to_save, id=ids.next_id())
        return replace(site_data, products=[*site_data.products, to_save]), to_save

    if site_data.find_product(to_save.id) is None:
        raise EntityNotFoundError(f"Product #{to_save.id} not found")
    products = [to_save if p.id == to_save.id else p for p in site_data.products]
    return replace(site_data, products=products), to_save


def delete_product(site_data: SiteData, product_id: int) -> SiteData:
    """Remove a product and drop it from the featured list."""
    return replace(
        site_data,
        products=[p for p in site_data.products if p.id != product_id],
        featured_product_ids=[i for i in site_data.featured_product_ids if i != product_id],
    )


def toggle_featured(site_data: SiteData, product_id: int) -> SiteData:
    featured = site_data.featured_product_ids
    if product_id in featured:
        featured = [i for i in featured if i != product_id]
    else:
        featured = [*featured, product_id]
    return replace(site_data, featured_product_ids=featured)


def record_view(site_data: SiteData, product_id: int) -> SiteData:
    """Increment the view counter of one product; unknown ids are ignored."""
    return replace(
        site_data,
        products=[
            p.with_view_recorded() if p.id == product_id else p
            for p in site_data.products
        ],
    )


# --- Variant editing on a draft product ---------------------------------------


def _blank_option(ids: MonotonicIdGenerator) -> VariantOption:
    return VariantOption(id=f"new_{ids.next_id()}", value="", price=Money.zero())


def add_variant(
    product: Product,
    ids: MonotonicIdGenerator,
    name: str = DEFAULT_VARIANT_NAME,
) -> Product:
    """Give a product a variant with a single blank option."""
    if product.variant is not None:
        raise ValidationError(f"'{product.name}' already has a variant")
    return replace(product, variant=ProductVariant(name=name, options=[_blank_option(ids)]))


def add_variant_option(product: Product, ids: MonotonicIdGenerator) -> Product:
    if product.variant is None:
        raise ValidationError(f"'{product.name}' has no variant")
    options = [*product.variant.options, _blank_option(ids)]
    return replace(product, variant=replace(product.variant, options=options))


def update_variant_option(
    product: Product,
    option_id: str,
    value: str | None = None,
    price: Money | None = None,
) -> Product:
    if product.variant is None or product.variant.find_option(option_id) is None:
        raise EntityNotFoundError(f"Variant option '{option_id}' not found")
    options = []
    for option in product.variant.options:
        if option.id == option_id:
            option = replace(
                option,
                value=option.value if value is None else value,
                price=option.price if price is None else price,
            )
        options.append(option)
    return replace(product, variant=replace(product.variant, options=options))


def remove_variant_option(product: Product, option_id: str) -> Product:
    """Drop one option; removing the last one removes the variant itself."""
    if product.variant is None:
        return product
    options = [o for o in product.variant.options if o.id != option_id]
    if not options:
        return replace(product, variant=None)
    return replace(product, variant=replace(product.variant, options=options))


# --- Blog posts ---------------------------------------------------------------


def upsert_blog_post(
    site_data: SiteData,
    post: BlogPost,
    ids: MonotonicIdGenerator,
) -> tuple[SiteData, BlogPost]:
    if not post.title or not post.title.strip():
        raise ValidationError("Post title is required.")

    if post.id == NEW_RECORD_ID:
        post = replace(post, id=ids.next_id())
        return replace(site_data, blog_posts=[*site_data.blog_posts, post]), post

    if not any(p.id == post.id for p in site_data.blog_posts):
        raise EntityNotFoundError(f"Blog post #{post.id} not found")
    posts = [post if p.id == post.id else p for p in site_data.blog_posts]
    return replace(site_data, blog_posts=posts), post


def delete_blog_post(site_data: SiteData, post_id: int) -> SiteData:
    return replace(site_data, blog_posts=[p for p in site_data.blog_posts if p.id != post_id])
