"""Serialization of the site document to and from JSON text.

The on-disk shape keeps the camelCase keys of the legacy browser
format, so the same decoder reads both the durable record and the
legacy blob. Decoding never trusts the stored shape: missing optional
fields fall back to the dataclass defaults, and anything structurally
wrong raises ``ValueError``.

Schema versions:
    0  legacy blob without a ``schemaVersion`` key
    1  current layout; prices are written as decimal strings
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductVariant, VariantOption
from storefront.domain.model.site_data import (
    SCHEMA_VERSION,
    AboutPage,
    BlogPost,
    ContactPage,
    HeroSection,
    NavLink,
    PageContent,
    SiteData,
    SocialLinks,
    Testimonial,
    ThemeColors,
    ThemeSettings,
    Typography,
)
from storefront.domain.model.value_objects import Money


# --- Public API ---------------------------------------------------------------


def dumps(site_data: SiteData) -> str:
    return json.dumps(encode(site_data), ensure_ascii=False, separators=(",", ":"))


def loads(text: str) -> SiteData:
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ValueError(f"Site data is not valid JSON: {exc}") from exc
    return decode(raw)


def encode(site_data: SiteData) -> dict[str, Any]:
    theme = site_data.theme
    about = site_data.page_content.about
    contact = site_data.page_content.contact
    return {
        "schemaVersion": SCHEMA_VERSION,
        "theme": {
            "colors": {
                "primary": theme.colors.primary,
                "secondary": theme.colors.secondary,
                "accent": theme.colors.accent,
                "background": theme.colors.background,
                "text": theme.colors.text,
            },
            "typography": {
                "headingFont": theme.typography.heading_font,
                "bodyFont": theme.typography.body_font,
            },
        },
        "logoUrl": site_data.logo_url,
        "faviconUrl": site_data.favicon_url,
        "navLinks": [
            {"id": link.id, "text": link.text, "path": link.path}
            for link in site_data.nav_links
        ],
        "heroSection": {
            "title": site_data.hero_section.title,
            "subtitle": site_data.hero_section.subtitle,
            "buttonText": site_data.hero_section.button_text,
            "imageUrl": site_data.hero_section.image_url,
        },
        "products": [_encode_product(p) for p in site_data.products],
        "featuredProductIds": list(site_data.featured_product_ids),
        "blogPosts": [_encode_post(p) for p in site_data.blog_posts],
        "testimonials": [
            {"id": t.id, "quote": t.quote, "author": t.author, "location": t.location}
            for t in site_data.testimonials
        ],
        "pageContent": {
            "about": _drop_none({
                "title": about.title,
                "story": about.story,
                "mission": about.mission,
                "values": about.values,
                "imageUrl": about.image_url,
            }),
            "contact": _drop_none({
                "title": contact.title,
                "address": contact.address,
                "phone": contact.phone,
                "email": contact.email,
                "businessHours": contact.business_hours,
            }),
        },
        "socialLinks": {
            "facebook": site_data.social_links.facebook,
            "instagram": site_data.social_links.instagram,
            "twitter": site_data.social_links.twitter,
        },
    }


def decode(raw: Any) -> SiteData:
    """Build a SiteData from parsed JSON, filling defaults for gaps."""
    try:
        return _decode(raw)
    except (KeyError, TypeError, AttributeError, OverflowError, ValidationError) as exc:
        raise ValueError(f"Malformed site data: {exc}") from exc


# --- Decoding -----------------------------------------------------------------


def _decode(raw: Any) -> SiteData:
    if not isinstance(raw, dict):
        raise ValueError("Site data must be a JSON object")
    version = raw.get("schemaVersion", 0)
    if not isinstance(version, int) or version > SCHEMA_VERSION:
        raise ValueError(f"Unsupported site data schema version: {version!r}")

    defaults = SiteData()
    theme = raw.get("theme") or {}
    colors = theme.get("colors") or {}
    typography = theme.get("typography") or {}
    hero = raw.get("heroSection") or {}
    pages = raw.get("pageContent") or {}
    about = pages.get("about") or {}
    contact = pages.get("contact") or {}
    social = raw.get("socialLinks") or {}

    return SiteData(
        theme=ThemeSettings(
            colors=_fill(ThemeColors, {
                "primary": colors.get("primary"),
                "secondary": colors.get("secondary"),
                "accent": colors.get("accent"),
                "background": colors.get("background"),
                "text": colors.get("text"),
            }),
            typography=_fill(Typography, {
                "heading_font": typography.get("headingFont"),
                "body_font": typography.get("bodyFont"),
            }),
        ),
        logo_url=raw.get("logoUrl") or defaults.logo_url,
        favicon_url=raw.get("faviconUrl") or defaults.favicon_url,
        nav_links=[
            NavLink(id=int(link["id"]), text=link.get("text", ""), path=link.get("path", ""))
            for link in raw.get("navLinks") or []
        ],
        hero_section=_fill(HeroSection, {
            "title": hero.get("title"),
            "subtitle": hero.get("subtitle"),
            "button_text": hero.get("buttonText"),
            "image_url": hero.get("imageUrl"),
        }),
        products=[_decode_product(p) for p in raw.get("products") or []],
        featured_product_ids=[int(i) for i in raw.get("featuredProductIds") or []],
        blog_posts=[_decode_post(p) for p in raw.get("blogPosts") or []],
        testimonials=[
            _fill(Testimonial, {
                "id": int(t["id"]),
                "quote": t.get("quote", ""),
                "author": t.get("author"),
                "location": t.get("location"),
            })
            for t in raw.get("testimonials") or []
        ],
        page_content=PageContent(
            about=_fill(AboutPage, {
                "title": about.get("title"),
                "story": about.get("story"),
                "mission": about.get("mission"),
                "values": about.get("values"),
                "image_url": about.get("imageUrl"),
            }),
            contact=_fill(ContactPage, {
                "title": contact.get("title"),
                "address": contact.get("address"),
                "phone": contact.get("phone"),
                "email": contact.get("email"),
                "business_hours": contact.get("businessHours"),
            }),
        ),
        social_links=_fill(SocialLinks, {
            "facebook": social.get("facebook"),
            "instagram": social.get("instagram"),
            "twitter": social.get("twitter"),
        }),
        schema_version=SCHEMA_VERSION,
    )


def _decode_product(raw: dict[str, Any]) -> Product:
    variant = None
    raw_variant = raw.get("variant")
    if raw_variant:
        variant = ProductVariant(
            name=raw_variant.get("name", ""),
            options=[
                VariantOption(
                    id=str(o["id"]),
                    value=str(o.get("value", "")),
                    price=_money(o.get("price", 0)),
                )
                for o in raw_variant.get("options") or []
            ],
        )
    return Product(
        id=int(raw["id"]),
        name=raw.get("name", ""),
        category=raw.get("category", ""),
        price=_money(raw.get("price", 0)),
        description=raw.get("description") or "",
        image_url=raw.get("imageUrl") or "",
        images=list(raw.get("images") or []),
        video_url=raw.get("videoUrl"),
        variant=variant,
        tags=list(raw.get("tags") or []),
        views=int(raw.get("views") or 0),
    )


def _decode_post(raw: dict[str, Any]) -> BlogPost:
    return _fill(BlogPost, {
        "id": int(raw["id"]),
        "title": raw.get("title", ""),
        "author": raw.get("author"),
        "date": raw.get("date"),
        "image_url": raw.get("imageUrl"),
        "content": raw.get("content"),
        "video_url": raw.get("videoUrl"),
    })


def _money(value: Any) -> Money:
    if isinstance(value, (int, float, str, Decimal)):
        return Money.of(value)
    raise ValueError(f"Invalid price: {value!r}")


def _fill(cls, values: dict[str, Any]):
    """Instantiate *cls*, letting its defaults cover absent values."""
    return cls(**{k: v for k, v in values.items() if v is not None})


# --- Encoding -----------------------------------------------------------------


def _encode_product(product: Product) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": product.id,
        "name": product.name,
        "category": product.category,
        "price": str(product.price.amount),
        "description": product.description,
        "imageUrl": product.image_url,
        "images": list(product.images),
        "tags": list(product.tags),
        "views": product.views,
    }
    if product.video_url is not None:
        data["videoUrl"] = product.video_url
    if product.variant is not None:
        data["variant"] = {
            "name": product.variant.name,
            "options": [
                {"id": o.id, "value": o.value, "price": str(o.price.amount)}
                for o in product.variant.options
            ],
        }
    return data


def _encode_post(post: BlogPost) -> dict[str, Any]:
    return _drop_none({
        "id": post.id,
        "title": post.title,
        "author": post.author,
        "date": post.date,
        "imageUrl": post.image_url,
        "content": post.content,
        "videoUrl": post.video_url,
    })


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}
