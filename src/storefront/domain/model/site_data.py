"""The site document: the single aggregate holding everything the
storefront renders and the admin editor changes.

Instances are replaced wholesale by the state container; treat them as
read-only and build new ones with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.model.product import Product

SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ThemeColors:
    primary: str = "#1E4631"
    secondary: str = "#F6AD55"
    accent: str = "#E53E3E"
    background: str = "#FBF5ED"
    text: str = "#1E4631"


@dataclass(frozen=True)
class Typography:
    heading_font: str = "Playfair Display"
    body_font: str = "Inter"


@dataclass(frozen=True)
class ThemeSettings:
    colors: ThemeColors = field(default_factory=ThemeColors)
    typography: Typography = field(default_factory=Typography)


@dataclass(frozen=True)
class NavLink:
    id: int
    text: str
    path: str


@dataclass(frozen=True)
class HeroSection:
    title: str = ""
    subtitle: str = ""
    button_text: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class BlogPost:
    id: int
    title: str
    author: str = ""
    date: str = ""
    image_url: str = ""
    content: str = ""
    video_url: str | None = None


@dataclass(frozen=True)
class Testimonial:
    id: int
    quote: str
    author: str = ""
    location: str = ""


@dataclass(frozen=True)
class AboutPage:
    title: str = ""
    story: str = ""
    mission: str = ""
    values: str = ""
    image_url: str | None = None


@dataclass(frozen=True)
class ContactPage:
    title: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    business_hours: str | None = None


@dataclass(frozen=True)
class PageContent:
    about: AboutPage = field(default_factory=AboutPage)
    contact: ContactPage = field(default_factory=ContactPage)


@dataclass(frozen=True)
class SocialLinks:
    facebook: str = ""
    instagram: str = ""
    twitter: str = ""


@dataclass(frozen=True)
class SiteData:
    theme: ThemeSettings = field(default_factory=ThemeSettings)
    logo_url: str = ""
    favicon_url: str = ""
    nav_links: list[NavLink] = field(default_factory=list)
    hero_section: HeroSection = field(default_factory=HeroSection)
    products: list[Product] = field(default_factory=list)
    featured_product_ids: list[int] = field(default_factory=list)
    blog_posts: list[BlogPost] = field(default_factory=list)
    testimonials: list[Testimonial] = field(default_factory=list)
    page_content: PageContent = field(default_factory=PageContent)
    social_links: SocialLinks = field(default_factory=SocialLinks)
    schema_version: int = SCHEMA_VERSION

    def find_product(self, product_id: int) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def featured_products(self) -> list[Product]:
        """Featured products in catalog order; unknown ids are skipped."""
        featured = set(self.featured_product_ids)
        return [p for p in self.products if p.id in featured]

    def normalized(self) -> SiteData:
        return replace(self, products=[p.normalized() for p in self.products])
