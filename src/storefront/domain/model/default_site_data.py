"""Built-in document used when neither store holds any site data."""

from __future__ import annotations

from storefront.domain.model.product import Product, ProductVariant, VariantOption
from storefront.domain.model.site_data import (
    AboutPage,
    BlogPost,
    ContactPage,
    HeroSection,
    NavLink,
    PageContent,
    SiteData,
    SocialLinks,
    Testimonial,
    ThemeSettings,
)
from storefront.domain.model.value_objects import Money


def _sizes(*options: tuple[str, str]) -> ProductVariant:
    return ProductVariant(
        name="Size",
        options=[VariantOption(id=v, value=v, price=Money.of(p)) for v, p in options],
    )


def _products() -> list[Product]:
    return [
        Product(
            id=1,
            name="Healthy Mix Seeds",
            category="Seeds",
            price=Money.of("12.99"),
            description=(
                "A nutritious blend of pumpkin, sunflower, flax, and chia seeds. "
                "Perfect for a healthy snack or topping for salads and yogurt."
            ),
            image_url="https://i.ibb.co/P9L03fQ/healthy-mix-seeds.png",
            tags=["snack", "organic", "protein", "mix"],
            views=120,
            variant=_sizes(("250g", "12.99"), ("500g", "22.99")),
        ),
        Product(
            id=2,
            name="Healthy Flax Seeds",
            category="Seeds",
            price=Money.of("8.49"),
            description=(
                "Packed with omega-3 fatty acids and fiber, these organic flax seeds "
                "are a great addition to smoothies, oatmeal, and baked goods."
            ),
            image_url="https://i.ibb.co/yqgdb3D/healthy-flax-seeds.png",
            tags=["omega-3", "fiber", "baking", "smoothie"],
            views=85,
            variant=_sizes(("200g", "8.49"), ("400g", "15.49")),
        ),
        Product(
            id=4,
            name="Healthy Curry Leaves Powder",
            category="Spices",
            price=Money.of("5.99"),
            description="Aromatic and flavorful powder made from fresh curry leaves.",
            image_url="https://i.ibb.co/28d4dF6/healthy-curry-leaves-powder.png",
            tags=["indian", "aromatic", "cooking", "powder"],
            views=45,
        ),
        Product(
            id=5,
            name="Healthy White Sesame Seeds",
            category="Seeds",
            price=Money.of("15.00"),
            description="Organic white sesame seeds, perfect for baking or as a topping.",
            image_url="https://i.ibb.co/GcFm2sc/healthy-white-sesame-seeds.png",
            tags=["baking", "cooking", "calcium", "topping"],
            views=60,
        ),
        Product(
            id=6,
            name="Healthy Moringa Powder",
            category="Spices",
            price=Money.of("6.50"),
            description="Nutrient-dense powder from naturally dried moringa leaves.",
            image_url="https://i.ibb.co/MggtP1B/healthy-moringa-powder.png",
            tags=["superfood", "green", "smoothie", "detox"],
            views=95,
        ),
        Product(
            id=7,
            name="Healthy Pumpkin Seeds",
            category="Seeds",
            price=Money.of("9.99"),
            description="Raw and unsalted pumpkin seeds, perfect for snacking.",
            image_url="https://i.ibb.co/xJSRvM8/healthy-pumpkin-seeds.png",
            tags=["snack", "raw", "unsalted", "protein"],
            views=110,
        ),
        Product(
            id=8,
            name="Healthy Chia Seeds",
            category="Seeds",
            price=Money.of("11.50"),
            description="Organic chia seeds packed with omega-3, fiber, and protein.",
            image_url="https://i.ibb.co/yWnZnXB/healthy-chia-seeds.png",
            tags=["omega-3", "superfood", "pudding", "hydration"],
            views=150,
        ),
        Product(
            id=9,
            name="Healthy Garlic Powder",
            category="Spices",
            price=Money.of("4.99"),
            description="Pure, granulated garlic powder to add a savory kick to any meal.",
            image_url="https://i.ibb.co/LQr0j1d/healthy-garlic-powder.png",
            tags=["flavor", "seasoning", "cooking", "savory"],
            views=75,
        ),
    ]


def default_site_data() -> SiteData:
    """Return a fresh copy of the starter catalog and page content."""
    return SiteData(
        theme=ThemeSettings(),
        nav_links=[
            NavLink(id=1, text="Home", path="home"),
            NavLink(id=2, text="Products", path="products"),
            NavLink(id=3, text="About", path="about"),
            NavLink(id=4, text="Blog", path="blog"),
            NavLink(id=5, text="Contact", path="contact"),
        ],
        hero_section=HeroSection(
            title="Taste the Goodness of Nature",
            subtitle=(
                "From our farm to your table, experience the freshest organic "
                "products, bursting with flavor and nutrients."
            ),
            button_text="Explore Our Harvest",
            image_url="https://picsum.photos/seed/hero2/1920/1080",
        ),
        products=[p.normalized() for p in _products()],
        featured_product_ids=[1, 2, 4, 5],
        blog_posts=[
            BlogPost(
                id=1,
                title="The Top 5 Health Benefits of Seeds",
                author="Jane Doe",
                date="October 26, 2023",
                image_url="https://picsum.photos/seed/b1/1200/800",
                content="Seeds are nutritional powerhouses.",
            ),
            BlogPost(
                id=2,
                title="A Guide to Healthy Snacking",
                author="John Smith",
                date="October 15, 2023",
                image_url="https://picsum.photos/seed/b2/1200/800",
                content="Snacking doesn't have to be unhealthy.",
            ),
        ],
        testimonials=[
            Testimonial(
                id=1,
                quote="The best organic snacks I've ever had!",
                author="Emily R.",
                location="New York, NY",
            ),
            Testimonial(
                id=2,
                quote="I can't start my day without it!",
                author="Michael B.",
                location="Austin, TX",
            ),
        ],
        page_content=PageContent(
            about=AboutPage(
                title="Our Story: From a Small Kitchen to Your Table",
                story="Nature's Knack was born from a simple idea: healthy food should be delicious.",
                mission="Provide high-quality, minimally processed foods.",
                values="Quality, Transparency, Sustainability, and Community.",
                image_url="https://picsum.photos/seed/nature/1200/800",
            ),
            contact=ContactPage(
                title="Get In Touch",
                address="123 Organic Lane, Healthville, USA 90210",
                phone="1-800-NATURES",
                email="hello@naturesknack.com",
                business_hours="Mon - Fri: 9:00 AM - 6:00 PM",
            ),
        ),
        social_links=SocialLinks(
            facebook="https://facebook.com",
            instagram="https://instagram.com",
            twitter="https://twitter.com",
        ),
    )
