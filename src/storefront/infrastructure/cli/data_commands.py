"""CLI commands for the stored site document."""

from __future__ import annotations

import click

from storefront.application.storefront import Storefront
from storefront.infrastructure.cli import session


@click.command("show")
@click.pass_context
def data_show(ctx: click.Context) -> None:
    """Summarize the current site document."""

    async def action(shop: Storefront) -> tuple[str, dict[str, int]]:
        site = shop.get_site_data()
        counts = {
            "products": len(site.products),
            "featured": len(site.featured_products()),
            "blog posts": len(site.blog_posts),
            "testimonials": len(site.testimonials),
        }
        return shop.store.load_source or "", counts

    source, counts = session.run(ctx, action)
    click.echo(f"Loaded from: {source}")
    for label, count in counts.items():
        click.echo(f"  {label:<14} {count:>5}")


@click.command("migrate")
@click.pass_context
def data_migrate(ctx: click.Context) -> None:
    """Load the site document, migrating the legacy copy if needed."""

    async def action(shop: Storefront) -> str:
        return shop.store.load_source or ""

    source = session.run(ctx, action)
    if source == "legacy":
        click.echo("Migrated legacy site data into the durable store.")
    elif source == "durable":
        click.echo("Durable store already holds site data; nothing to migrate.")
    else:
        click.echo("No stored site data found; using the built-in defaults.")
