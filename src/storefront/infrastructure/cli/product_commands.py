"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.list_products import ListProductsHandler
from storefront.application.record_product_view import RecordProductViewHandler
from storefront.application.save_product import SaveProductHandler
from storefront.application.storefront import Storefront
from storefront.application.toggle_featured import ToggleFeaturedHandler
from storefront.domain.model.identity import millisecond_ids
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.catalog_service import NEW_RECORD_ID
from storefront.infrastructure.cli import session


def _print_table(rows: list[ProductDTO]) -> None:
    click.echo(f"{'ID':<15} {'Name':<30} {'Category':<10} {'Price':>12} {'Views':>6}  F")
    click.echo("-" * 80)
    for p in rows:
        price = f"From {p.price}" if p.from_price else p.price
        star = "*" if p.featured else ""
        click.echo(f"{p.id:<15} {p.name:<30} {p.category:<10} {price:>12} {p.views:>6}  {star}")


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the catalog."""

    async def action(shop: Storefront) -> list[ProductDTO]:
        return ListProductsHandler(shop.store).handle()

    rows = session.run(ctx, action)
    if not rows:
        click.echo("No products found.")
        return
    _print_table(rows)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Category, e.g. Seeds.")
@click.option("--tag", "tags", multiple=True, help="Tag; repeat for several.")
@click.option("--description", default="", help="Long description.")
@click.pass_context
def product_add(
    ctx: click.Context,
    name: str,
    price: str,
    category: str,
    tags: tuple[str, ...],
    description: str,
) -> None:
    """Add a new product to the catalog."""

    async def action(shop: Storefront) -> Product:
        draft = Product(
            id=NEW_RECORD_ID,
            name=name,
            category=category,
            price=Money.of(price),
            description=description,
            tags=list(tags),
        )
        handler = SaveProductHandler(shop.store, shop.notifications, millisecond_ids())
        return handler.handle(draft)

    product = session.run(ctx, action)
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: int) -> None:
    """Remove a product (and un-feature it)."""

    async def action(shop: Storefront) -> None:
        DeleteProductHandler(shop.store, shop.notifications).handle(product_id)

    session.run(ctx, action)
    click.echo(f"Product #{product_id} deleted")


@click.command("feature")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_feature(ctx: click.Context, product_id: int) -> None:
    """Toggle whether a product is featured on the home page."""

    async def action(shop: Storefront) -> bool:
        return ToggleFeaturedHandler(shop.store).handle(product_id)

    featured = session.run(ctx, action)
    state = "featured" if featured else "no longer featured"
    click.echo(f"Product #{product_id} is {state}")


@click.command("view")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_view(ctx: click.Context, product_id: int) -> None:
    """Record one detail-page visit for a product."""

    async def action(shop: Storefront) -> int:
        return RecordProductViewHandler(shop.store).handle(product_id)

    views = session.run(ctx, action)
    click.echo(f"Product #{product_id} now has {views} views")


@click.command("related")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--limit", default=4, show_default=True, type=int, help="Max results.")
@click.pass_context
def product_related(ctx: click.Context, product_id: int, limit: int) -> None:
    """Show the products recommended alongside a product."""

    async def action(shop: Storefront) -> list[ProductDTO]:
        return ListProductsHandler(shop.store).related(product_id, limit)

    rows = session.run(ctx, action)
    if not rows:
        click.echo("No related products.")
        return
    _print_table(rows)
