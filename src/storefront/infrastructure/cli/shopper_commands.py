"""CLI commands for shopper-side state: wishlist, cookie consent, checkout."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CustomerDetails, PaymentResult
from storefront.application.storefront import Storefront
from storefront.domain.exceptions import EntityNotFoundError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli import session


@click.command("toggle")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def wishlist_toggle(ctx: click.Context, product_id: int) -> None:
    """Add a product to the wishlist, or remove it if already there."""

    async def action(shop: Storefront) -> bool:
        shop.toggle_wishlist(product_id)
        return product_id in shop.get_wishlist()

    saved = session.run(ctx, action)
    click.echo(f"Product #{product_id} {'added to' if saved else 'removed from'} wishlist")


@click.command("show")
@click.pass_context
def wishlist_show(ctx: click.Context) -> None:
    """List the products on the wishlist."""

    async def action(shop: Storefront) -> list[tuple[int, str]]:
        site = shop.get_site_data()
        rows = []
        for product_id in shop.get_wishlist():
            product = site.find_product(product_id)
            rows.append((product_id, product.name if product else "(removed)"))
        return rows

    rows = session.run(ctx, action)
    if not rows:
        click.echo("Your wishlist is empty.")
        return
    for product_id, name in rows:
        click.echo(f"{product_id:<15} {name}")


@click.command("consent")
@click.argument("answer", type=click.Choice(["accept", "decline", "show"]))
@click.pass_context
def consent(ctx: click.Context, answer: str) -> None:
    """Record or show the cookie-consent answer."""

    async def action(shop: Storefront) -> bool | None:
        if answer == "accept":
            shop.consent.accept()
        elif answer == "decline":
            shop.consent.decline()
        return shop.consent.status()

    status = session.run(ctx, action)
    labels = {True: "accepted", False: "declined", None: "not answered"}
    click.echo(f"Cookie consent: {labels[status]}")


@click.command("checkout")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", default=1, show_default=True, type=int, help="Quantity.")
@click.option("--option", "option_id", default=None, help="Variant option id, e.g. 500g.")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--address", required=True)
@click.option("--method", type=click.Choice(["card", "paypal"]), default="card", show_default=True)
@click.option("--card-number", default=None)
@click.pass_context
def checkout(
    ctx: click.Context,
    product_id: int,
    qty: int,
    option_id: str | None,
    first_name: str,
    last_name: str,
    address: str,
    method: str,
    card_number: str | None,
) -> None:
    """Buy a single product through the mock payment gateway."""
    config = ctx.obj["config"]

    async def action(shop: Storefront) -> tuple[str, PaymentResult]:
        product = shop.get_site_data().find_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        option = None
        if option_id is not None:
            option = product.variant.find_option(option_id) if product.variant else None
            if option is None:
                raise EntityNotFoundError(f"Option '{option_id}' not found on #{product_id}")
        shop.add_to_cart(product, qty, option)
        total = str(shop.cart.cart.subtotal)

        handler = CheckoutHandler(shop.cart, bootstrap.payment_gateway(config), shop.notifications)
        result = await handler.handle(CustomerDetails(
            first_name=first_name,
            last_name=last_name,
            address=address,
            method=method,
            card_number=card_number,
        ))
        return total, result

    total, result = session.run(ctx, action)
    if result.success:
        click.echo(f"Paid {total}. Thank you for your order!")
    else:
        raise click.ClickException(result.message or "Payment failed.")
