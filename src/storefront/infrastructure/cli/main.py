from __future__ import annotations

from pathlib import Path

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.data_commands import data_migrate, data_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_feature,
    product_list,
    product_related,
    product_view,
)
from storefront.infrastructure.cli.shopper_commands import (
    checkout,
    consent,
    wishlist_show,
    wishlist_toggle,
)
from storefront.infrastructure.config import load_config
from storefront.infrastructure.log import setup_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where the durable and legacy stores live.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Storefront — catalog, cart and site data engine"""
    try:
        config = load_config(
            data_dir=data_dir,
            log_level="DEBUG" if verbose else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    setup_logging(level=config.log_level.upper(), log_dir=config.log_dir)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.group()
def data() -> None:
    """Inspect and migrate the stored site document."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def wishlist() -> None:
    """Manage the wishlist."""


# Register subcommands
data.add_command(data_show)
data.add_command(data_migrate)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_feature)
product.add_command(product_list)
product.add_command(product_related)
product.add_command(product_view)
wishlist.add_command(wishlist_show)
wishlist.add_command(wishlist_toggle)
cli.add_command(consent)
cli.add_command(checkout)
