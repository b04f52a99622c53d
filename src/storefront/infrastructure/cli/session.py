"""Runs one CLI command against a started Storefront.

Each command boots the store, performs its action inside the event
loop, then flushes any pending save before the process exits.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from storefront.application.storefront import Storefront
from storefront.domain.exceptions import DomainException
from storefront.domain.model.notification import Notification, NotificationKind
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import StorefrontConfig

T = TypeVar("T")


def run(ctx: click.Context, action: Callable[[Storefront], Awaitable[T]]) -> T:
    config: StorefrontConfig = ctx.obj["config"]

    async def main() -> T:
        shop = bootstrap.storefront(config)
        unsubscribe = shop.notifications.subscribe(_echo_error)
        await shop.start()
        try:
            return await action(shop)
        finally:
            await shop.close()
            unsubscribe()

    try:
        return asyncio.run(main())
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _echo_error(notification: Notification | None) -> None:
    if notification is not None and notification.kind is NotificationKind.ERROR:
        click.echo(f"! {notification.message}", err=True)
