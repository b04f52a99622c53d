"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.cart_service import CartService
from storefront.application.consent_service import ConsentService
from storefront.application.notification_channel import NotificationChannel
from storefront.application.site_store import SiteStore
from storefront.application.storefront import Storefront
from storefront.application.wishlist_service import WishlistService
from storefront.infrastructure.config import StorefrontConfig
from storefront.infrastructure.payment.mock_gateway import MockPaymentGateway
from storefront.infrastructure.persistence import document_codec
from storefront.infrastructure.persistence.json_key_value_store import JsonKeyValueStore
from storefront.infrastructure.persistence.sqlite_site_data_repository import (
    SqliteSiteDataRepository,
)


def durable_repository(config: StorefrontConfig) -> SqliteSiteDataRepository:
    return SqliteSiteDataRepository(config.durable_db_path, config.durable_quota_bytes)


def legacy_store(config: StorefrontConfig) -> JsonKeyValueStore:
    return JsonKeyValueStore(config.legacy_store_path, config.legacy_quota_bytes)


def payment_gateway(config: StorefrontConfig) -> MockPaymentGateway:
    return MockPaymentGateway(delay_seconds=config.payment_delay_seconds)


def storefront(config: StorefrontConfig) -> Storefront:
    """Build a Storefront; call ``await start()`` on it before use."""
    notifications = NotificationChannel()
    legacy = legacy_store(config)
    store = SiteStore(
        durable=durable_repository(config),
        legacy=legacy,
        notifications=notifications,
        legacy_decoder=document_codec.loads,
        debounce_seconds=config.debounce_seconds,
    )
    return Storefront(
        store=store,
        cart=CartService(notifications),
        wishlist=WishlistService(legacy),
        consent=ConsentService(legacy),
        notifications=notifications,
    )
