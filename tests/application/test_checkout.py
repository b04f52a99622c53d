"""Integration tests for the Checkout use case."""

import asyncio
from decimal import Decimal

import pytest

from storefront.application.cart_service import CartService
from storefront.application.checkout import (
    GATEWAY_ERROR_MESSAGE,
    PAYMENT_FAILED_MESSAGE,
    PAYMENT_SUCCESS_MESSAGE,
    CheckoutHandler,
)
from storefront.application.dto import CustomerDetails, PaymentResult
from storefront.application.notification_channel import NotificationChannel
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.notification import NotificationKind
from tests.fakes import FakePaymentGateway, make_product

CUSTOMER = CustomerDetails(
    first_name="Asha",
    last_name="Rao",
    address="12 Market Road",
    method="card",
    card_number="4242424242424242",
)


def _setup(gateway: FakePaymentGateway) -> tuple[CheckoutHandler, CartService, NotificationChannel]:
    notifications = NotificationChannel()
    cart = CartService(notifications)
    return CheckoutHandler(cart, gateway, notifications), cart, notifications


class TestCheckout:

    def test_success_charges_subtotal_and_clears_cart(self):
        gateway = FakePaymentGateway()
        handler, cart, notifications = _setup(gateway)
        cart.add(make_product(id=1, price="8.49"), quantity=2)
        cart.add(make_product(id=2, price="3.00"))

        result = asyncio.run(handler.handle(CUSTOMER))

        assert result.success
        assert gateway.requests[0].amount == Decimal("19.98")
        assert gateway.requests[0].card_number == CUSTOMER.card_number
        assert cart.cart.is_empty
        assert notifications.current.message == PAYMENT_SUCCESS_MESSAGE

    def test_declined_payment_keeps_cart(self):
        gateway = FakePaymentGateway(PaymentResult(success=False, message="Card declined"))
        handler, cart, notifications = _setup(gateway)
        cart.add(make_product())

        result = asyncio.run(handler.handle(CUSTOMER))

        assert not result.success
        assert not cart.cart.is_empty
        assert notifications.current.kind is NotificationKind.ERROR
        assert notifications.current.message == "Card declined"

    def test_failure_without_message_uses_generic_text(self):
        handler, cart, notifications = _setup(FakePaymentGateway(PaymentResult(success=False)))
        cart.add(make_product())
        asyncio.run(handler.handle(CUSTOMER))
        assert notifications.current.message == PAYMENT_FAILED_MESSAGE

    def test_gateway_exception_is_reported(self):
        handler, cart, notifications = _setup(FakePaymentGateway(error=ConnectionError("down")))
        cart.add(make_product())

        result = asyncio.run(handler.handle(CUSTOMER))

        assert result == PaymentResult(success=False, message=GATEWAY_ERROR_MESSAGE)
        assert not cart.cart.is_empty

    def test_empty_cart_rejected(self):
        gateway = FakePaymentGateway()
        handler, _, _ = _setup(gateway)
        with pytest.raises(ValidationError, match="empty"):
            asyncio.run(handler.handle(CUSTOMER))
        assert gateway.requests == []
