"""Application service: Checkout use case.

Payment itself is an external collaborator behind ``PaymentGateway``;
this handler only assembles the request from the cart, reports the
outcome and empties the cart on success.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from storefront.application.cart_service import CartService
from storefront.application.dto import CustomerDetails, PaymentRequest, PaymentResult
from storefront.application.notification_channel import NotificationChannel
from storefront.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

PAYMENT_SUCCESS_MESSAGE = "Payment successful!"
PAYMENT_FAILED_MESSAGE = "Payment failed. Please try again."
GATEWAY_ERROR_MESSAGE = "Network error connecting to payment gateway."


class PaymentGateway(ABC):

    @abstractmethod
    async def pay(self, request: PaymentRequest) -> PaymentResult:
        """Charge the customer; never raises for a declined payment."""


class CheckoutHandler:

    def __init__(
        self,
        cart: CartService,
        gateway: PaymentGateway,
        notifications: NotificationChannel,
    ) -> None:
        self._cart = cart
        self._gateway = gateway
        self._notifications = notifications

    async def handle(self, customer: CustomerDetails) -> PaymentResult:
        cart = self._cart.cart
        if cart.is_empty:
            raise ValidationError("Your cart is empty")

        request = PaymentRequest(
            first_name=customer.first_name,
            last_name=customer.last_name,
            address=customer.address,
            method=customer.method,
            amount=cart.subtotal.amount,
            currency=cart.subtotal.currency,
            card_number=customer.card_number,
            expiry=customer.expiry,
            cvc=customer.cvc,
        )

        try:
            result = await self._gateway.pay(request)
        except Exception:
            logger.exception("Payment gateway call failed")
            self._notifications.error(GATEWAY_ERROR_MESSAGE)
            return PaymentResult(success=False, message=GATEWAY_ERROR_MESSAGE)

        if result.success:
            self._cart.clear()
            self._notifications.show(PAYMENT_SUCCESS_MESSAGE)
        else:
            self._notifications.error(result.message or PAYMENT_FAILED_MESSAGE)
        return result
