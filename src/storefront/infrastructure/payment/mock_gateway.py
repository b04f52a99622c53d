"""Stand-in payment collaborator with canned outcomes.

Waits a fixed delay, then:
- declines the all-zeros card number,
- times out one PayPal payment in ten,
- accepts everything else.
"""

from __future__ import annotations

import asyncio
import logging
import random

from storefront.application.checkout import PaymentGateway
from storefront.application.dto import PaymentRequest, PaymentResult

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 2.0
DECLINED_CARD_NUMBER = "0000000000000000"
PAYPAL_FAILURE_RATE = 0.1


class MockPaymentGateway(PaymentGateway):

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        rng: random.Random | None = None,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._rng = rng or random.Random()

    async def pay(self, request: PaymentRequest) -> PaymentResult:
        logger.info(
            "Sending %s payment of %s %s", request.method, request.amount, request.currency
        )
        await asyncio.sleep(self._delay_seconds)

        card = (request.card_number or "").replace(" ", "")
        if request.method == "card" and card == DECLINED_CARD_NUMBER:
            return PaymentResult(success=False, message="Card declined: Invalid card number.")
        if request.method == "paypal" and self._rng.random() > 1 - PAYPAL_FAILURE_RATE:
            return PaymentResult(success=False, message="PayPal connection timed out.")
        return PaymentResult(success=True)
