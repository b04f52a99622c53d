"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / payment collaborator and the
application layer without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog row as displayed to the user."""

    id: int
    name: str
    category: str
    price: str  # formatted, e.g. "$15.00"
    from_price: bool  # True when the price is the cheapest of several options
    views: int
    featured: bool


@dataclass(frozen=True)
class CustomerDetails:
    """Input: what the shopper typed into the checkout form."""

    first_name: str
    last_name: str
    address: str
    method: str  # "card" | "paypal"
    card_number: str | None = None
    expiry: str | None = None
    cvc: str | None = None


@dataclass(frozen=True)
class PaymentRequest:
    """Payload handed to the payment collaborator."""

    first_name: str
    last_name: str
    address: str
    method: str
    amount: Decimal
    currency: str = "USD"
    card_number: str | None = None
    expiry: str | None = None
    cvc: str | None = None


@dataclass(frozen=True)
class PaymentResult:
    success: bool
    message: str | None = None
