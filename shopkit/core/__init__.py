"""Core domain logic for the shopkit storefront.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    ChargeStatus,
    Coupon,
    CreditCard,
    Order,
    OrderResult,
    PaymentResult,
    ShippingQuote,
)
from .stack import EmptyStackError, Stack

__all__ = [
    "ChargeStatus",
    "Coupon",
    "CreditCard",
    "EmptyStackError",
    "Order",
    "OrderResult",
    "PaymentResult",
    "ShippingQuote",
    "Stack",
]
