"""Domain models for the shopkit storefront.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coupon:
    """A redeemable coupon code with a fractional discount."""

    code: str
    discount: float  # fraction of the price, e.g. 0.2 for 20% off

    def __post_init__(self) -> None:
        """Validate coupon invariants on creation."""
        if not self.code or not self.code.strip():
            raise ValueError("code must be a non-empty string")
        if not 0 < self.discount < 1:
            raise ValueError(
                f"discount must be between 0 and 1 exclusive, got {self.discount}"
            )


@dataclass(frozen=True)
class ShippingQuote:
    """A carrier quote for shipping to a destination."""

    cost: float
    estimated_days: int

    def __post_init__(self) -> None:
        """Validate quote invariants on creation."""
        if self.cost < 0:
            raise ValueError(f"cost must be non-negative, got {self.cost}")
        if self.estimated_days < 0:
            raise ValueError(
                f"estimated_days must be non-negative, got {self.estimated_days}"
            )


@dataclass(frozen=True)
class CreditCard:
    """Payment card details passed through to the payment processor."""

    number: str

    def __post_init__(self) -> None:
        if not self.number or not self.number.strip():
            raise ValueError("number must be a non-empty string")


@dataclass(frozen=True)
class Order:
    """A customer order awaiting payment."""

    total_amount: float

    def __post_init__(self) -> None:
        if self.total_amount < 0:
            raise ValueError(
                f"total_amount must be non-negative, got {self.total_amount}"
            )


class ChargeStatus(Enum):
    """Outcome reported by the payment processor for a charge."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class PaymentResult:
    """Result of charging a card."""

    status: ChargeStatus


@dataclass(frozen=True)
class OrderResult:
    """Result of submitting an order.

    A failed order always carries an error code; a successful one never does.
    """

    success: bool
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that error presence matches the outcome."""
        if self.success and self.error is not None:
            raise ValueError("successful order result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("failed order result must carry an error")
