"""Port interfaces for the shopkit storefront.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ExchangeRatePort: Currency conversion rates
   - ShippingPort: Carrier shipping quotes
   - AnalyticsPort: Page view tracking
   - PaymentPort: Card charges
   - EmailPort: Outgoing customer email
   - SecurityCodePort: One-time login codes
   - ClockPort: Current wall-clock time

2. **Driving Ports** (adapters/external systems call into core)
   - StorefrontPort: Customer-facing storefront operations
"""

from abc import ABC, abstractmethod
from datetime import datetime

from .models import (
    CreditCard,
    Order,
    OrderResult,
    PaymentResult,
    ShippingQuote,
)


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ExchangeRatePort(ABC):
    """Port for looking up currency exchange rates.

    Adapters may serve rates from a static table or a remote rates API.
    """

    @abstractmethod
    async def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return how many units of to_currency one unit of from_currency buys.

        Args:
            from_currency: ISO 4217 code of the source currency (e.g. "USD").
            to_currency: ISO 4217 code of the target currency (e.g. "AUD").

        Returns:
            Positive conversion rate.

        Raises:
            ValueError: If the currency pair is not supported.
            Exception: If the rate provider is unreachable.
        """


class ShippingPort(ABC):
    """Port for obtaining shipping quotes from a carrier."""

    @abstractmethod
    async def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Quote shipping to a destination.

        Args:
            destination: Free-form destination name (city or country).

        Returns:
            ShippingQuote, or None if the carrier cannot ship there.

        Raises:
            Exception: If the carrier is unreachable.
        """


class AnalyticsPort(ABC):
    """Port for recording customer activity."""

    @abstractmethod
    async def track_page_view(self, path: str) -> None:
        """Record that a page was viewed.

        Args:
            path: Site-relative path of the page (e.g. "/home").
        """


class PaymentPort(ABC):
    """Port for charging customers.

    Implementations must not retry a charge on their own.
    """

    @abstractmethod
    async def charge(self, card: CreditCard, amount: float) -> PaymentResult:
        """Charge an amount to a card.

        Args:
            card: Card to charge.
            amount: Amount in the store's base currency.

        Returns:
            PaymentResult with SUCCESS or FAILED status. A declined card is
            a FAILED result, not an exception.

        Raises:
            Exception: If the payment processor is unreachable.
        """


class EmailPort(ABC):
    """Port for sending email to customers."""

    @abstractmethod
    async def send_email(self, to: str, message: str) -> None:
        """Send a message to an email address.

        Raises:
            Exception: If the mail channel is unavailable.
        """


class SecurityCodePort(ABC):
    """Port for generating one-time security codes."""

    @abstractmethod
    def generate_code(self) -> int:
        """Return a fresh, unpredictable numeric code."""


class ClockPort(ABC):
    """Port for reading the current time.

    Injected so that time-dependent rules can be tested against a fixed clock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class StorefrontPort(ABC):
    """Port for customer-facing storefront operations.

    Driving port: the CLI invokes these methods on behalf of a customer.
    Implementations live in the core (storefront.py).
    """

    @abstractmethod
    async def get_price_in_currency(self, price: float, currency: str) -> float:
        """Convert a base-currency price into another currency."""

    @abstractmethod
    async def get_shipping_info(self, destination: str) -> str:
        """Describe the shipping cost and delay to a destination.

        Returns:
            Human-readable summary, or "Shipping Unavailable".
        """

    @abstractmethod
    async def render_page(self) -> str:
        """Render the home page, recording the page view."""

    @abstractmethod
    async def submit_order(self, order: Order, card: CreditCard) -> OrderResult:
        """Charge the card for the order total.

        Returns:
            OrderResult with success True, or success False and
            error "payment_error" if the charge failed.
        """

    @abstractmethod
    async def sign_up(self, email: str) -> bool:
        """Register a customer and send a welcome email.

        Returns:
            False without sending anything if the email is invalid.
        """

    @abstractmethod
    async def login(self, email: str) -> None:
        """Email a one-time login code to the customer."""

    @abstractmethod
    def is_online(self) -> bool:
        """Is customer support currently within opening hours?"""
