"""Storefront service: implements StorefrontPort for customer operations.

This is a core service that orchestrates pricing, shipping, checkout,
sign-up and login by calling out to the driven ports. It never talks to
external systems directly and never swallows port failures.
"""

import logging
import re

from .models import ChargeStatus, CreditCard, Order, OrderResult
from .ports import (
    AnalyticsPort,
    ClockPort,
    EmailPort,
    ExchangeRatePort,
    PaymentPort,
    SecurityCodePort,
    ShippingPort,
    StorefrontPort,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

WELCOME_MESSAGE = "Welcome aboard!"
HOME_PAGE_PATH = "/home"
SHIPPING_UNAVAILABLE = "Shipping Unavailable"
PAYMENT_ERROR = "payment_error"


def is_valid_email(email: str) -> bool:
    """Loose syntactic check: something@something.something, no spaces."""
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


def format_amount(amount: float) -> str:
    """Render an amount without a trailing ".0" for whole numbers."""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


class StorefrontService(StorefrontPort):
    """Core implementation of StorefrontPort.

    Coordinates the exchange rate, shipping, analytics, payment, email,
    security code and clock ports.
    """

    def __init__(
        self,
        exchange_rates: ExchangeRatePort,
        shipping: ShippingPort,
        analytics: AnalyticsPort,
        payment: PaymentPort,
        email: EmailPort,
        security: SecurityCodePort,
        clock: ClockPort,
        base_currency: str = "USD",
        opening_hour: int = 8,
        closing_hour: int = 20,
    ):
        """Initialize the storefront service.

        Args:
            exchange_rates: ExchangeRatePort implementation for conversions.
            shipping: ShippingPort implementation for carrier quotes.
            analytics: AnalyticsPort implementation for page views.
            payment: PaymentPort implementation for card charges.
            email: EmailPort implementation for customer email.
            security: SecurityCodePort implementation for login codes.
            clock: ClockPort implementation for opening hours.
            base_currency: Currency prices are stored in.
            opening_hour: First hour (inclusive) support is online.
            closing_hour: Hour (exclusive) support goes offline.
        """
        if not 0 <= opening_hour < closing_hour <= 24:
            raise ValueError(
                f"Invalid opening hours: {opening_hour} to {closing_hour}"
            )
        self.exchange_rates = exchange_rates
        self.shipping = shipping
        self.analytics = analytics
        self.payment = payment
        self.email = email
        self.security = security
        self.clock = clock
        self.base_currency = base_currency
        self.opening_hour = opening_hour
        self.closing_hour = closing_hour

    async def get_price_in_currency(self, price: float, currency: str) -> float:
        try:
            rate = await self.exchange_rates.get_exchange_rate(
                self.base_currency, currency
            )
        except Exception as e:
            logger.error(
                f"Exchange rate lookup failed: {e}",
                extra={"from_currency": self.base_currency, "to_currency": currency},
            )
            raise
        return price * rate

    async def get_shipping_info(self, destination: str) -> str:
        try:
            quote = await self.shipping.get_shipping_quote(destination)
        except Exception as e:
            logger.error(
                f"Shipping quote failed: {e}", extra={"destination": destination}
            )
            raise

        if quote is None:
            logger.info(f"No shipping quote for {destination}")
            return SHIPPING_UNAVAILABLE
        return (
            f"Shipping Cost: ${format_amount(quote.cost)} "
            f"({quote.estimated_days} Days)"
        )

    async def render_page(self) -> str:
        try:
            await self.analytics.track_page_view(HOME_PAGE_PATH)
        except Exception as e:
            logger.error(f"Page view tracking failed: {e}")
            raise
        return "<div>content</div>"

    async def submit_order(self, order: Order, card: CreditCard) -> OrderResult:
        """Charge the card for the order total.

        Raises:
            Exception: If the payment processor is unreachable. A declined
                charge is reported through the result instead.
        """
        try:
            payment_result = await self.payment.charge(card, order.total_amount)
        except Exception as e:
            logger.error(
                f"Payment processor error: {e}",
                extra={"amount": order.total_amount},
            )
            raise

        if payment_result.status == ChargeStatus.FAILED:
            logger.warning(
                "Payment declined",
                extra={"amount": order.total_amount},
            )
            return OrderResult(success=False, error=PAYMENT_ERROR)

        logger.info("Order submitted", extra={"amount": order.total_amount})
        return OrderResult(success=True)

    async def sign_up(self, email: str) -> bool:
        if not is_valid_email(email):
            logger.info(f"Rejected sign-up with invalid email: {email!r}")
            return False

        await self._send(email, WELCOME_MESSAGE)
        logger.info("Customer signed up", extra={"email": email})
        return True

    async def login(self, email: str) -> None:
        code = self.security.generate_code()
        await self._send(email, str(code))
        logger.info("Login code sent", extra={"email": email})

    async def _send(self, to: str, message: str) -> None:
        try:
            await self.email.send_email(to, message)
        except Exception as e:
            logger.error(f"Failed to send email: {e}", extra={"email": to})
            raise

    def is_online(self) -> bool:
        hour = self.clock.now().hour
        return self.opening_hour <= hour < self.closing_hour
