"""Unit tests for CLI command handling.

Tests verify that CLI commands correctly:
- Delegate to the storefront with parsed arguments
- Return success/error result dictionaries
- Reject unknown commands and missing arguments
"""

from datetime import datetime

import pytest

from shopkit.adapters.cli.commands import CLICommandHandler, run_command
from shopkit.adapters.currency.static import StaticExchangeRateAdapter
from shopkit.core.models import ChargeStatus, CreditCard, ShippingQuote
from shopkit.core.storefront import StorefrontService
from shopkit.tests.fakes import (
    FakeAnalyticsPort,
    FakeClock,
    FakeEmailPort,
    FakePaymentPort,
    FakeSecurityCodePort,
    FakeShippingPort,
)

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def payment() -> FakePaymentPort:
    return FakePaymentPort()


@pytest.fixture
def email() -> FakeEmailPort:
    return FakeEmailPort()


@pytest.fixture
def shipping() -> FakeShippingPort:
    return FakeShippingPort(quote=ShippingQuote(cost=10, estimated_days=2))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 9, 10, 9, 0))


@pytest.fixture
def handler(
    payment: FakePaymentPort,
    email: FakeEmailPort,
    shipping: FakeShippingPort,
    clock: FakeClock,
) -> CLICommandHandler:
    storefront = StorefrontService(
        exchange_rates=StaticExchangeRateAdapter(rates={"AUD": 1.5}),
        shipping=shipping,
        analytics=FakeAnalyticsPort(),
        payment=payment,
        email=email,
        security=FakeSecurityCodePort(codes=[654321]),
        clock=clock,
    )
    return CLICommandHandler(storefront)


# ============================================================================
# Command Tests
# ============================================================================


class TestPriceCommand:
    @pytest.mark.asyncio
    async def test_converts_price(self, handler: CLICommandHandler) -> None:
        result = await run_command(handler, "price", {"price": "10", "currency": "AUD"})

        assert result["status"] == "success"
        assert result["price"] == pytest.approx(15)

    @pytest.mark.asyncio
    async def test_unknown_currency_is_an_error_result(
        self, handler: CLICommandHandler
    ) -> None:
        result = await run_command(handler, "price", {"price": 10, "currency": "JPY"})

        assert result["status"] == "error"
        assert "JPY" in result["message"]


class TestShippingCommand:
    @pytest.mark.asyncio
    async def test_reports_quote(self, handler: CLICommandHandler) -> None:
        result = await run_command(handler, "shipping", {"destination": "London"})

        assert result["status"] == "success"
        assert result["message"] == "Shipping Cost: $10 (2 Days)"

    @pytest.mark.asyncio
    async def test_reports_unavailable(
        self, handler: CLICommandHandler, shipping: FakeShippingPort
    ) -> None:
        shipping.set_quote(None)

        result = await run_command(handler, "shipping", {"destination": "Atlantis"})

        assert result["message"] == "Shipping Unavailable"


class TestOrderCommand:
    @pytest.mark.asyncio
    async def test_charges_card(
        self, handler: CLICommandHandler, payment: FakePaymentPort
    ) -> None:
        result = await run_command(
            handler, "order", {"total_amount": 25.5, "card_number": 4242}
        )

        assert result["status"] == "success"
        assert payment.get_last_charge() == (CreditCard(number="4242"), 25.5)

    @pytest.mark.asyncio
    async def test_declined_payment(
        self, handler: CLICommandHandler, payment: FakePaymentPort
    ) -> None:
        payment.set_status(ChargeStatus.FAILED)

        result = await run_command(
            handler, "order", {"total_amount": 10, "card_number": "1234"}
        )

        assert result == {
            "status": "error",
            "operation": "order",
            "message": "payment_error",
        }

    @pytest.mark.asyncio
    async def test_negative_total_is_an_error_result(
        self, handler: CLICommandHandler, payment: FakePaymentPort
    ) -> None:
        result = await run_command(
            handler, "order", {"total_amount": -1, "card_number": "1234"}
        )

        assert result["status"] == "error"
        assert payment.charges == []


class TestAccountCommands:
    @pytest.mark.asyncio
    async def test_signup_sends_welcome(
        self, handler: CLICommandHandler, email: FakeEmailPort
    ) -> None:
        result = await run_command(handler, "signup", {"email": "name@gmail.com"})

        assert result["status"] == "success"
        assert email.get_last_email() == ("name@gmail.com", "Welcome aboard!")

    @pytest.mark.asyncio
    async def test_signup_with_invalid_email(
        self, handler: CLICommandHandler, email: FakeEmailPort
    ) -> None:
        result = await run_command(handler, "signup", {"email": "nope"})

        assert result["status"] == "error"
        assert email.sent == []

    @pytest.mark.asyncio
    async def test_login_sends_code(
        self, handler: CLICommandHandler, email: FakeEmailPort
    ) -> None:
        result = await run_command(handler, "login", {"email": "name@gmail.com"})

        assert result["status"] == "success"
        assert email.get_last_email() == ("name@gmail.com", "654321")


class TestPageAndHoursCommands:
    @pytest.mark.asyncio
    async def test_render(self, handler: CLICommandHandler) -> None:
        result = await run_command(handler, "render", {})

        assert result["data"] == "<div>content</div>"

    @pytest.mark.asyncio
    async def test_online(self, handler: CLICommandHandler, clock: FakeClock) -> None:
        assert (await run_command(handler, "online", {}))["online"] is True

        clock.set(datetime(2024, 9, 10, 21, 0))

        assert (await run_command(handler, "online", {}))["online"] is False


class TestDispatch:
    @pytest.mark.asyncio
    async def test_unknown_command_raises(self, handler: CLICommandHandler) -> None:
        with pytest.raises(ValueError, match="Unknown command"):
            await run_command(handler, "refund", {})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "command, args, missing",
        [
            ("price", {"price": 1}, "currency"),
            ("shipping", {}, "destination"),
            ("order", {"total_amount": 1}, "card_number"),
            ("signup", {}, "email"),
            ("login", {}, "email"),
        ],
    )
    async def test_missing_parameter_raises(
        self, handler: CLICommandHandler, command: str, args: dict, missing: str
    ) -> None:
        with pytest.raises(ValueError, match=f"Missing required parameter: {missing}"):
            await run_command(handler, command, args)
