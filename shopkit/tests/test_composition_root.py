"""Integration tests for the composition root.

These tests verify that configuration loads and validates, that the
bootstrap helpers select the configured adapters, and that main() maps
failures to exit codes.
"""

import logging
import os
from unittest.mock import AsyncMock, patch

import pytest

from shopkit.adapters.currency.http import HTTPExchangeRateAdapter
from shopkit.adapters.currency.static import StaticExchangeRateAdapter
from shopkit.adapters.payment.http import HTTPPaymentAdapter
from shopkit.adapters.shipping.flat_rate import FlatRateShippingAdapter
from shopkit.adapters.shipping.http import HTTPShippingAdapter
from shopkit.config import Settings, load_settings
from shopkit.core.storefront import StorefrontService
from shopkit.main import (
    _close_adapters,
    build_exchange_rates,
    build_shipping,
    build_storefront,
    configure_logging,
    main,
)


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.exchange_rate_backend == "static"
        assert settings.shipping_backend == "flat_rate"
        assert settings.base_currency == "USD"
        assert settings.opening_hour == 8
        assert settings.closing_hour == 20
        assert settings.log_level == "INFO"

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "EXCHANGE_RATE_BACKEND": "http",
                "BASE_CURRENCY": "eur",
                "STATIC_EXCHANGE_RATES": '{"USD": 1.09}',
                "OPENING_HOUR": "9",
                "LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.exchange_rate_backend == "http"
            assert settings.base_currency == "EUR"
            assert settings.static_exchange_rates == {"USD": 1.09}
            assert settings.opening_hour == 9
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path) -> None:
        env_file = tmp_path / "test.env"
        env_file.write_text("SHIPPING_BACKEND=http\nFLAT_RATE_SHIPPING_DAYS=5\n")

        settings = load_settings(str(env_file))

        assert settings.shipping_backend == "http"
        assert settings.flat_rate_shipping_days == 5

    @pytest.mark.parametrize(
        "env",
        [
            {"BASE_CURRENCY": "DOLLARS"},
            {"STATIC_EXCHANGE_RATES": '{"AUD": 0}'},
            {"FLAT_RATE_SHIPPING_COST": "-1"},
            {"FLAT_RATE_SHIPPING_DAYS": "-1"},
            {"SECURITY_CODE_DIGITS": "3"},
            {"OPENING_HOUR": "25"},
            {"OPENING_HOUR": "20", "CLOSING_HOUR": "8"},
            {"EXCHANGE_RATE_BACKEND": "carrier-pigeon"},
        ],
    )
    def test_load_settings_rejects_invalid_values(self, env: dict[str, str]) -> None:
        with patch.dict(os.environ, env):
            with pytest.raises(Exception):  # ValidationError
                load_settings()


class TestAdapterSelection:
    """Test that adapters are selected and configured from settings."""

    def test_static_exchange_rates_by_default(self) -> None:
        adapter = build_exchange_rates(Settings())

        assert isinstance(adapter, StaticExchangeRateAdapter)
        assert adapter.base_currency == "USD"

    @pytest.mark.asyncio
    async def test_http_exchange_rates(self) -> None:
        settings = Settings(
            exchange_rate_backend="http",
            exchange_rate_api_url="https://rates.example/",
            exchange_rate_api_key="k",
        )

        adapter = build_exchange_rates(settings)

        assert isinstance(adapter, HTTPExchangeRateAdapter)
        assert adapter.api_url == "https://rates.example"
        assert adapter.api_key == "k"
        await adapter.close()

    def test_flat_rate_shipping_by_default(self) -> None:
        adapter = build_shipping(Settings(flat_rate_shipping_cost=7.5))

        assert isinstance(adapter, FlatRateShippingAdapter)
        assert adapter.quote.cost == 7.5

    @pytest.mark.asyncio
    async def test_http_shipping(self) -> None:
        adapter = build_shipping(
            Settings(shipping_backend="http", shipping_api_url="https://carrier.example")
        )

        assert isinstance(adapter, HTTPShippingAdapter)
        await adapter.close()

    @pytest.mark.asyncio
    async def test_build_storefront_wires_settings(self) -> None:
        settings = Settings(
            base_currency="GBP",
            opening_hour=9,
            closing_hour=17,
            payment_api_key="sk",
            security_code_digits=8,
        )

        storefront = build_storefront(settings)

        assert isinstance(storefront, StorefrontService)
        assert storefront.base_currency == "GBP"
        assert (storefront.opening_hour, storefront.closing_hour) == (9, 17)
        assert isinstance(storefront.payment, HTTPPaymentAdapter)
        assert storefront.payment.api_key == "sk"
        assert storefront.security.digits == 8
        await _close_adapters(storefront)

    @pytest.mark.asyncio
    async def test_close_adapters_closes_network_clients(self) -> None:
        storefront = build_storefront(Settings(exchange_rate_backend="http"))
        storefront.exchange_rates.close = AsyncMock()
        storefront.payment.close = AsyncMock()

        await _close_adapters(storefront)

        storefront.exchange_rates.close.assert_awaited_once()
        storefront.payment.close.assert_awaited_once()


class TestLogging:
    def test_configure_logging_sets_level(self) -> None:
        with patch("shopkit.main.logging.basicConfig") as basic_config:
            configure_logging("WARNING", "json")

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert kwargs["format"].startswith('{"time"')

    def test_configure_logging_falls_back_to_info(self) -> None:
        with patch("shopkit.main.logging.basicConfig") as basic_config:
            configure_logging("NOT_A_LEVEL", "text")

        assert basic_config.call_args.kwargs["level"] == logging.INFO


class TestMain:
    def test_keyboard_interrupt_exits_130(self) -> None:
        with patch("shopkit.main.bootstrap", new=AsyncMock(side_effect=KeyboardInterrupt)):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 130

    def test_fatal_error_exits_1(self) -> None:
        with patch("shopkit.main.bootstrap", new=AsyncMock(side_effect=RuntimeError("boom"))):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
