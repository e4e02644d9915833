"""Composition root for the shopkit storefront.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys

from shopkit.adapters.analytics.log import LoggingAnalyticsAdapter
from shopkit.adapters.cli.commands import CLICommandHandler, run_command
from shopkit.adapters.clock.system import SystemClock
from shopkit.adapters.currency.http import HTTPExchangeRateAdapter
from shopkit.adapters.currency.static import StaticExchangeRateAdapter
from shopkit.adapters.email.stdout import StdoutEmailAdapter
from shopkit.adapters.payment.http import HTTPPaymentAdapter
from shopkit.adapters.security.random_code import RandomSecurityCodeAdapter
from shopkit.adapters.shipping.flat_rate import FlatRateShippingAdapter
from shopkit.adapters.shipping.http import HTTPShippingAdapter
from shopkit.config import Settings, load_settings
from shopkit.core.ports import ExchangeRatePort, ShippingPort
from shopkit.core.storefront import StorefrontService


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for storefront commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(None, input, "shopkit> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = await run_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  price
    Convert a price into another currency.
    Required: price, currency

    Example: price {"price": 10, "currency": "AUD"}

  shipping
    Get the shipping cost and delivery estimate for a destination.
    Required: destination

    Example: shipping {"destination": "London"}

  order
    Charge a card for an order.
    Required: total_amount, card_number

    Example: order {"total_amount": 25.5, "card_number": "4242424242424242"}

  signup
    Register a customer and send a welcome email.
    Required: email

    Example: signup {"email": "name@example.com"}

  login
    Email a one-time login code.
    Required: email

    Example: login {"email": "name@example.com"}

  render
    Render the home page.

  online
    Check whether customer support is within opening hours.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_exchange_rates(settings: Settings) -> ExchangeRatePort:
    """Select the exchange rate adapter named in settings."""
    if settings.exchange_rate_backend == "http":
        return HTTPExchangeRateAdapter(
            api_url=settings.exchange_rate_api_url,
            api_key=settings.exchange_rate_api_key,
        )
    return StaticExchangeRateAdapter(
        rates=settings.static_exchange_rates,
        base_currency=settings.base_currency,
    )


def build_shipping(settings: Settings) -> ShippingPort:
    """Select the shipping adapter named in settings."""
    if settings.shipping_backend == "http":
        return HTTPShippingAdapter(api_url=settings.shipping_api_url)
    return FlatRateShippingAdapter(
        cost=settings.flat_rate_shipping_cost,
        estimated_days=settings.flat_rate_shipping_days,
    )


def build_storefront(settings: Settings) -> StorefrontService:
    """Instantiate adapters and wire them into the storefront service."""
    logger = logging.getLogger(__name__)

    exchange_rates = build_exchange_rates(settings)
    logger.info(f"Exchange rate adapter: {settings.exchange_rate_backend}")

    shipping = build_shipping(settings)
    logger.info(f"Shipping adapter: {settings.shipping_backend}")

    payment = HTTPPaymentAdapter(
        api_url=settings.payment_api_url,
        api_key=settings.payment_api_key,
    )
    if not settings.payment_api_key:
        logger.warning("PAYMENT_API_KEY not set; charges will be rejected by the processor")

    return StorefrontService(
        exchange_rates=exchange_rates,
        shipping=shipping,
        analytics=LoggingAnalyticsAdapter(),
        payment=payment,
        email=StdoutEmailAdapter(),
        security=RandomSecurityCodeAdapter(digits=settings.security_code_digits),
        clock=SystemClock(),
        base_currency=settings.base_currency,
        opening_hour=settings.opening_hour,
        closing_hour=settings.closing_hour,
    )


async def _close_adapters(storefront: StorefrontService) -> None:
    """Close adapters that hold network clients."""
    for adapter in (storefront.exchange_rates, storefront.shipping, storefront.payment):
        close = getattr(adapter, "close", None)
        if close is not None:
            await close()


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    This is the composition root: the single place where all components
    are instantiated and wired together.
    """
    settings = load_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading shopkit storefront...")

    storefront = build_storefront(settings)

    try:
        await _run_cli_interactive(CLICommandHandler(storefront))
    finally:
        await _close_adapters(storefront)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
