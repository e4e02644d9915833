"""CLI command implementations for the shopkit storefront.

Provides customer-facing actions through a command-line interface.

This adapter maps CLI commands (price, shipping, order, signup, login,
online, render) to StorefrontPort operations. It handles CLI-specific
formatting and error reporting.
"""

import logging
from typing import Any

from shopkit.core.models import CreditCard, Order
from shopkit.core.ports import StorefrontPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to StorefrontPort.

    Every method returns a result dictionary with a "status" of
    "success" or "error"; invalid input never escapes as an exception.
    """

    def __init__(self, storefront: StorefrontPort):
        """Initialize the CLI command handler.

        Args:
            storefront: StorefrontPort implementation to execute commands.
        """
        self.storefront = storefront

    async def get_price(self, price: float, currency: str) -> dict[str, Any]:
        """Convert a price into another currency via CLI.

        Args:
            price: Price in the store's base currency.
            currency: Target currency code.

        Returns:
            Dictionary with status and converted price.
        """
        try:
            converted = await self.storefront.get_price_in_currency(price, currency)
            return {
                "status": "success",
                "operation": "price",
                "currency": currency,
                "price": converted,
            }
        except ValueError as e:
            logger.error(f"Failed to convert price: {e}")
            return {
                "status": "error",
                "operation": "price",
                "message": str(e),
            }

    async def get_shipping(self, destination: str) -> dict[str, Any]:
        """Describe shipping to a destination via CLI."""
        try:
            info = await self.storefront.get_shipping_info(destination)
            return {
                "status": "success",
                "operation": "shipping",
                "destination": destination,
                "message": info,
            }
        except ValueError as e:
            logger.error(f"Failed to get shipping info: {e}")
            return {
                "status": "error",
                "operation": "shipping",
                "message": str(e),
            }

    async def submit_order(
        self, total_amount: float, card_number: str
    ) -> dict[str, Any]:
        """Submit an order via CLI.

        Args:
            total_amount: Order total in the store's base currency.
            card_number: Card to charge.

        Returns:
            Dictionary with status and, on a declined payment, the error code.
        """
        try:
            result = await self.storefront.submit_order(
                Order(total_amount=total_amount), CreditCard(number=card_number)
            )
        except ValueError as e:
            logger.error(f"Failed to submit order: {e}")
            return {
                "status": "error",
                "operation": "order",
                "message": str(e),
            }

        if not result.success:
            return {
                "status": "error",
                "operation": "order",
                "message": result.error,
            }

        return {
            "status": "success",
            "operation": "order",
            "message": f"Charged {total_amount:.2f}",
        }

    async def sign_up(self, email: str) -> dict[str, Any]:
        """Register a customer via CLI."""
        if await self.storefront.sign_up(email):
            return {
                "status": "success",
                "operation": "signup",
                "message": f"Welcome email sent to {email}",
            }
        return {
            "status": "error",
            "operation": "signup",
            "message": f"Invalid email: {email}",
        }

    async def login(self, email: str) -> dict[str, Any]:
        """Send a one-time login code via CLI."""
        await self.storefront.login(email)
        return {
            "status": "success",
            "operation": "login",
            "message": f"Login code sent to {email}",
        }

    async def render(self) -> dict[str, Any]:
        """Render the home page via CLI."""
        return {
            "status": "success",
            "operation": "render",
            "data": await self.storefront.render_page(),
        }

    def online(self) -> dict[str, Any]:
        """Report whether customer support is currently online."""
        return {
            "status": "success",
            "operation": "online",
            "online": self.storefront.is_online(),
        }


def _require(args: dict[str, Any], *names: str) -> None:
    missing = [name for name in names if name not in args]
    if missing:
        raise ValueError(f"Missing required parameter: {', '.join(missing)}")


async def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler to dispatch to.
        command: Command name ('price', 'shipping', 'order', 'signup',
            'login', 'render', 'online').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """
    if command == "price":
        _require(args, "price", "currency")
        return await handler.get_price(float(args["price"]), args["currency"])

    elif command == "shipping":
        _require(args, "destination")
        return await handler.get_shipping(args["destination"])

    elif command == "order":
        _require(args, "total_amount", "card_number")
        return await handler.submit_order(
            float(args["total_amount"]), str(args["card_number"])
        )

    elif command == "signup":
        _require(args, "email")
        return await handler.sign_up(args["email"])

    elif command == "login":
        _require(args, "email")
        return await handler.login(args["email"])

    elif command == "render":
        return await handler.render()

    elif command == "online":
        return handler.online()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
