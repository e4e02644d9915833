"""HTTP shipping adapter.

Implements ShippingPort by asking a carrier API for a quote:
``GET /quotes?destination=London`` -> ``{"cost": 10, "estimated_days": 2}``.
A 404 means the carrier does not ship to that destination.
"""

import logging
from typing import Any

import httpx

from shopkit.core.models import ShippingQuote
from shopkit.core.ports import ShippingPort

logger = logging.getLogger(__name__)


class HTTPShippingAdapter(ShippingPort):
    """Carrier-backed shipping quotes via REST API."""

    def __init__(
        self,
        api_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the carrier adapter.

        Args:
            api_url: Base URL for the carrier API.
            transport: Optional httpx transport, used to stub the API in tests.
        """
        self.api_url = api_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            timeout=10.0,
            transport=transport,
        )

    async def __aenter__(self) -> "HTTPShippingAdapter":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        try:
            response = await self.client.get(
                "/quotes", params={"destination": destination}
            )
            if response.status_code == 404:
                logger.info(f"Carrier does not ship to {destination}")
                return None
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch shipping quote for {destination}: {e}")
            raise

        data = response.json()
        try:
            return ShippingQuote(
                cost=float(data["cost"]),
                estimated_days=int(data["estimated_days"]),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed shipping quote: {data!r}") from e
