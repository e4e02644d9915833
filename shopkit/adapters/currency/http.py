"""HTTP exchange rate adapter.

Implements ExchangeRatePort by querying a rates API of the
``GET /latest?base=USD&symbols=AUD`` -> ``{"rates": {"AUD": 1.5}}`` shape.
"""

import logging
from typing import Any

import httpx

from shopkit.core.ports import ExchangeRatePort

logger = logging.getLogger(__name__)


class HTTPExchangeRateAdapter(ExchangeRatePort):
    """Exchange rates served by a remote rates API."""

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the rates adapter.

        Args:
            api_url: Base URL for the rates API (e.g., https://api.frankfurter.app)
            api_key: Optional API key for authentication
            transport: Optional httpx transport, used to stub the API in tests.
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._get_headers(),
            timeout=10.0,
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        """Build request headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def __aenter__(self) -> "HTTPExchangeRateAdapter":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return the conversion rate for a currency pair."""
        from_currency = from_currency.upper()
        to_currency = to_currency.upper()
        if from_currency == to_currency:
            return 1.0

        try:
            response = await self.client.get(
                "/latest",
                params={"base": from_currency, "symbols": to_currency},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to fetch exchange rate {from_currency}->{to_currency}: {e}"
            )
            raise

        data = response.json()
        rates = data.get("rates", {}) if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise ValueError(f"Malformed exchange rate response: {data!r}")
        rate = rates.get(to_currency)
        if rate is None:
            raise ValueError(
                f"Unsupported currency pair: {from_currency}->{to_currency}"
            )

        logger.debug(
            f"Exchange rate {from_currency}->{to_currency}: {rate}",
            extra={"from_currency": from_currency, "to_currency": to_currency},
        )
        return float(rate)
