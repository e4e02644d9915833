"""HTTP payment adapter.

Implements PaymentPort by posting charges to a payment processor:
``POST /charges {"card_number": ..., "amount": ...}`` -> ``{"status": "success"}``.
"""

import logging
from typing import Any

import httpx

from shopkit.core.models import ChargeStatus, CreditCard, PaymentResult
from shopkit.core.ports import PaymentPort

logger = logging.getLogger(__name__)


class HTTPPaymentAdapter(PaymentPort):
    """Charges cards through a payment processor's REST API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the payment adapter.

        Args:
            api_url: Base URL for the payment processor API.
            api_key: Secret key for the processor.
            transport: Optional httpx transport, used to stub the API in tests.
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client.

        Returns:
            httpx.AsyncClient configured with processor authentication.
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=30.0,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def charge(self, card: CreditCard, amount: float) -> PaymentResult:
        """Charge a card. Declines come back as FAILED, not as exceptions."""
        try:
            client = await self._get_client()
            response = await client.post(
                "/charges",
                json={"card_number": card.number, "amount": amount},
            )
        except httpx.RequestError as e:
            logger.error(f"Failed to reach payment processor: {e}")
            raise

        if response.status_code in (402, 422):
            logger.warning(
                f"Charge declined: {response.status_code}",
                extra={"amount": amount, "response": response.text},
            )
            return PaymentResult(status=ChargeStatus.FAILED)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Payment processor error: {e}")
            raise

        data: Any = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Malformed charge response: {data!r}")
        try:
            status = ChargeStatus(data.get("status"))
        except ValueError as e:
            raise ValueError(f"Unexpected charge status: {data!r}") from e

        logger.info(f"Charge {status.value}", extra={"amount": amount})
        return PaymentResult(status=status)
