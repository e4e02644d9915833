"""Static exchange rate adapter.

Implements ExchangeRatePort from a fixed table of rates against the
store's base currency. Useful offline and in demos.
"""

import logging
from collections.abc import Mapping

from shopkit.core.ports import ExchangeRatePort

logger = logging.getLogger(__name__)


class StaticExchangeRateAdapter(ExchangeRatePort):
    """Serves rates from an in-process table."""

    def __init__(self, rates: Mapping[str, float], base_currency: str = "USD"):
        """Initialize with a rate table.

        Args:
            rates: Units of each currency bought by one unit of base_currency.
            base_currency: Currency the table is quoted against.
        """
        self.base_currency = base_currency.upper()
        self.rates = {code.upper(): float(rate) for code, rate in rates.items()}
        for code, rate in self.rates.items():
            if rate <= 0:
                raise ValueError(f"Rate for {code} must be positive, got {rate}")

    async def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        from_currency = from_currency.upper()
        to_currency = to_currency.upper()
        if from_currency == to_currency:
            return 1.0

        from_rate = self._rate_against_base(from_currency)
        to_rate = self._rate_against_base(to_currency)
        return to_rate / from_rate

    def _rate_against_base(self, currency: str) -> float:
        if currency == self.base_currency:
            return 1.0
        rate = self.rates.get(currency)
        if rate is None:
            logger.warning(f"No static rate configured for {currency}")
            raise ValueError(f"Unsupported currency: {currency}")
        return rate
