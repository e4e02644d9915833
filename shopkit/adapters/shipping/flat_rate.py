"""Flat-rate shipping adapter.

Implements ShippingPort with one price and delay for every destination,
except those explicitly marked unserviceable.
"""

from collections.abc import Iterable

from shopkit.core.models import ShippingQuote
from shopkit.core.ports import ShippingPort


class FlatRateShippingAdapter(ShippingPort):
    """Quotes the same cost and delay everywhere it ships."""

    def __init__(
        self,
        cost: float,
        estimated_days: int,
        unserviceable: Iterable[str] = (),
    ):
        self.quote = ShippingQuote(cost=cost, estimated_days=estimated_days)
        self.unserviceable = frozenset(d.strip().lower() for d in unserviceable)

    async def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        if destination.strip().lower() in self.unserviceable:
            return None
        return self.quote
