"""Pricing rules: coupons, discount codes and price ranges.

Pure decision logic, no side effects.
"""

from numbers import Real

from .models import Coupon

# Discount codes accepted at checkout, as a fraction of the price.
DISCOUNT_CODES: dict[str, float] = {
    "SAVE10": 0.10,
    "SAVE20": 0.20,
}


def get_coupons() -> list[Coupon]:
    """Return the coupons currently on offer."""
    return [
        Coupon(code="SAVE20NOW", discount=0.2),
        Coupon(code="DISCOUNT50OFF", discount=0.5),
    ]


def calculate_discount(price: float, discount_code: str) -> float:
    """Apply a discount code to a price.

    Unknown codes leave the price unchanged.

    Args:
        price: Positive price before discount.
        discount_code: Code entered by the customer.

    Returns:
        The discounted price.

    Raises:
        ValueError: If the price is not a positive number or the code
            is not a string.
    """
    if isinstance(price, bool) or not isinstance(price, Real) or price <= 0:
        raise ValueError("Invalid price")
    if not isinstance(discount_code, str):
        raise ValueError("Invalid discount code")

    discount = DISCOUNT_CODES.get(discount_code, 0.0)
    return price - price * discount


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    """Check whether a price lies within [min_price, max_price]."""
    return min_price <= price <= max_price
