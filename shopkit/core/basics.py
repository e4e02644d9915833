"""Small helpers used across the storefront."""

import asyncio
from typing import TypeVar

T = TypeVar("T")


def larger(a: T, b: T) -> T:
    """Return the larger of two values, preferring the first on a tie."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


async def fetch_data() -> list[int]:
    """Resolve to a fixed sample dataset after yielding to the event loop."""
    await asyncio.sleep(0)
    return [1, 2, 3]
