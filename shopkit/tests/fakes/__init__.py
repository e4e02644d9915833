"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeExchangeRatePort: Configurable rate table
- FakeShippingPort: Canned shipping quotes
- FakeAnalyticsPort: Captured page views for assertion
- FakePaymentPort: Configurable charge outcome, captured charges
- FakeEmailPort: Captured outgoing email for assertion
- FakeSecurityCodePort: Deterministic code sequence
- FakeClock: Settable fixed time
"""

from .analytics import FakeAnalyticsPort
from .clock import FakeClock
from .currency import FakeExchangeRatePort
from .email import FakeEmailPort
from .payment import FakePaymentPort
from .security import FakeSecurityCodePort
from .shipping import FakeShippingPort

__all__ = [
    "FakeAnalyticsPort",
    "FakeClock",
    "FakeEmailPort",
    "FakeExchangeRatePort",
    "FakePaymentPort",
    "FakeSecurityCodePort",
    "FakeShippingPort",
]
