"""Random security code adapter.

Implements SecurityCodePort with the ``secrets`` module so codes are
suitable for one-time login.
"""

import secrets

from shopkit.core.ports import SecurityCodePort


class RandomSecurityCodeAdapter(SecurityCodePort):
    """Generates uniformly random numeric codes below 10**digits."""

    def __init__(self, digits: int = 6):
        if digits < 1:
            raise ValueError(f"digits must be positive, got {digits}")
        self.digits = digits

    def generate_code(self) -> int:
        return secrets.randbelow(10**self.digits)
