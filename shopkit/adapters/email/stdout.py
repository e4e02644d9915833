"""Stdout email adapter.

Implements EmailPort by printing outgoing mail to terminal with
human-readable formatting.
"""

import asyncio
import logging

from shopkit.core.ports import EmailPort

logger = logging.getLogger(__name__)


class StdoutEmailAdapter(EmailPort):
    """Prints outgoing email to stdout instead of delivering it."""

    def __init__(self, sender: str = "no-reply@shopkit.local"):
        """Initialize stdout email adapter.

        Args:
            sender: Address shown in the From line.
        """
        self.sender = sender

    async def send_email(self, to: str, message: str) -> None:
        await asyncio.to_thread(print, self._format_email(self.sender, to, message))
        logger.debug(f"Email printed for {to}")

    @staticmethod
    def _format_email(sender: str, to: str, message: str) -> str:
        """Format an email as a bordered block."""
        lines = [
            "=" * 80,
            "EMAIL",
            "=" * 80,
            f"From: {sender}",
            f"To: {to}",
            "-" * 80,
            message,
            "=" * 80,
        ]
        return "\n".join(lines)
