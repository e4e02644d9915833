"""System clock adapter."""

from datetime import datetime

from shopkit.core.ports import ClockPort


class SystemClock(ClockPort):
    """Reads the host's local time, timezone-aware."""

    def now(self) -> datetime:
        return datetime.now().astimezone()
