"""Logging analytics adapter.

Implements AnalyticsPort by writing page views to the application log
and keeping per-path counts in memory.
"""

import logging
from collections import Counter

from shopkit.core.ports import AnalyticsPort

logger = logging.getLogger(__name__)


class LoggingAnalyticsAdapter(AnalyticsPort):
    """Records page views in the log."""

    def __init__(self) -> None:
        self.page_views: Counter[str] = Counter()

    async def track_page_view(self, path: str) -> None:
        self.page_views[path] += 1
        logger.info(
            f"Page view: {path}",
            extra={"path": path, "count": self.page_views[path]},
        )
