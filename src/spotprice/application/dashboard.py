# src/spotprice/application/dashboard.py
"""
Dashboard - Two Independent Price Requests

The dashboard shows three cards backed by two logical requests:
"today" (today and tomorrow, pages 0 and 2) and "weekly" (price
history, page 1). Each refresh creates a fresh pair of requests and
runs them as separate asyncio tasks; they share no state, so one
failing or finishing first never affects the other.

Files that USE this module:
- Presentation layers embedding the price dashboard
- tests.test_dashboard (unit tests)

Files that this module USES:
- spotprice.application.price_request (PriceRequest)
- spotprice.adapters.providers (SpotHintaProvider default source)
- spotprice.adapters.formatting.formatter (format_card)
- spotprice.config (weekly endpoint, local time zone)
"""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Optional

from spotprice.adapters.formatting.formatter import DashboardCard, format_card
from spotprice.adapters.providers.base import PriceProvider
from spotprice.adapters.providers.spot_hinta import SpotHintaProvider
from spotprice.application.price_request import PriceRequest
from spotprice.config import settings
from spotprice.domain.models import FetchResult

log = logging.getLogger(__name__)

PAGE_COUNT = 3


class Dashboard:
    """Owns the "today" and "weekly" requests and exposes their results per page."""

    def __init__(
        self,
        today_provider: Optional[PriceProvider] = None,
        weekly_provider: Optional[PriceProvider] = None,
    ):
        """
        Initialize dashboard.

        Args:
            today_provider: Source for today's prices (defaults to spot-hinta.fi)
            weekly_provider: Source for the history card (defaults to settings.weekly_price_url)
        """
        self.today_provider = today_provider or SpotHintaProvider()
        self.weekly_provider = weekly_provider or SpotHintaProvider(url=settings.weekly_price_url)
        self._tasks: list[asyncio.Task] = []
        self._new_requests()

    def _new_requests(self) -> None:
        self.today = PriceRequest("today", self.today_provider, label="data")
        self.weekly = PriceRequest("weekly", self.weekly_provider, label="weekly data")

    @property
    def today_result(self) -> FetchResult:
        return self.today.result

    @property
    def weekly_result(self) -> FetchResult:
        return self.weekly.result

    async def refresh(self) -> tuple[FetchResult, FetchResult]:
        """
        Load both series with fresh requests.

        Any refresh still in flight is cancelled first and its cells are
        disposed.

        Returns:
            (today result, weekly result)
        """
        if self._tasks:
            await self.close()
        self._new_requests()

        today_task = asyncio.create_task(self.today.load(), name="spotprice-today")
        weekly_task = asyncio.create_task(self.weekly.load(), name="spotprice-weekly")
        self._tasks = [today_task, weekly_task]
        try:
            today, weekly = await asyncio.gather(today_task, weekly_task)
        finally:
            self._tasks = [t for t in self._tasks if not t.done()]
        log.info("Dashboard refreshed: today=%s, weekly=%s", today.status.value, weekly.status.value)
        return today, weekly

    async def close(self) -> None:
        """Cancel in-flight requests and dispose their result cells."""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self.today.cell.dispose()
        self.weekly.cell.dispose()
        log.debug("Dashboard closed (%d tasks cancelled)", len(tasks))

    def result_for_page(self, page: int) -> FetchResult:
        if page == 1:
            return self.weekly.result
        return self.today.result

    def cards(self, now: Optional[datetime] = None) -> list[DashboardCard]:
        """
        Build the text of every card.

        Args:
            now: Reference time for the current-hour lookup
                 (defaults to now in settings.local_timezone)
        """
        if now is None:
            now = datetime.now(settings.tzinfo)
        return [format_card(page, self.result_for_page(page), now) for page in range(PAGE_COUNT)]
