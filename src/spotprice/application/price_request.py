# src/spotprice/application/price_request.py
"""
Price Request - One Logical Fetch-and-Build Request

A logical request ("today's prices", "weekly history") owns exactly one
result cell. The cell starts pending and is completed once, with either
a ready series or a failure message. A request object is single-use: a
new attempt means a new PriceRequest with a fresh cell.

Phases follow Pending -> Parsing -> Ready, with Pending -> Failed and
Parsing -> Failed on errors. A request whose cell was disposed never
reaches Ready or Failed; its phase stops where the dropped write left it.

Files that USE this module:
- spotprice.application.dashboard (two independent requests)
- tests.test_price_request (unit tests)

Files that this module USES:
- spotprice.adapters.providers.base (PriceProvider for the raw payload)
- spotprice.application.series_builder (build_series)
- spotprice.domain.models (FetchResult)
- spotprice.domain.errors (PriceDataError, ResultCellError)
"""
from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Optional

from spotprice.adapters.providers.base import PriceProvider
from spotprice.application.series_builder import build_series
from spotprice.domain.errors import PriceDataError, ResultCellError
from spotprice.domain.models import FetchResult

log = logging.getLogger(__name__)


class RequestPhase(Enum):
    PENDING = "pending"
    PARSING = "parsing"
    READY = "ready"
    FAILED = "failed"


class ResultCell:
    """
    Write-once holder of a FetchResult.

    Readers may look at `result` any number of times. The single terminal
    write happens through complete(). After dispose(), writes are dropped.
    """

    def __init__(self, name: str):
        self.name = name
        self._result = FetchResult.pending()
        self._disposed = False

    @property
    def result(self) -> FetchResult:
        return self._result

    @property
    def disposed(self) -> bool:
        return self._disposed

    def complete(self, result: FetchResult) -> bool:
        """
        Store the terminal result.

        Args:
            result: A READY or FAILED FetchResult

        Returns:
            True if stored, False if the cell was disposed and the write dropped

        Raises:
            ResultCellError: If result is not terminal or the cell was already completed
        """
        if not result.is_terminal:
            raise ResultCellError(f"Cell '{self.name}' only accepts a terminal result")
        if self._disposed:
            log.info("Dropping %s result for disposed cell '%s'", result.status.value, self.name)
            return False
        if self._result.is_terminal:
            raise ResultCellError(f"Cell '{self.name}' was already completed")
        self._result = result
        return True

    def dispose(self) -> None:
        self._disposed = True


class PriceRequest:
    """Fetches a payload from a provider and builds a series into its own cell."""

    def __init__(self, name: str, provider: PriceProvider, label: Optional[str] = None):
        """
        Initialize a logical request.

        Args:
            name: Identifier used in logs and for the result cell
            provider: Source of the raw payload
            label: Wording used in failure messages (defaults to name)
        """
        self.name = name
        self.provider = provider
        self.label = label or name
        self.cell = ResultCell(name)
        self._phase = RequestPhase.PENDING
        self._started = False

    @property
    def phase(self) -> RequestPhase:
        return self._phase

    @property
    def result(self) -> FetchResult:
        return self.cell.result

    def _start(self) -> None:
        if self._started:
            raise ResultCellError(
                f"Request '{self.name}' was already started; create a new request to retry"
            )
        self._started = True

    def _failure(self, error: Exception) -> FetchResult:
        return FetchResult.failed(f"Failed to load {self.label}: {error}")

    def _parse(self, raw) -> FetchResult:
        self._phase = RequestPhase.PARSING
        try:
            series = build_series(raw)
        except PriceDataError as e:
            log.error("Request '%s' could not parse payload: %s", self.name, e)
            return self._failure(e)
        except Exception as e:
            log.exception("Request '%s' parsing raised unexpectedly", self.name)
            return self._failure(e)
        log.info("Request '%s' ready with %d points", self.name, len(series))
        return FetchResult.ready(series)

    def _finish(self, result: FetchResult) -> FetchResult:
        # Phase only moves when the cell accepted the result
        if self.cell.complete(result):
            self._phase = RequestPhase.READY if result.is_ready else RequestPhase.FAILED
        return result

    def execute(self) -> FetchResult:
        """
        Run fetch and build synchronously in the calling thread.

        Returns:
            The terminal FetchResult (also stored in the cell)
        """
        self._start()
        try:
            raw = self.provider.fetch_raw()
        except PriceDataError as e:
            log.error("Request '%s' fetch failed: %s", self.name, e)
            return self._finish(self._failure(e))
        except Exception as e:
            log.exception("Request '%s' fetch raised unexpectedly", self.name)
            return self._finish(self._failure(e))
        return self._finish(self._parse(raw))

    async def load(self) -> FetchResult:
        """
        Run the blocking fetch in the default executor, then build the series.

        Cancellation takes effect at the fetch await; a cancelled load
        leaves the cell pending and writes nothing.

        Returns:
            The terminal FetchResult (also stored in the cell)
        """
        self._start()
        loop = asyncio.get_running_loop()
        try:
            raw = await loop.run_in_executor(None, self.provider.fetch_raw)
        except asyncio.CancelledError:
            log.info("Request '%s' cancelled before completion", self.name)
            raise
        except PriceDataError as e:
            log.error("Request '%s' fetch failed: %s", self.name, e)
            return self._finish(self._failure(e))
        except Exception as e:
            log.exception("Request '%s' fetch raised unexpectedly", self.name)
            return self._finish(self._failure(e))
        return self._finish(self._parse(raw))
