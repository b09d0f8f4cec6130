"""
Fire-and-forget analytics reporting over HTTP.
"""

import asyncio
from typing import Callable, List, Optional, Set

import httpx
from loguru import logger

from sentibot.config import settings
from sentibot.models.schemas import AnalyticsRecord, DispatchOutcome


class AnalyticsDispatcher:
    """
    Posts analytics records from background tasks.

    ``dispatch`` never blocks the caller and never raises: every task finishes
    with a ``DispatchOutcome`` that is appended to ``outcomes`` and handed to
    ``on_complete``.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        enabled: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_complete: Optional[Callable[[DispatchOutcome], None]] = None,
    ):
        self.url = url or settings.ANALYTICS_URL
        self.timeout = settings.ANALYTICS_TIMEOUT if timeout is None else timeout
        self.enabled = settings.ANALYTICS_ENABLED if enabled is None else enabled
        self._transport = transport
        self._on_complete = on_complete
        self._tasks: Set[asyncio.Task] = set()
        self.outcomes: List[DispatchOutcome] = []

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def dispatch(self, record: AnalyticsRecord) -> Optional["asyncio.Task[DispatchOutcome]"]:
        """
        Schedule a POST of ``record`` on the running event loop.

        Without a running loop nothing is sent: the failure is logged and
        recorded as an outcome, and None is returned.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.error("Failed to send analytics data: no running event loop")
            self._record(DispatchOutcome(record=record, ok=False, error="no running event loop"))
            return None

        if not self.enabled:
            logger.info("Analytics disabled, skipping")
            coro = self._skip(record)
        else:
            coro = self._send(record)

        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    async def drain(self, timeout: Optional[float] = None) -> None:
        """Wait for in-flight dispatches, cancelling whatever outlives ``timeout``."""
        if not self._tasks:
            return
        timeout = settings.ANALYTICS_DRAIN_TIMEOUT if timeout is None else timeout
        _, still_running = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in still_running:
            task.cancel()
        if still_running:
            logger.warning(f"Cancelled {len(still_running)} pending analytics dispatch(es)")
            await asyncio.gather(*still_running, return_exceptions=True)

    async def _skip(self, record: AnalyticsRecord) -> DispatchOutcome:
        return DispatchOutcome(record=record, ok=False, error="disabled")

    async def _send(self, record: AnalyticsRecord) -> DispatchOutcome:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=record.model_dump())
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to send analytics data: {e}")
            return DispatchOutcome(
                record=record,
                ok=False,
                status_code=e.response.status_code,
                error=str(e),
            )
        except Exception as e:
            logger.error(f"Failed to send analytics data: {type(e).__name__}: {e}")
            return DispatchOutcome(record=record, ok=False, error=f"{type(e).__name__}: {e}")

        logger.debug(f"Analytics sent [{response.status_code}]")
        return DispatchOutcome(record=record, ok=True, status_code=response.status_code)

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        self._record(task.result())

    def _record(self, outcome: DispatchOutcome) -> None:
        self.outcomes.append(outcome)
        if self._on_complete is not None:
            self._on_complete(outcome)
