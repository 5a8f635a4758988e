from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Protocol

from bookmark_watcher.observability import get_logger

if TYPE_CHECKING:
    from bookmark_watcher.core.watcher import SweepReport

logger = get_logger(__name__)


class Sweeper(Protocol):
    async def check_all(self) -> SweepReport: ...


class WatcherScheduler:
    """Run a bookmark sweep right away and then once per interval until shut down."""

    def __init__(self, interval_seconds: int, watcher: Sweeper) -> None:
        if interval_seconds <= 0:
            msg = "interval_seconds must be positive"
            raise ValueError(msg)
        if not callable(getattr(watcher, "check_all", None)):
            msg = "watcher must define check_all"
            raise TypeError(msg)

        self._interval_seconds = interval_seconds
        self._watcher = watcher
        self._task: asyncio.Task[None] | None = None
        self._stop_event = asyncio.Event()
        self._sweeps = 0
        self._last_report: SweepReport | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def sweeps(self) -> int:
        return self._sweeps

    @property
    def last_report(self) -> SweepReport | None:
        return self._last_report

    async def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run())

    async def shutdown(self) -> None:
        if self._task is None:
            return
        self._stop_event.set()
        await self._task
        self._task = None

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self._last_report = await self._watcher.check_all()
            except Exception:  # noqa: BLE001 - a failed sweep must not stop the schedule
                logger.exception("sweep_failed", sweeps=self._sweeps)
            else:
                self._sweeps += 1
            if await self._wait_for_stop():
                break
        logger.info("scheduler_stopped", sweeps=self._sweeps)

    async def _wait_for_stop(self) -> bool:
        # Shutdown interrupts the idle interval instead of waiting it out.
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval_seconds)
        except TimeoutError:
            return False
        return True
