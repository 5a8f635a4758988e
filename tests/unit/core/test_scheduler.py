import asyncio

import pytest

from bookmark_watcher.core import WatcherScheduler
from tests.test_utils.fakes import CountingWatcher, FailingOnceWatcher


class TestWatcherSchedulerValidation:
    def test_zero_interval_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="interval_seconds must be positive"):
            WatcherScheduler(0, CountingWatcher())

    def test_negative_interval_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="interval_seconds must be positive"):
            WatcherScheduler(-1, CountingWatcher())

    def test_watcher_without_check_all_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="watcher must define check_all"):
            WatcherScheduler(1, object())


class TestWatcherSchedulerLifecycle:
    async def test_start_runs_a_sweep_immediately_and_shutdown_stops(self) -> None:
        watcher = CountingWatcher()
        scheduler = WatcherScheduler(3600, watcher)

        await scheduler.start()
        await asyncio.wait_for(watcher.called.wait(), timeout=1)
        await scheduler.shutdown()

        assert watcher.calls == 1
        assert scheduler.sweeps == 1
        assert scheduler.last_report is not None
        assert scheduler.last_report.timed_out is False
        assert scheduler.running is False

    async def test_start_twice_keeps_a_single_task(self) -> None:
        watcher = CountingWatcher()
        scheduler = WatcherScheduler(3600, watcher)

        await scheduler.start()
        await scheduler.start()
        await asyncio.wait_for(watcher.called.wait(), timeout=1)
        await scheduler.shutdown()

        assert watcher.calls == 1

    async def test_shutdown_without_start_is_a_no_op(self) -> None:
        scheduler = WatcherScheduler(1, CountingWatcher())

        await scheduler.shutdown()

        assert scheduler.running is False

    async def test_short_interval_repeats_sweeps(self) -> None:
        watcher = CountingWatcher()
        scheduler = WatcherScheduler(1, watcher)
        scheduler._interval_seconds = 0.01  # type: ignore[assignment]  # noqa: SLF001

        await scheduler.start()
        for _ in range(3):
            await asyncio.wait_for(watcher.called.wait(), timeout=1)
            watcher.called.clear()
        await scheduler.shutdown()

        assert watcher.calls >= 3

    async def test_failed_sweep_keeps_the_schedule_alive(self) -> None:
        watcher = FailingOnceWatcher()
        scheduler = WatcherScheduler(1, watcher)
        scheduler._interval_seconds = 0.01  # type: ignore[assignment]  # noqa: SLF001

        await scheduler.start()
        for _ in range(2):
            await asyncio.wait_for(watcher.called.wait(), timeout=1)
            watcher.called.clear()
        assert scheduler.running is True
        await scheduler.shutdown()

        assert watcher.calls >= 2
        assert scheduler.sweeps >= 1
