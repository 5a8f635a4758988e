from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from bookmark_watcher.core.models import BookmarkState, apply_result
from bookmark_watcher.detection.models import CheckRequest
from bookmark_watcher.observability import bookmark_context, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from bookmark_watcher.config import CheckConfig
    from bookmark_watcher.detection.models import CheckResult

logger = get_logger(__name__)


class Checker(Protocol):
    async def check(self, request: CheckRequest) -> CheckResult: ...


@dataclass(frozen=True, slots=True)
class BookmarkOutcome:
    bookmark: BookmarkState
    result: CheckResult


@dataclass(frozen=True, slots=True)
class SweepReport:
    outcomes: tuple[BookmarkOutcome, ...]
    total: int
    timed_out: bool

    @property
    def completed(self) -> int:
        return len(self.outcomes)

    @property
    def changed(self) -> tuple[BookmarkOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.result.changed)


class BookmarkWatcher:
    """Check every bookmark in turn, carrying fingerprints between sweeps.

    Checks run one at a time with a short pause in between. When the sweep
    deadline passes, bookmarks that were not reached keep their previous state.
    """

    def __init__(
        self,
        *,
        bookmarks: Sequence[BookmarkState],
        checker: Checker,
        config: CheckConfig,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._states = list(bookmarks)
        self._checker = checker
        self._config = config
        self._clock = clock or (lambda: datetime.now(UTC))

    @property
    def bookmarks(self) -> tuple[BookmarkState, ...]:
        return tuple(self._states)

    async def check_all(self) -> SweepReport:
        outcomes: list[BookmarkOutcome] = []
        timed_out = False
        logger.info("sweep_started", bookmarks=len(self._states))

        try:
            async with asyncio.timeout(self._config.deadline_seconds):
                await self._sweep(outcomes)
        except TimeoutError:
            timed_out = True
            logger.warning(
                "sweep_deadline_exceeded",
                deadline_seconds=self._config.deadline_seconds,
                completed=len(outcomes),
                total=len(self._states),
            )

        logger.info("sweep_completed", completed=len(outcomes), total=len(self._states), timed_out=timed_out)
        return SweepReport(outcomes=tuple(outcomes), total=len(self._states), timed_out=timed_out)

    async def _sweep(self, outcomes: list[BookmarkOutcome]) -> None:
        for index, state in enumerate(self._states):
            with bookmark_context(state.url, state.name):
                result = await self._checker.check(CheckRequest(locator=state.url, previous_fingerprint=state.fingerprint))
                updated = apply_result(state, result, now=self._clock())
                self._states[index] = updated
                outcomes.append(BookmarkOutcome(bookmark=updated, result=result))
                self._log_outcome(updated, result)

            if self._config.pause_seconds and index < len(self._states) - 1:
                await asyncio.sleep(self._config.pause_seconds)

    @staticmethod
    def _log_outcome(state: BookmarkState, result: CheckResult) -> None:
        if result.error_message is not None:
            logger.warning("bookmark_check_failed", url=state.url, error=result.error_message, changed=result.changed)
        elif result.changed:
            logger.info("change_detected", url=state.url, description=state.change_description, deep_link=state.deep_link)
        else:
            logger.debug("bookmark_unchanged", url=state.url)
