from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx

from bookmark_watcher.detection.classifier import classify_change
from bookmark_watcher.detection.content_normalizer import normalize_content
from bookmark_watcher.detection.feed_extractor import detect_resource_kind, extract_feed_items
from bookmark_watcher.detection.fingerprinter import degraded_fingerprint, fingerprint_content, fingerprint_feed_items
from bookmark_watcher.detection.http_fetcher import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    FetchError,
    HttpFetcher,
)
from bookmark_watcher.detection.locator import InvalidLocatorError, normalize_locator
from bookmark_watcher.detection.models import CheckRequest, CheckResult, FeedItem, ResourceKind
from bookmark_watcher.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from bookmark_watcher.detection.http_fetcher import Fetcher

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ChangeChecker:
    """Fetch one resource and decide whether it changed since the previous fingerprint.

    `check` never raises: every failure is folded into the returned
    `CheckResult` with a degraded fingerprint and an error message.
    """

    def __init__(self, *, fetcher: Fetcher, clock: Callable[[], datetime] = _utc_now) -> None:
        self._fetcher = fetcher
        self._clock = clock

    async def check(self, request: CheckRequest) -> CheckResult:
        try:
            url = normalize_locator(request.locator)
        except InvalidLocatorError as exc:
            logger.warning("invalid_locator", locator=request.locator)
            return CheckResult(
                fingerprint=degraded_fingerprint(request.locator, day=self._clock().date()),
                changed=False,
                error_message=str(exc),
            )

        try:
            fetch_result = await self._fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("check_failed", url=url, error_type=type(exc).__name__, error=str(exc))
            return self._failed(url, request.previous_fingerprint, str(exc))
        except Exception as exc:  # noqa: BLE001 - the caller always gets a result
            logger.exception("check_crashed", url=url)
            return self._failed(url, request.previous_fingerprint, str(exc) or "Unknown fetch error")

        try:
            return self._evaluate(url, fetch_result.content, request.previous_fingerprint)
        except Exception as exc:  # noqa: BLE001 - the caller always gets a result
            logger.exception("evaluation_crashed", url=url)
            return self._failed(url, request.previous_fingerprint, str(exc) or "Failed to check for updates")

    def _evaluate(self, url: str, content: str, previous_fingerprint: str) -> CheckResult:
        kind = detect_resource_kind(url, content)
        items: list[FeedItem] = []
        if kind is ResourceKind.FEED:
            items = extract_feed_items(content, now=self._clock())
            fingerprint = fingerprint_feed_items(items)
        else:
            fingerprint = fingerprint_content(normalize_content(content))

        classification = classify_change(fingerprint, previous_fingerprint, kind=kind, items=items)
        logger.debug("check_completed", url=url, kind=kind, items=len(items), changed=classification.changed)
        return CheckResult(
            fingerprint=fingerprint,
            changed=classification.changed,
            change_description=classification.description,
            deep_link=classification.deep_link,
        )

    def _failed(self, url: str, previous_fingerprint: str, message: str) -> CheckResult:
        fingerprint = degraded_fingerprint(url, day=self._clock().date())
        classification = classify_change(fingerprint, previous_fingerprint, kind=ResourceKind.PAGE, degraded=True)
        return CheckResult(
            fingerprint=fingerprint,
            changed=classification.changed,
            error_message=message,
            change_description=classification.description,
        )


async def check_for_changes(
    locator: str,
    previous_fingerprint: str = "",
    *,
    fetcher: Fetcher | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> CheckResult:
    request = CheckRequest(locator=locator, previous_fingerprint=previous_fingerprint)
    if fetcher is not None:
        return await ChangeChecker(fetcher=fetcher).check(request)

    async with httpx.AsyncClient() as client:
        http_fetcher = HttpFetcher(client, timeout_seconds=timeout_seconds, user_agent=user_agent)
        return await ChangeChecker(fetcher=http_fetcher).check(request)
