"""Content fingerprinting utilities for detecting changes between checks."""

from __future__ import annotations

import hashlib
import json
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bookmark_watcher.detection.models import FeedItem


def fingerprint_content(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


def serialize_feed_items(items: Sequence[FeedItem]) -> str:
    payload = [{"title": item.title, "link": item.link, "pubDate": item.published} for item in items]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def fingerprint_feed_items(items: Sequence[FeedItem]) -> str:
    return fingerprint_content(serialize_feed_items(items))


def degraded_fingerprint(locator: str, *, day: date | None = None) -> str:
    """Fingerprint a failed check by locator and calendar day.

    Repeated failures on the same UTC day hash identically, so an outage is
    reported as a change at most once per day.
    """
    day = day or datetime.now(UTC).date()
    return fingerprint_content(f"{locator}-{day.isoformat()}-error")


def has_changed(previous: str, current: str) -> bool:
    if not previous:
        return False
    return previous != current
