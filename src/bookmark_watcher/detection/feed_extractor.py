"""Best-effort extraction of the newest entries from RSS and Atom payloads.

Feeds in the wild are irregular, so items are located with text patterns
instead of a strict XML parser: a malformed payload yields whatever can be
found, and never an exception.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from bookmark_watcher.detection.models import FEED_ITEM_LIMIT, FeedItem, ResourceKind
from bookmark_watcher.observability import get_logger

logger = get_logger(__name__)

MISSING_TITLE = "No title"
MISSING_LINK = "#"

_FEED_LOCATOR_MARKERS: tuple[str, ...] = ("/feed", ".rss", "/rss", "atom.xml", "/atom")
_FEED_BODY_MARKERS: tuple[str, ...] = ("<rss", "<feed")

_ITEM_PATTERN = re.compile(r"<item>([\s\S]*?)</item>")
_ENTRY_PATTERN = re.compile(r"<entry>([\s\S]*?)</entry>")
_TITLE_PATTERN = re.compile(r"<title>(.*?)</title>", re.IGNORECASE)
_LINK_PATTERN = re.compile(r"<link>(.*?)</link>", re.IGNORECASE)
_CDATA_LINK_PATTERN = re.compile(r"<link>\s*<!\[CDATA\[(.*?)\]\]>\s*</link>", re.IGNORECASE)
_HREF_LINK_PATTERN = re.compile(r"<link[^>]*href=\"([^\"]*)\"[^>]*>", re.IGNORECASE)
_PUB_DATE_PATTERN = re.compile(r"<pubDate>(.*?)</pubDate>", re.IGNORECASE)
_PUBLISHED_PATTERN = re.compile(r"<published>(.*?)</published>", re.IGNORECASE)


def detect_resource_kind(locator: str, content: str) -> ResourceKind:
    if any(marker in locator for marker in _FEED_LOCATOR_MARKERS) or locator.endswith(".xml"):
        return ResourceKind.FEED
    if any(marker in content for marker in _FEED_BODY_MARKERS):
        return ResourceKind.FEED
    return ResourceKind.PAGE


def extract_feed_items(xml: str, *, limit: int = FEED_ITEM_LIMIT, now: datetime | None = None) -> list[FeedItem]:
    fallback_published = (now or datetime.now(UTC)).isoformat()
    try:
        items = _extract_rss_items(xml, limit=limit, fallback_published=fallback_published)
        if not items:
            items = _extract_atom_entries(xml, limit=limit, fallback_published=fallback_published)
    except Exception:  # noqa: BLE001 - an unreadable feed is an empty feed
        logger.warning("feed_extraction_failed", length=len(xml))
        return []
    return items


def _extract_rss_items(xml: str, *, limit: int, fallback_published: str) -> list[FeedItem]:
    items: list[FeedItem] = []
    for match in _ITEM_PATTERN.finditer(xml):
        if len(items) >= limit:
            break
        block = match.group(1)
        items.append(
            FeedItem(
                title=_first_or(_TITLE_PATTERN, block, MISSING_TITLE),
                link=_rss_link(block),
                published=_first_or(_PUB_DATE_PATTERN, block, fallback_published),
            )
        )
    return items


def _extract_atom_entries(xml: str, *, limit: int, fallback_published: str) -> list[FeedItem]:
    items: list[FeedItem] = []
    for match in _ENTRY_PATTERN.finditer(xml):
        if len(items) >= limit:
            break
        block = match.group(1)
        items.append(
            FeedItem(
                title=_first_or(_TITLE_PATTERN, block, MISSING_TITLE),
                link=_first_or(_HREF_LINK_PATTERN, block, MISSING_LINK),
                published=_first_or(_PUBLISHED_PATTERN, block, fallback_published),
            )
        )
    return items


def _rss_link(block: str) -> str:
    # Some feeds wrap the link in CDATA; that form wins over a plain one.
    cdata = _first(_CDATA_LINK_PATTERN, block)
    if cdata is not None:
        return cdata
    plain = _first(_LINK_PATTERN, block)
    if plain is not None:
        return plain
    return MISSING_LINK


def _first(pattern: re.Pattern[str], block: str) -> str | None:
    match = pattern.search(block)
    if match is None:
        return None
    return match.group(1)


def _first_or(pattern: re.Pattern[str], block: str, default: str) -> str:
    found = _first(pattern, block)
    return default if found is None else found
