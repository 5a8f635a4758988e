from bookmark_watcher.detection.change_checker import ChangeChecker, check_for_changes
from bookmark_watcher.detection.classifier import Classification, classify_change, describe_feed_items
from bookmark_watcher.detection.content_normalizer import normalize_content
from bookmark_watcher.detection.feed_extractor import detect_resource_kind, extract_feed_items
from bookmark_watcher.detection.fingerprinter import (
    degraded_fingerprint,
    fingerprint_content,
    fingerprint_feed_items,
    has_changed,
    serialize_feed_items,
)
from bookmark_watcher.detection.http_fetcher import (
    BodyDecodeError,
    FetchError,
    FetchResult,
    HttpFetcher,
    HttpStatusError,
    NetworkError,
)
from bookmark_watcher.detection.locator import InvalidLocatorError, normalize_locator
from bookmark_watcher.detection.models import FEED_ITEM_LIMIT, CheckRequest, CheckResult, FeedItem, ResourceKind

__all__ = [
    "FEED_ITEM_LIMIT",
    "BodyDecodeError",
    "ChangeChecker",
    "CheckRequest",
    "CheckResult",
    "Classification",
    "FeedItem",
    "FetchError",
    "FetchResult",
    "HttpFetcher",
    "HttpStatusError",
    "InvalidLocatorError",
    "NetworkError",
    "ResourceKind",
    "check_for_changes",
    "classify_change",
    "degraded_fingerprint",
    "describe_feed_items",
    "detect_resource_kind",
    "extract_feed_items",
    "fingerprint_content",
    "fingerprint_feed_items",
    "has_changed",
    "normalize_content",
    "normalize_locator",
    "serialize_feed_items",
]
