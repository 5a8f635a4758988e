from bookmark_watcher.detection import CheckRequest, CheckResult, FeedItem, check_for_changes

__all__ = ["CheckRequest", "CheckResult", "FeedItem", "check_for_changes"]
