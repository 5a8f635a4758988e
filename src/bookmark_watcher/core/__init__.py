from bookmark_watcher.core.models import BookmarkState, apply_result
from bookmark_watcher.core.scheduler import WatcherScheduler
from bookmark_watcher.core.watcher import BookmarkOutcome, BookmarkWatcher, SweepReport

__all__ = [
    "BookmarkOutcome",
    "BookmarkState",
    "BookmarkWatcher",
    "SweepReport",
    "WatcherScheduler",
    "apply_result",
]
