from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from bookmark_watcher.config import BookmarkConfig
    from bookmark_watcher.detection.models import CheckResult

GENERIC_CHANGE_DESCRIPTION = "Content updated"


@dataclass(frozen=True, slots=True)
class BookmarkState:
    url: str
    name: str | None = None
    fingerprint: str = ""
    last_checked_at: datetime | None = None
    last_updated_at: datetime | None = None
    change_detected: bool = False
    change_description: str | None = None
    deep_link: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.url:
            msg = "url cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_config(cls, bookmark: BookmarkConfig) -> BookmarkState:
        return cls(url=bookmark.url, name=bookmark.name, fingerprint=bookmark.fingerprint)


def apply_result(state: BookmarkState, result: CheckResult, *, now: datetime) -> BookmarkState:
    """Fold a check result into a bookmark, keeping the last known change when nothing new happened."""
    if not result.changed:
        return replace(state, fingerprint=result.fingerprint, last_checked_at=now, error=result.error_message)

    return replace(
        state,
        fingerprint=result.fingerprint,
        last_checked_at=now,
        last_updated_at=now,
        change_detected=True,
        change_description=result.change_description or GENERIC_CHANGE_DESCRIPTION,
        deep_link=result.deep_link,
        error=result.error_message,
    )
