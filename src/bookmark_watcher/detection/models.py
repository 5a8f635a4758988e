from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum

FEED_ITEM_LIMIT = 5


class ResourceKind(StrEnum):
    FEED = "feed"
    PAGE = "page"


@dataclass(frozen=True, slots=True)
class CheckRequest:
    locator: str
    previous_fingerprint: str = ""


@dataclass(frozen=True, slots=True)
class FeedItem:
    title: str
    link: str
    published: str


@dataclass(frozen=True, slots=True)
class CheckResult:
    fingerprint: str
    changed: bool
    error_message: str | None = None
    change_description: str | None = None
    deep_link: str | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
