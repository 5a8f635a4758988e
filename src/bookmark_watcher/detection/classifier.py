from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bookmark_watcher.detection.fingerprinter import has_changed
from bookmark_watcher.detection.models import ResourceKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bookmark_watcher.detection.models import FeedItem

UNCERTAIN_CHANGE_DESCRIPTION = "Site may have been updated"


@dataclass(frozen=True, slots=True)
class Classification:
    changed: bool
    description: str | None = None
    deep_link: str | None = None


def classify_change(
    fingerprint: str,
    previous_fingerprint: str,
    *,
    kind: ResourceKind,
    items: Sequence[FeedItem] = (),
    degraded: bool = False,
) -> Classification:
    changed = has_changed(previous_fingerprint, fingerprint)
    if not changed:
        return Classification(changed=False)

    if degraded:
        return Classification(changed=True, description=UNCERTAIN_CHANGE_DESCRIPTION)

    if kind is ResourceKind.FEED and items:
        return Classification(changed=True, description=describe_feed_items(items), deep_link=items[0].link)

    return Classification(changed=True)


def describe_feed_items(items: Sequence[FeedItem]) -> str:
    description = f"New post: {items[0].title}"
    if len(items) > 1:
        description += f" and {len(items) - 1} more"
    return description
