"""Strip volatile markup from a page body before fingerprinting.

Live clocks, "posted today" labels and script/ad churn change on every load;
left in place they would make nearly every check look like a change.
"""

from __future__ import annotations

import re

from bs4 import Comment

from bookmark_watcher.detection.html_parser import parse_html
from bookmark_watcher.observability import get_logger

logger = get_logger(__name__)

_VOLATILE_TAGS = ["script", "style"]
_CLOCK_TAGS = ["time"]

_TIME_OF_DAY_PATTERN = re.compile(r"\b\d{1,2}:\d{2}(?::\d{2})?\s*(?:am|pm)?\b", re.IGNORECASE)
_RELATIVE_DAY_PATTERN = re.compile(r"\b(?:today|yesterday|tomorrow)\b", re.IGNORECASE)
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_content(html: str) -> str:
    try:
        markup = _strip_markup(html)
        markup = _TIME_OF_DAY_PATTERN.sub("", markup)
        markup = _RELATIVE_DAY_PATTERN.sub("", markup)
        return _WHITESPACE_PATTERN.sub(" ", markup).strip()
    except Exception:  # noqa: BLE001 - fall back to the raw body on any parser failure
        logger.warning("content_normalization_failed", length=len(html))
        return html


def _strip_markup(html: str) -> str:
    soup = parse_html(html)

    for tag in soup.find_all(_VOLATILE_TAGS):
        tag.decompose()

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(_CLOCK_TAGS):
        if not tag.decomposed:
            tag.decompose()

    return str(soup)
