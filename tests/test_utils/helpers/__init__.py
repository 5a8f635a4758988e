"""Test helpers."""

from tests.test_utils.helpers.feeds import Post, html_page, post, rss_feed
from tests.test_utils.helpers.fixture import fixture_path, read_fixture

__all__ = [
    "Post",
    "fixture_path",
    "html_page",
    "post",
    "read_fixture",
    "rss_feed",
]
