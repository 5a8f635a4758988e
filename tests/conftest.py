"""Shared pytest configuration for all test levels."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from tests.test_utils.factories import FetchResultFactory
from tests.test_utils.helpers import read_fixture

from bookmark_watcher.detection.http_fetcher import FetchResult


@pytest.fixture
def rss_two_items() -> FetchResult:
    return FetchResultFactory.build(content=read_fixture("feeds/rss_two_items.xml"))


@pytest.fixture
def rss_eight_items() -> FetchResult:
    return FetchResultFactory.build(content=read_fixture("feeds/rss_eight_items.xml"))


@pytest.fixture
def atom_two_entries() -> FetchResult:
    return FetchResultFactory.build(content=read_fixture("feeds/atom_two_entries.xml"))


@pytest.fixture
def clock_page() -> FetchResult:
    return FetchResultFactory.build(content=read_fixture("html/clock_page.html"))


settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "ci",
    max_examples=100,
    deadline=5000,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

if os.getenv("CI"):
    settings.load_profile("ci")
else:
    settings.load_profile("dev")


_TESTS_ROOT = Path(__file__).resolve().parent
_LEVEL_MARKERS = {"unit": pytest.mark.unit, "integration": pytest.mark.integration}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if getattr(getattr(item, "obj", None), "is_hypothesis_test", False):
            item.add_marker(pytest.mark.property_based)
        try:
            level = item.path.relative_to(_TESTS_ROOT).parts[0]
        except ValueError:
            continue
        marker = _LEVEL_MARKERS.get(level)
        if marker is not None:
            item.add_marker(marker)
