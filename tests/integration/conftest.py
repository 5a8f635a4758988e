from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from bookmark_watcher.detection.change_checker import ChangeChecker
from bookmark_watcher.detection.http_fetcher import HttpFetcher

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture
async def fetcher() -> AsyncIterator[HttpFetcher]:
    async with httpx.AsyncClient() as client:
        yield HttpFetcher(client, timeout_seconds=2.0)


@pytest.fixture
def checker(fetcher: HttpFetcher) -> ChangeChecker:
    return ChangeChecker(fetcher=fetcher)
