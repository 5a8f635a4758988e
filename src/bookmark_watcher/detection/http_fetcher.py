from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

import httpx

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; BookmarkChecker/1.0)"


class HTTPHeader(StrEnum):
    USER_AGENT = "User-Agent"
    ACCEPT = "Accept"
    ACCEPT_LANGUAGE = "Accept-Language"


def default_headers(user_agent: str = DEFAULT_USER_AGENT) -> dict[str, str]:
    return {
        HTTPHeader.USER_AGENT: user_agent,
        HTTPHeader.ACCEPT: "text/html,application/xhtml+xml,application/xml",
        HTTPHeader.ACCEPT_LANGUAGE: "en-US,en;q=0.9",
    }


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class FetchError(Exception):
    """Base class for failures while retrieving a resource."""


class NetworkError(FetchError):
    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        super().__init__(f"Failed to fetch website: {_describe(cause)}")


class HttpStatusError(FetchError):
    def __init__(self, url: str, status_code: int, reason: str) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch website: {status_code} {reason}".rstrip())


class BodyDecodeError(FetchError):
    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        super().__init__(f"Could not read content: {_describe(cause)}")


@dataclass(frozen=True, slots=True)
class FetchResult:
    status_code: int
    content: str


class Fetcher(Protocol):
    async def fetch(self, url: str) -> FetchResult: ...


class HttpFetcher:
    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._client = client
        self._timeout_seconds = timeout_seconds
        self._timeout = httpx.Timeout(timeout_seconds)
        self._headers = default_headers(user_agent)

    async def fetch(self, url: str) -> FetchResult:
        # httpx limits each phase separately; the outer timeout bounds the whole request.
        try:
            async with asyncio.timeout(self._timeout_seconds):
                response = await self._client.get(url, headers=self._headers, timeout=self._timeout, follow_redirects=True)
        except httpx.DecodingError as exc:
            raise BodyDecodeError(url, exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(url, exc) from exc
        except TimeoutError as exc:
            msg = f"request timed out after {self._timeout_seconds:g}s"
            raise NetworkError(url, TimeoutError(msg)) from exc

        if not response.is_success:
            raise HttpStatusError(url, response.status_code, response.reason_phrase)

        try:
            content = response.text
        except (UnicodeDecodeError, LookupError) as exc:
            raise BodyDecodeError(url, exc) from exc

        return FetchResult(status_code=response.status_code, content=content)
