"""Turn user-supplied bookmark locators into absolute http(s) URLs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import urlparse

if TYPE_CHECKING:
    from urllib.parse import ParseResult

DEFAULT_SCHEME = "https"

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
_HOST_PATTERN = re.compile(r"^(?:[a-z0-9_-]+\.)*[a-z0-9_-]+\.?$|^\[[0-9a-f:.]+\]$", re.IGNORECASE)


class InvalidLocatorError(ValueError):
    """Raised when a locator cannot be turned into an absolute URL."""

    def __init__(self, locator: str) -> None:
        self.locator = locator
        super().__init__(f"Invalid URL: {locator!r}")


def normalize_locator(locator: str) -> str:
    candidate = locator.strip()
    if not candidate:
        raise InvalidLocatorError(locator)
    if not _SCHEME_PATTERN.match(candidate):
        candidate = f"{DEFAULT_SCHEME}://{candidate}"

    try:
        parsed = urlparse(candidate)
        hostname = parsed.hostname
        _ = parsed.port
    except ValueError as exc:
        # Malformed brackets and out-of-range ports surface as ValueError.
        raise InvalidLocatorError(locator) from exc

    _validate_netloc(parsed, hostname, locator)
    return candidate


def _validate_netloc(parsed: ParseResult, hostname: str | None, locator: str) -> None:
    if not parsed.netloc or hostname is None:
        raise InvalidLocatorError(locator)
    if any(char.isspace() for char in parsed.netloc):
        raise InvalidLocatorError(locator)
    if "[" in parsed.netloc and ":" not in hostname:
        raise InvalidLocatorError(locator)
    try:
        host_idna = hostname.encode("idna").decode("ascii")
    except UnicodeError as exc:
        raise InvalidLocatorError(locator) from exc
    if not _HOST_PATTERN.match(host_idna if ":" not in host_idna else f"[{host_idna}]"):
        raise InvalidLocatorError(locator)
