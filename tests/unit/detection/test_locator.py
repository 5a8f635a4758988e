from __future__ import annotations

import pytest

from bookmark_watcher.detection.locator import InvalidLocatorError, normalize_locator


@pytest.mark.parametrize(
    ("locator", "expected"),
    [
        pytest.param("example.com", "https://example.com", id="bare_host"),
        pytest.param("example.com/feed", "https://example.com/feed", id="bare_host_with_path"),
        pytest.param("http://example.com", "http://example.com", id="http_kept"),
        pytest.param("HTTPS://Example.com/a", "HTTPS://Example.com/a", id="uppercase_scheme_kept"),
        pytest.param("  https://example.com/x?y=1  ", "https://example.com/x?y=1", id="trimmed"),
        pytest.param("localhost:8080/feed", "https://localhost:8080/feed", id="port"),
        pytest.param("https://[::1]:8080/", "https://[::1]:8080/", id="ipv6"),
        pytest.param("bücher.example/neu", "https://bücher.example/neu", id="idn"),
    ],
)
def test_normalize_locator_accepts(locator: str, expected: str) -> None:
    assert normalize_locator(locator) == expected


@pytest.mark.parametrize(
    "locator",
    [
        pytest.param("", id="empty"),
        pytest.param("   ", id="blank"),
        pytest.param("not a url", id="spaces_in_host"),
        pytest.param("https://", id="scheme_only"),
        pytest.param("https://exa mple.com", id="space_in_host"),
        pytest.param("https://example..com", id="empty_label"),
        pytest.param("https://example.com:99999", id="port_out_of_range"),
        pytest.param("https://exa<mple>.com", id="bad_host_chars"),
        pytest.param("https://[abc", id="unclosed_bracket"),
        pytest.param("[::1", id="unclosed_ipv6_without_scheme"),
        pytest.param("http://[example.com]/", id="bracketed_hostname"),
        pytest.param("https://]example.com[", id="reversed_brackets"),
    ],
)
def test_normalize_locator_rejects(locator: str) -> None:
    with pytest.raises(InvalidLocatorError, match="Invalid URL"):
        normalize_locator(locator)
