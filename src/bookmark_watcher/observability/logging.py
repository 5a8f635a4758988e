"""structlog setup for bookmark checks.

Bookmark URLs often carry credentials (private feed tokens, signed links,
basic-auth userinfo), so every event passes through `sanitize_event`
before it is rendered.
"""

from __future__ import annotations

import json
import os
import re
from contextlib import contextmanager
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping

LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_FORMAT_ENV = "LOG_FORMAT"

_SECRET_KEY_PATTERN = re.compile(r"(token|api_key|apikey|authorization|cookie|secret|password)", re.IGNORECASE)
_URL_SECRET_PATTERN = re.compile(r"([?&](?:token|key|api_key|apikey|access_token|auth|sig|signature))=([^&#\s]+)", re.IGNORECASE)
_URL_USERINFO_PATTERN = re.compile(r"(https?://)[^/\s@]+@")
_CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x7f]")
_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}
_MAX_VALUE_LENGTH = 4000
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LogFormat(StrEnum):
    JSON = "json"
    CONSOLE = "console"


def _escape_control_char(match: re.Match[str]) -> str:
    char = match.group(0)
    return _ESCAPES.get(char, f"\\x{ord(char):02x}")


def mask_url_secrets(text: str) -> str:
    masked = _URL_SECRET_PATTERN.sub(r"\1=***", text)
    return _URL_USERINFO_PATTERN.sub(r"\1***@", masked)


def sanitize_value(value: object) -> object:
    if isinstance(value, str):
        sanitized = mask_url_secrets(_CONTROL_CHARS_PATTERN.sub(_escape_control_char, value))
        if len(sanitized) > _MAX_VALUE_LENGTH:
            return sanitized[:_MAX_VALUE_LENGTH] + "..."
        return sanitized
    if isinstance(value, (int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {key: sanitize_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [sanitize_value(val) for val in value]
    return str(value)


def sanitize_event(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    return {key: "***" if _SECRET_KEY_PATTERN.search(key) else sanitize_value(value) for key, value in event_dict.items()}


def _add_timestamp(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _render_json(_: object, __: object, event_dict: MutableMapping[str, Any]) -> str:
    return json.dumps(event_dict, ensure_ascii=False)


def parse_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    return level if level in _LEVELS else "INFO"


def parse_format() -> LogFormat:
    try:
        return LogFormat(os.environ.get(LOG_FORMAT_ENV, LogFormat.JSON).lower())
    except ValueError:
        return LogFormat.JSON


def configure_logging() -> structlog.BoundLogger:
    # exc_info must be rendered before sanitizing so tracebacks are masked too.
    processors: list[structlog.types.Processor] = [structlog.contextvars.merge_contextvars]
    if parse_format() is LogFormat.CONSOLE:
        processors.extend([sanitize_event, _add_timestamp, structlog.processors.add_log_level, structlog.dev.ConsoleRenderer()])
    else:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                sanitize_event,
                _add_timestamp,
                structlog.processors.add_log_level,
                _render_json,
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(parse_level()),
        cache_logger_on_first_use=True,
    )
    return cast("structlog.BoundLogger", structlog.get_logger())


@contextmanager
def bookmark_context(url: str, name: str | None = None) -> Iterator[None]:
    """Tag every event logged inside the block with the bookmark being checked."""
    context: dict[str, str] = {"bookmark": url}
    if name:
        context["bookmark_name"] = name
    with structlog.contextvars.bound_contextvars(**context):
        yield


def get_logger(name: str) -> structlog.BoundLogger:
    return cast("structlog.BoundLogger", structlog.get_logger(name))
