from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import AppConfig

if TYPE_CHECKING:
    from pathlib import Path

USER_AGENT_ENV = "BOOKMARK_WATCHER_USER_AGENT"


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    user_agent = os.environ.get(USER_AGENT_ENV)
    if not user_agent:
        return data
    check = data.get("check", {})
    if not isinstance(check, dict):
        return data
    return {**data, "check": {**check, "user_agent": user_agent}}


def load_config(path: Path) -> AppConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = "config not found"
        raise ConfigError(msg, path=path) from exc
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg, path=path) from exc

    try:
        return AppConfig.from_raw(_apply_env_overrides(data))
    except ValidationError as exc:
        msg = f"invalid config: {exc.error_count()} validation error(s)"
        raise ConfigError(msg, path=path) from exc
