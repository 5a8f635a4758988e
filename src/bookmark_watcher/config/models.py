from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookmark_watcher.detection.http_fetcher import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT

if TYPE_CHECKING:
    from collections.abc import Mapping


class CheckConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    pause_seconds: float = Field(default=0.1, ge=0)
    deadline_seconds: float | None = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("user_agent")
    @classmethod
    def _validate_user_agent(cls, value: str) -> str:
        if not value.strip():
            msg = "is required"
            raise ValueError(msg)
        return value


class BookmarkConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str
    name: str | None = None
    fingerprint: str = ""

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        if not value.strip():
            msg = "is required"
            raise ValueError(msg)
        return value

    @property
    def label(self) -> str:
        return self.name or self.url


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    check: CheckConfig = CheckConfig()
    bookmarks: list[BookmarkConfig]
    interval_seconds: int = Field(default=3600, gt=0)

    @field_validator("bookmarks")
    @classmethod
    def _validate_bookmarks(cls, value: list[BookmarkConfig]) -> list[BookmarkConfig]:
        if not value:
            msg = "must be non-empty"
            raise ValueError(msg)
        return value

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> AppConfig:
        return cls.model_validate(data)
