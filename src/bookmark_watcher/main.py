from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import httpx
import typer

from bookmark_watcher.config import ConfigError, load_config
from bookmark_watcher.core import BookmarkState, BookmarkWatcher, WatcherScheduler
from bookmark_watcher.detection.change_checker import ChangeChecker, check_for_changes
from bookmark_watcher.detection.http_fetcher import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT, HttpFetcher
from bookmark_watcher.observability import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from bookmark_watcher.core import SweepReport

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


@dataclass(frozen=True, slots=True)
class ApplicationComponents:
    config_path: Path
    client: httpx.AsyncClient
    watcher: BookmarkWatcher
    scheduler: WatcherScheduler
    interval_seconds: int


@asynccontextmanager
async def create_application(config_path: Path) -> AsyncIterator[ApplicationComponents]:
    config = load_config(config_path)

    client = httpx.AsyncClient()
    fetcher = HttpFetcher(client, timeout_seconds=config.check.timeout_seconds, user_agent=config.check.user_agent)
    watcher = BookmarkWatcher(
        bookmarks=[BookmarkState.from_config(bookmark) for bookmark in config.bookmarks],
        checker=ChangeChecker(fetcher=fetcher),
        config=config.check,
    )
    scheduler = WatcherScheduler(interval_seconds=config.interval_seconds, watcher=watcher)

    try:
        yield ApplicationComponents(
            config_path=config_path,
            client=client,
            watcher=watcher,
            scheduler=scheduler,
            interval_seconds=config.interval_seconds,
        )
    finally:
        await client.aclose()


@app.command()
def check(
    url: Annotated[str, typer.Argument(help="Page or feed to check; the scheme may be omitted.")],
    previous: Annotated[str, typer.Option("--previous", "-p", help="Fingerprint from the last check.")] = "",
    timeout: Annotated[float, typer.Option("--timeout", min=0.1)] = DEFAULT_TIMEOUT_SECONDS,
    user_agent: Annotated[str, typer.Option("--user-agent")] = DEFAULT_USER_AGENT,
) -> None:
    """Check a single bookmark and print the result as JSON."""
    configure_logging()
    result = asyncio.run(check_for_changes(url, previous, timeout_seconds=timeout, user_agent=user_agent))
    typer.echo(json.dumps(result.to_dict(), ensure_ascii=False))


@app.command()
def run(
    config: Annotated[Path, typer.Option("--config", "-c")],
    once: Annotated[bool, typer.Option("--once")] = False,
) -> None:
    """Sweep the configured bookmarks once, or on a schedule."""
    configure_logging()
    try:
        if once:
            asyncio.run(_run_once(config))
        else:
            asyncio.run(_run_scheduler(config))
    except ConfigError as exc:
        logger.error("config_invalid", path=str(config), error=str(exc))
        raise typer.Exit(code=1) from exc


async def _run_once(config_path: Path) -> None:
    async with create_application(config_path) as app_state:
        report = await app_state.watcher.check_all()
    _echo_report(report)


async def _run_scheduler(config_path: Path) -> None:
    async with create_application(config_path) as app_state:
        await app_state.scheduler.start()
        logger.info("scheduler_started", interval_seconds=app_state.interval_seconds)
        try:
            await asyncio.Event().wait()
        finally:
            await app_state.scheduler.shutdown()


def _echo_report(report: SweepReport) -> None:
    for outcome in report.outcomes:
        line = {"url": outcome.bookmark.url, "name": outcome.bookmark.name, **outcome.result.to_dict()}
        typer.echo(json.dumps(line, ensure_ascii=False))
    if report.timed_out:
        typer.echo(f"stopped after {report.completed} of {report.total} bookmarks: deadline exceeded", err=True)


if __name__ == "__main__":
    app()
