"""Shared fixtures: isolated settings, transport stubs and plain consoles."""

from __future__ import annotations

import asyncio
import io
from typing import Any, Callable

import httpx
import pytest
from rich.console import Console

from core.log_config import configure_logging

BASE_URL = "https://catfact.test"


class TrackingStream(httpx.AsyncByteStream):
    """Response body that records whether anyone iterated it."""

    def __init__(self, content: bytes) -> None:
        self.content = content
        self.was_read = False

    async def __aiter__(self):  # type: ignore[override]
        self.was_read = True
        yield self.content


class StubFetcher:
    """In-memory `JsonFetcher` with optional delay and failure."""

    def __init__(self, payload: Any = None, *, error: Exception | None = None, delay: float = 0.0) -> None:
        self.payload = payload
        self.error = error
        self.delay = delay
        self.urls: list[str] = []

    async def fetch_json(self, url: str) -> Any:
        self.urls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real env vars and .env files out of AppSettings."""

    for key in ("CATFACTS_BASE_URL", "CATFACTS_FACTS_LIMIT", "CATFACTS_SEQUENTIAL", "CATFACTS_LOG_LEVEL", "CATFACTS_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging()


@pytest.fixture
def plain_console() -> Callable[[], tuple[Console, io.StringIO]]:
    def factory() -> tuple[Console, io.StringIO]:
        buffer = io.StringIO()
        return Console(file=buffer, force_terminal=False, color_system=None, width=200), buffer

    return factory


def fact_payload(text: str) -> dict[str, Any]:
    return {"fact": text, "length": len(text)}


def facts_payload(*texts: str) -> dict[str, Any]:
    return {
        "current_page": 1,
        "data": [fact_payload(t) for t in texts],
        "per_page": len(texts),
        "total": 332,
    }


def breeds_payload(*names: str) -> dict[str, Any]:
    return {
        "current_page": 1,
        "data": [{"breed": n, "country": "Unknown", "origin": "Natural", "coat": "Short", "pattern": "All"} for n in names],
    }
