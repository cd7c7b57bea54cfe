"""Shared fixtures for robohash-client SDK tests."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from robohash_client.sdk.config import ClientConfig
from robohash_client.sdk.storage import WriterBase
from robohash_client.sdk.transport.base import FetcherBase
from robohash_client.sdk.transport.http import HTTPFetcher


class FakeFetcher(FetcherBase):
    """Returns canned bytes (or raises) and records requested URLs."""

    def __init__(self, data: bytes = b"", error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.urls: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.data

    def close(self) -> None:
        self.closed = True


class RecordingWriter(WriterBase):
    """Writes raw bytes unchanged and records each call."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[bytes, Path, str]] = []

    def write(self, data: bytes, path: Path | str, format_hint: str) -> None:
        self.calls.append((data, Path(path), format_hint))
        if self.error is not None:
            raise self.error
        Path(path).write_bytes(data)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep ROBOHASH_* variables from the outer environment out of tests."""
    monkeypatch.delenv("ROBOHASH_TIMEOUT", raising=False)
    monkeypatch.delenv("ROBOHASH_USER_AGENT", raising=False)


@pytest.fixture()
def fake_fetcher(png_bytes) -> FakeFetcher:
    return FakeFetcher(data=png_bytes)


@pytest.fixture()
def failing_fetcher():
    """Factory for a fetcher that raises *error* on every fetch."""

    def factory(error: Exception) -> FakeFetcher:
        return FakeFetcher(error=error)

    return factory


@pytest.fixture()
def recording_writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture()
def failing_writer():
    """Factory for a writer that raises *error* on every write."""

    def factory(error: Exception) -> RecordingWriter:
        return RecordingWriter(error=error)

    return factory


@pytest.fixture()
def mock_http_fetcher():
    """Build an HTTPFetcher whose client is backed by ``httpx.MockTransport``.

    Returns a factory taking the request handler; requests seen by the
    handler are collected in ``factory.requests``.
    """
    clients: list[httpx.Client] = []
    requests: list[httpx.Request] = []

    def factory(handler) -> HTTPFetcher:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        config = ClientConfig()
        client = httpx.Client(
            transport=httpx.MockTransport(recording_handler),
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
            follow_redirects=config.follow_redirects,
        )
        clients.append(client)
        return HTTPFetcher(config, client=client)

    factory.requests = requests
    yield factory
    for client in clients:
        client.close()
