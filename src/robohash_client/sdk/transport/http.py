"""HTTP fetcher via httpx with connection pooling."""

from __future__ import annotations

import logging

import httpx

from robohash_client.protocol.errors import FetchError
from robohash_client.sdk.config import ClientConfig
from robohash_client.sdk.transport.base import FetcherBase

logger = logging.getLogger(__name__)


class HTTPFetcher(FetcherBase):
    """Synchronous fetcher using a shared ``httpx.Client``.

    The client is created on construction and reused for every fetch
    (connection pooling).  Call ``close()`` or use the fetcher as a
    context manager to release it.  A client passed in by the caller is
    used as-is and not closed by the fetcher.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                headers={"User-Agent": self._config.user_agent},
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
            )
        self._client: httpx.Client | None = client

    def fetch(self, url: str) -> bytes:
        """GET *url* once and return the image bytes.

        Raises:
            FetchError: On transport errors, non-2xx responses, empty bodies,
                or a ``Content-Type`` that is not an image.
        """
        if self._client is None:
            raise FetchError("HTTPFetcher is closed")

        logger.debug("Fetching %s", url)
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"RoboHash returned HTTP {exc.response.status_code} for {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc

        content_type = resp.headers.get("content-type", "")
        if content_type and not content_type.lower().startswith("image/"):
            raise FetchError(
                f"Expected an image from {url}, got content type {content_type!r}"
            )
        data = resp.content
        if not data:
            raise FetchError(f"Empty response body from {url}")

        logger.debug("Fetched %d bytes from %s", len(data), url)
        return data

    def close(self) -> None:
        """Close the httpx client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
        self._client = None

    def __enter__(self) -> HTTPFetcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
