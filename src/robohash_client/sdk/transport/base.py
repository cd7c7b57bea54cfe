"""Abstract fetch interface for retrieving avatar bytes."""

from __future__ import annotations

import abc


class FetcherBase(abc.ABC):
    """Retrieves the raw bytes behind a URL.

    One implementation ships with the library, ``HTTPFetcher`` (httpx).
    Tests and callers needing retries or caching can supply their own.
    """

    @abc.abstractmethod
    def fetch(self, url: str) -> bytes:
        """Return the response body for *url*.

        Implementations raise ``FetchError`` on any transport or
        response problem and make exactly one attempt.
        """

    def close(self) -> None:
        """Release any held resources.  No-op by default."""
