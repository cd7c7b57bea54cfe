"""RoboHash client -- builds request URLs and retrieves the images behind them.

The fetch and write steps are delegated to injectable collaborators
(:class:`FetcherBase`, :class:`WriterBase`) so they can be swapped for
fakes in tests or wrapped with retries by callers.  Each call makes a
single attempt.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from robohash_client.protocol.errors import (
    FetchError,
    InvalidArgumentError,
    WriteError,
)
from robohash_client.protocol.keys import is_valid_filename
from robohash_client.protocol.request import RequestConfig
from robohash_client.protocol.url import build_request_url
from robohash_client.sdk.config import ClientConfig
from robohash_client.sdk.storage import (
    PillowWriter,
    WriterBase,
    decode_image,
    path_exists,
    path_is_directory,
)
from robohash_client.sdk.transport.base import FetcherBase
from robohash_client.sdk.transport.http import HTTPFetcher

logger = logging.getLogger(__name__)


class RoboHashClient:
    """Retrieve RoboHash avatars described by :class:`RequestConfig` objects.

    Usage::

        with RoboHashClient() as client:
            request = RequestConfig("minimal").add_image_set(ImageSet.KITTENS)
            client.save_to_file(request, "kitten.png")

    Args:
        config: HTTP settings for the default fetcher.  Ignored when
            *fetcher* is given.
        fetcher: Collaborator that downloads URL bytes.  Defaults to an
            :class:`HTTPFetcher` owned (and closed) by this client.
        writer: Collaborator that persists bytes.  Defaults to
            :class:`PillowWriter`.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        fetcher: FetcherBase | None = None,
        writer: WriterBase | None = None,
    ) -> None:
        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher if fetcher is not None else HTTPFetcher(config)
        self._writer = writer if writer is not None else PillowWriter()

    @staticmethod
    def build_request_url(request: RequestConfig) -> str:
        return build_request_url(request)

    def get_image_bytes(self, request: RequestConfig) -> bytes:
        """Fetch the raw image bytes for *request*.

        Raises:
            FetchError: If the fetcher fails for any reason.
        """
        url = build_request_url(request)
        try:
            return self._fetcher.fetch(url)
        except FetchError:
            raise
        except Exception as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc

    def get_image(self, request: RequestConfig) -> Image.Image:
        """Fetch and decode the image for *request*.

        Raises:
            FetchError: If fetching fails or the payload is not an image.
        """
        return decode_image(self.get_image_bytes(request))

    def save_to_file(self, request: RequestConfig, destination: Path | str) -> Path:
        """Fetch the image for *request* and write it to *destination*.

        The image is written in the format of ``request.image_extension``,
        independent of what the service returned.  *destination* is checked
        before anything is fetched.

        Returns:
            The destination as a :class:`Path`.

        Raises:
            InvalidArgumentError: If *destination* exists, is a directory,
                or has an unusable file name.
            FetchError: If the image cannot be fetched.
            WriteError: If the image cannot be written.
        """
        path = Path(destination)
        if path_is_directory(path):
            raise InvalidArgumentError(f"Destination is a directory: {path}")
        if path_exists(path):
            raise InvalidArgumentError(f"Destination already exists: {path}")
        if not is_valid_filename(path.name):
            raise InvalidArgumentError(f"Invalid destination file name: {path.name!r}")

        data = self.get_image_bytes(request)
        format_hint = request.image_extension.value
        try:
            self._writer.write(data, path, format_hint)
        except WriteError:
            raise
        except Exception as exc:
            raise WriteError(f"Failed to write {path}: {exc}") from exc

        logger.info("Saved avatar for %r to %s", request.avatar_key, path)
        return path

    def close(self) -> None:
        """Close the fetcher if this client created it."""
        if self._owns_fetcher:
            self._fetcher.close()

    def __enter__(self) -> RoboHashClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
