"""Local persistence for fetched avatars, backed by Pillow.

The bytes RoboHash returns are decoded and re-encoded in the container
named by the format hint, so a ``.bmp`` destination really holds a bitmap
whatever the service sent.
"""

from __future__ import annotations

import abc
import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from robohash_client.protocol.errors import FetchError, InvalidArgumentError, WriteError
from robohash_client.protocol.types import ImageExtension

logger = logging.getLogger(__name__)

# Modes each Pillow format can store without conversion
_JPEG_MODES = {"L", "RGB", "CMYK"}
_BMP_MODES = {"1", "L", "P", "RGB"}


def path_exists(path: Path | str) -> bool:
    return Path(path).exists()


def path_is_directory(path: Path | str) -> bool:
    return Path(path).is_dir()


def decode_image(data: bytes) -> Image.Image:
    """Decode *data* into a fully loaded Pillow image.

    Raises:
        FetchError: If *data* is not an image Pillow can read.
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        raise FetchError(f"Response is not a decodable image: {exc}") from exc
    return image


def _convert_for(image: Image.Image, pillow_format: str) -> Image.Image:
    if pillow_format == "JPEG" and image.mode not in _JPEG_MODES:
        return image.convert("RGB")
    if pillow_format == "BMP" and image.mode not in _BMP_MODES:
        return image.convert("RGB")
    return image


class WriterBase(abc.ABC):
    """Writes image bytes to a path in the format named by a hint."""

    @abc.abstractmethod
    def write(self, data: bytes, path: Path | str, format_hint: str) -> None:
        """Persist *data* at *path*.

        *format_hint* is an extension suffix without the period
        (``"png"``, ``"jpg"``, ...).  Implementations raise ``WriteError``
        on any failure.
        """


class PillowWriter(WriterBase):
    """Re-encodes image bytes with Pillow and saves them to disk."""

    def write(self, data: bytes, path: Path | str, format_hint: str) -> None:
        path = Path(path)
        try:
            extension = ImageExtension.from_suffix(format_hint)
        except InvalidArgumentError as exc:
            raise WriteError(str(exc)) from exc

        try:
            image = decode_image(data)
        except FetchError as exc:
            raise WriteError(f"Cannot write {path}: {exc}") from exc

        image = _convert_for(image, extension.pillow_format)
        existed = path.exists()
        try:
            image.save(path, format=extension.pillow_format)
        except (OSError, ValueError) as exc:
            # Don't leave a truncated file behind
            if not existed:
                path.unlink(missing_ok=True)
            raise WriteError(f"Failed to write {path}: {exc}") from exc

        logger.debug("Wrote %s image to %s", extension.pillow_format, path)
