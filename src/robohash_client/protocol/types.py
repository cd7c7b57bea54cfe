"""Core types and constants for RoboHash request URLs."""

from __future__ import annotations

from enum import Enum

from robohash_client.protocol.errors import InvalidArgumentError


ROBOHASH_PROTOCOL = "https"
ROBOHASH_DOMAIN = "robohash.org"
ROBOHASH_URL = f"{ROBOHASH_PROTOCOL}://{ROBOHASH_DOMAIN}/"

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 300

# Separator between width and height in the size parameter (e.g. "300x300")
SIZE_SEPARATOR = "x"


class UrlParameter(str, Enum):
    """Query parameter names understood by RoboHash."""

    IMAGE_SET = "set"
    IMAGE_SETS = "sets"
    BACKGROUND_SET = "bgset"
    SIZE = "size"
    GRAVATAR = "gravatar"
    IGNORE_EXTENSION = "ignoreext"

    def encode(self, value: str, first: bool = False) -> str:
        """Return ``?name=value`` for the first parameter, ``&name=value`` otherwise."""
        prefix = "?" if first else "&"
        return f"{prefix}{self.value}={value}"


class ImageSet(str, Enum):
    """Avatar image sets.

    The member value is the singular ``set`` parameter value, so
    ``ImageSet.MONSTERS == "set2"`` is True.  :attr:`list_value` is the form
    used inside the plural ``sets`` parameter.
    """

    DEFAULT = "set1"
    MONSTERS = "set2"
    SEXY_ROBOTS = "set3"
    KITTENS = "set4"
    HUMANS = "set5"
    ANY = "any"

    @property
    def is_any(self) -> bool:
        return self is ImageSet.ANY

    @property
    def list_value(self) -> str:
        """Return the ``sets`` list form, e.g. ``"2"`` for MONSTERS.

        Raises:
            InvalidArgumentError: For :attr:`ANY`, which has no list form.
        """
        if self.is_any:
            raise InvalidArgumentError("ImageSet.ANY has no list form")
        return self.value[len("set"):]


class BackgroundSet(str, Enum):
    """Avatar background sets."""

    OUTSIDE = "bg1"
    SPIRAL_AND_PATTERNS = "bg2"
    ANY = "any"


class ImageExtension(str, Enum):
    """Image extensions RoboHash can render.

    BITMAP takes noticeably longer for the service to generate.
    """

    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"
    BITMAP = "bmp"

    @property
    def with_period(self) -> str:
        return f".{self.value}"

    @property
    def pillow_format(self) -> str:
        """Pillow format name used when writing this extension to disk."""
        return _PILLOW_FORMATS[self]

    def add_as_suffix(self, prefix: str) -> str:
        """Append this extension to *prefix*: ``"bart"`` -> ``"bart.jpg"``."""
        return prefix + self.with_period

    @classmethod
    def from_suffix(cls, suffix: str) -> ImageExtension:
        """Look up an extension by suffix, ignoring case and a leading period.

        Raises:
            InvalidArgumentError: If *suffix* is not a supported extension.
        """
        normalized = suffix.strip().lower().lstrip(".")
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidArgumentError(
                f"Unsupported image extension: {suffix!r}"
            ) from None


_PILLOW_FORMATS = {
    ImageExtension.JPG: "JPEG",
    ImageExtension.JPEG: "JPEG",
    ImageExtension.PNG: "PNG",
    ImageExtension.BITMAP: "BMP",
}


class GravatarMode(str, Enum):
    """Whether RoboHash should try a Gravatar lookup for the key.

    ``YES`` treats the key as a plain email address, ``HASHED`` as an
    email that has already been MD5 hashed.  ``NO`` is never sent.
    """

    NO = "no"
    YES = "yes"
    HASHED = "hashed"
