"""Fluent builder describing a single RoboHash avatar request.

Every mutator validates its input, returns ``self`` for chaining, and
leaves the builder untouched when it raises::

    config = (
        RequestConfig("nathan-cheshire")
        .add_image_set(ImageSet.MONSTERS)
        .set_background_set(BackgroundSet.OUTSIDE)
        .set_size(600, 600)
    )
"""

from __future__ import annotations

from typing import Iterable

from robohash_client.protocol.errors import InvalidArgumentError
from robohash_client.protocol.keys import hash_email, is_blank, is_safe_key
from robohash_client.protocol.types import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    BackgroundSet,
    GravatarMode,
    ImageExtension,
    ImageSet,
)

DEFAULT_BACKGROUND_SET = BackgroundSet.ANY
DEFAULT_IMAGE_EXTENSION = ImageExtension.PNG
DEFAULT_GRAVATAR_MODE = GravatarMode.NO
DEFAULT_IGNORE_EXTENSION = True


def _check_member(value: object, enum_cls: type, label: str) -> None:
    if not isinstance(value, enum_cls):
        raise InvalidArgumentError(
            f"{label} must be a {enum_cls.__name__}, got {value!r}"
        )


def _check_dimension(value: object, label: str) -> None:
    # bool is an int subclass but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{label} must be >= 0, got {value}")


def _image_set_list(image_sets: Iterable[ImageSet]) -> list[ImageSet]:
    """Materialise and validate a bulk image set argument."""
    if image_sets is None:
        raise InvalidArgumentError("image_sets must not be None")
    items = list(image_sets)
    if not items:
        raise InvalidArgumentError("image_sets must not be empty")
    for item in items:
        _check_member(item, ImageSet, "image set")
    return items


class RequestConfig:
    """All parameters of one RoboHash avatar request.

    Args:
        avatar_key: Text the avatar is derived from.  Must not be blank.
        unsafe_key_mode: When False (the default) the key is rejected unless
            it only contains ``[A-Za-z0-9._~-]``.  When True any key is
            accepted and percent-encoded when the URL is built.

    Raises:
        InvalidArgumentError: If the key is blank, or contains unsafe
            characters while *unsafe_key_mode* is False.
    """

    def __init__(self, avatar_key: str, unsafe_key_mode: bool = False) -> None:
        if not isinstance(avatar_key, str):
            raise InvalidArgumentError(
                f"avatar_key must be a string, got {avatar_key!r}"
            )
        if is_blank(avatar_key):
            raise InvalidArgumentError("avatar_key must not be empty or whitespace")
        if not unsafe_key_mode and not is_safe_key(avatar_key):
            raise InvalidArgumentError(
                f"avatar_key contains characters outside [A-Za-z0-9._~-]: {avatar_key!r}"
            )

        self._avatar_key = avatar_key
        self._unsafe_key_mode = bool(unsafe_key_mode)
        self._image_sets: list[ImageSet] = [ImageSet.ANY]
        self._background_set = DEFAULT_BACKGROUND_SET
        self._width = DEFAULT_WIDTH
        self._height = DEFAULT_HEIGHT
        self._gravatar_mode = DEFAULT_GRAVATAR_MODE
        self._ignore_extension = DEFAULT_IGNORE_EXTENSION
        self._image_extension = DEFAULT_IMAGE_EXTENSION

    @classmethod
    def for_email(cls, email: str) -> RequestConfig:
        """Build a request that asks RoboHash to try the Gravatar for *email*.

        The key is the MD5 digest of the normalised email and the gravatar
        mode is HASHED, so the address never appears in the URL and the
        extension rewrite cannot truncate its domain.
        """
        if not isinstance(email, str) or is_blank(email):
            raise InvalidArgumentError("email must not be empty or whitespace")
        return cls(hash_email(email)).set_gravatar_mode(GravatarMode.HASHED)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def avatar_key(self) -> str:
        return self._avatar_key

    @property
    def unsafe_key_mode(self) -> bool:
        return self._unsafe_key_mode

    @property
    def image_sets(self) -> tuple[ImageSet, ...]:
        """Image sets in insertion order (read-only view)."""
        return tuple(self._image_sets)

    @property
    def background_set(self) -> BackgroundSet:
        return self._background_set

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def gravatar_mode(self) -> GravatarMode:
        return self._gravatar_mode

    @property
    def ignore_extension(self) -> bool:
        """Whether RoboHash ignores the key's extension when hashing it."""
        return self._ignore_extension

    @property
    def image_extension(self) -> ImageExtension:
        return self._image_extension

    # ------------------------------------------------------------------
    # Image sets
    # ------------------------------------------------------------------

    def _append_image_set(self, image_set: ImageSet) -> None:
        if not image_set.is_any and ImageSet.ANY in self._image_sets:
            self._image_sets = [s for s in self._image_sets if not s.is_any]
        self._image_sets.append(image_set)

    def _ensure_image_sets(self) -> None:
        if not self._image_sets:
            self._image_sets = [ImageSet.ANY]

    def add_image_set(self, image_set: ImageSet) -> RequestConfig:
        """Allow *image_set*.  Adding a concrete set drops ANY."""
        _check_member(image_set, ImageSet, "image set")
        self._append_image_set(image_set)
        return self

    def remove_image_set(self, image_set: ImageSet) -> RequestConfig:
        """Remove the first occurrence of *image_set*, restoring ANY if none remain."""
        _check_member(image_set, ImageSet, "image set")
        if image_set in self._image_sets:
            self._image_sets.remove(image_set)
        self._ensure_image_sets()
        return self

    def add_image_sets(self, image_sets: Iterable[ImageSet]) -> RequestConfig:
        """Add each of *image_sets* in order, as :meth:`add_image_set` would."""
        for image_set in _image_set_list(image_sets):
            self._append_image_set(image_set)
        return self

    def remove_image_sets(self, image_sets: Iterable[ImageSet]) -> RequestConfig:
        """Remove every occurrence of each of *image_sets*."""
        doomed = set(_image_set_list(image_sets))
        self._image_sets = [s for s in self._image_sets if s not in doomed]
        self._ensure_image_sets()
        return self

    def set_image_sets(self, image_sets: Iterable[ImageSet]) -> RequestConfig:
        """Replace the image sets with *image_sets*."""
        items = _image_set_list(image_sets)
        self._image_sets = []
        for image_set in items:
            self._append_image_set(image_set)
        return self

    def reset_image_sets(self) -> RequestConfig:
        self._image_sets = [ImageSet.ANY]
        return self

    # ------------------------------------------------------------------
    # Background set
    # ------------------------------------------------------------------

    def set_background_set(self, background_set: BackgroundSet) -> RequestConfig:
        _check_member(background_set, BackgroundSet, "background set")
        self._background_set = background_set
        return self

    def reset_background_set(self) -> RequestConfig:
        self._background_set = DEFAULT_BACKGROUND_SET
        return self

    # ------------------------------------------------------------------
    # Extension, gravatar
    # ------------------------------------------------------------------

    def set_image_extension(self, image_extension: ImageExtension) -> RequestConfig:
        _check_member(image_extension, ImageExtension, "image extension")
        self._image_extension = image_extension
        return self

    def reset_image_extension(self) -> RequestConfig:
        self._image_extension = DEFAULT_IMAGE_EXTENSION
        return self

    def set_ignore_extension(self, ignore_extension: bool) -> RequestConfig:
        """Set whether the key's extension should be left out of RoboHash's hash.

        When True (the default) ``alive.png`` and ``alive.bmp`` yield the
        same robot.
        """
        if not isinstance(ignore_extension, bool):
            raise InvalidArgumentError(
                f"ignore_extension must be a bool, got {ignore_extension!r}"
            )
        self._ignore_extension = ignore_extension
        return self

    def reset_ignore_extension(self) -> RequestConfig:
        self._ignore_extension = DEFAULT_IGNORE_EXTENSION
        return self

    def set_gravatar_mode(self, gravatar_mode: GravatarMode) -> RequestConfig:
        _check_member(gravatar_mode, GravatarMode, "gravatar mode")
        self._gravatar_mode = gravatar_mode
        return self

    def reset_gravatar_mode(self) -> RequestConfig:
        self._gravatar_mode = DEFAULT_GRAVATAR_MODE
        return self

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    def set_width(self, width: int) -> RequestConfig:
        _check_dimension(width, "width")
        self._width = width
        return self

    def reset_width(self) -> RequestConfig:
        self._width = DEFAULT_WIDTH
        return self

    def set_height(self, height: int) -> RequestConfig:
        _check_dimension(height, "height")
        self._height = height
        return self

    def reset_height(self) -> RequestConfig:
        self._height = DEFAULT_HEIGHT
        return self

    def set_size(self, width: int, height: int) -> RequestConfig:
        """Set both dimensions, or neither if either is invalid."""
        _check_dimension(width, "width")
        _check_dimension(height, "height")
        self._width = width
        self._height = height
        return self

    def reset_size(self) -> RequestConfig:
        self._width = DEFAULT_WIDTH
        self._height = DEFAULT_HEIGHT
        return self

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def copy(self) -> RequestConfig:
        """Return an independent builder equal to this one."""
        clone = RequestConfig.__new__(RequestConfig)
        clone.__dict__.update(self.__dict__)
        clone._image_sets = list(self._image_sets)
        return clone

    def _fields(self) -> tuple:
        return (
            self._avatar_key,
            self._unsafe_key_mode,
            tuple(self._image_sets),
            self._background_set,
            self._width,
            self._height,
            self._gravatar_mode,
            self._ignore_extension,
            self._image_extension,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestConfig):
            return NotImplemented
        return self._fields() == other._fields()

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        sets = ", ".join(s.name for s in self._image_sets)
        return (
            f"RequestConfig(avatar_key={self._avatar_key!r}, "
            f"unsafe_key_mode={self._unsafe_key_mode}, "
            f"image_sets=[{sets}], "
            f"background_set={self._background_set.name}, "
            f"width={self._width}, height={self._height}, "
            f"gravatar_mode={self._gravatar_mode.name}, "
            f"ignore_extension={self._ignore_extension}, "
            f"image_extension={self._image_extension.name})"
        )
