"""Encode a :class:`RequestConfig` into a RoboHash request URL.

The URL has the shape::

    https://robohash.org/<key>.<ext>?set=<v>|sets=<v1,v2>&bgset=<v>&size=<w>x<h>[&gravatar=<v>][&ignoreext=false]

Parameter order is fixed.  The image set parameter is always first and
the only one prefixed with ``?``.
"""

from __future__ import annotations

from robohash_client.protocol.errors import InconsistentStateError
from robohash_client.protocol.keys import apply_extension, encode_key
from robohash_client.protocol.request import RequestConfig
from robohash_client.protocol.types import (
    ROBOHASH_URL,
    SIZE_SEPARATOR,
    GravatarMode,
    ImageSet,
    UrlParameter,
)


def image_sets_parameter(config: RequestConfig) -> str:
    """Return ``?set=any``, ``?set=<setN>`` or ``?sets=<N1>,<N2>,...``.

    ANY wins over any concrete sets it happens to share the list with.

    Raises:
        InconsistentStateError: If the config has no image sets at all.
    """
    image_sets = config.image_sets
    if not image_sets:
        raise InconsistentStateError(
            f"Request for {config.avatar_key!r} has no image sets"
        )
    if ImageSet.ANY in image_sets:
        return UrlParameter.IMAGE_SET.encode(ImageSet.ANY.value, first=True)
    if len(image_sets) == 1:
        return UrlParameter.IMAGE_SET.encode(image_sets[0].value, first=True)
    joined = ",".join(s.list_value for s in image_sets)
    return UrlParameter.IMAGE_SETS.encode(joined, first=True)


def background_set_parameter(config: RequestConfig) -> str:
    return UrlParameter.BACKGROUND_SET.encode(config.background_set.value)


def size_parameter(config: RequestConfig) -> str:
    return UrlParameter.SIZE.encode(f"{config.width}{SIZE_SEPARATOR}{config.height}")


def gravatar_parameter(config: RequestConfig) -> str:
    """Return the gravatar parameter, or ``""`` when the mode is NO."""
    if config.gravatar_mode is GravatarMode.NO:
        return ""
    return UrlParameter.GRAVATAR.encode(config.gravatar_mode.value)


def ignore_extension_parameter(config: RequestConfig) -> str:
    # RoboHash ignores extensions by default, so only the opt-out is sent
    if config.ignore_extension:
        return ""
    return UrlParameter.IGNORE_EXTENSION.encode("false")


def build_request_url(config: RequestConfig) -> str:
    """Build the request URL for *config*.  Never mutates *config*."""
    key = encode_key(apply_extension(config.avatar_key, config.image_extension))
    return "".join(
        (
            ROBOHASH_URL,
            key,
            image_sets_parameter(config),
            background_set_parameter(config),
            size_parameter(config),
            gravatar_parameter(config),
            ignore_extension_parameter(config),
        )
    )
