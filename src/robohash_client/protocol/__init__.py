"""robohash-client protocol layer -- request model and URL encoding.

Public API re-exports for ``robohash_client.protocol``.  Nothing in this
package performs I/O.
"""

from robohash_client.protocol.types import (
    ROBOHASH_PROTOCOL,
    ROBOHASH_DOMAIN,
    ROBOHASH_URL,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    UrlParameter,
    ImageSet,
    BackgroundSet,
    ImageExtension,
    GravatarMode,
)

from robohash_client.protocol.errors import (
    RoboHashError,
    InvalidArgumentError,
    FetchError,
    WriteError,
    InconsistentStateError,
)

from robohash_client.protocol.keys import (
    apply_extension,
    encode_key,
    hash_email,
    is_safe_key,
    is_valid_filename,
)

from robohash_client.protocol.request import RequestConfig

from robohash_client.protocol.url import build_request_url

__all__ = [
    # Types
    "ROBOHASH_PROTOCOL",
    "ROBOHASH_DOMAIN",
    "ROBOHASH_URL",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "UrlParameter",
    "ImageSet",
    "BackgroundSet",
    "ImageExtension",
    "GravatarMode",
    # Errors
    "RoboHashError",
    "InvalidArgumentError",
    "FetchError",
    "WriteError",
    "InconsistentStateError",
    # Keys
    "apply_extension",
    "encode_key",
    "hash_email",
    "is_safe_key",
    "is_valid_filename",
    # Request
    "RequestConfig",
    "build_request_url",
]
