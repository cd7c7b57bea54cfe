"""robohash-client -- request builder and fetch helper for RoboHash avatars.

Top-level convenience re-exports::

    from robohash_client import RequestConfig, RoboHashClient, build_request_url
    from robohash_client.protocol import ImageSet, BackgroundSet  # enums, errors
"""

__version__ = "0.1.0"

from robohash_client.protocol import (  # noqa: E402
    BackgroundSet,
    GravatarMode,
    ImageExtension,
    ImageSet,
    RequestConfig,
    RoboHashError,
    build_request_url,
)
from robohash_client.sdk import ClientConfig, RoboHashClient  # noqa: E402

__all__ = [
    "__version__",
    "BackgroundSet",
    "GravatarMode",
    "ImageExtension",
    "ImageSet",
    "RequestConfig",
    "RoboHashError",
    "build_request_url",
    "ClientConfig",
    "RoboHashClient",
]
