"""robohash-client transport layer."""

from robohash_client.sdk.transport.base import FetcherBase
from robohash_client.sdk.transport.http import HTTPFetcher

__all__ = [
    "FetcherBase",
    "HTTPFetcher",
]
