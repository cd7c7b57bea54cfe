"""robohash-client SDK -- fetching and saving RoboHash avatars."""

from robohash_client.sdk.client import RoboHashClient
from robohash_client.sdk.config import ClientConfig

__all__ = ["RoboHashClient", "ClientConfig"]
