"""robohash-client exception hierarchy.

All library exceptions inherit from :class:`RoboHashError`.
"""

from __future__ import annotations


class RoboHashError(Exception):
    """Base exception for all robohash-client errors."""


class InvalidArgumentError(RoboHashError, ValueError):
    """Raised when a caller supplies an invalid argument."""


class FetchError(RoboHashError):
    """Raised when image bytes cannot be retrieved from RoboHash."""


class WriteError(RoboHashError):
    """Raised when fetched image bytes cannot be written to disk."""


class InconsistentStateError(RoboHashError, RuntimeError):
    """Raised when a request is found in a state its builder should never allow."""
