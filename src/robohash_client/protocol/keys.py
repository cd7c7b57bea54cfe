"""Avatar key validation and rewriting.

An avatar key is the text RoboHash derives an image from.  In safe mode a
key may only contain unreserved URL characters (``[A-Za-z0-9._~-]``) so it
can be embedded in a URL path without escaping.
"""

from __future__ import annotations

import hashlib
import re
from urllib.parse import quote

from robohash_client.protocol.types import ImageExtension

_SAFE_KEY_RE = re.compile(r"^[A-Za-z0-9._~-]+$")

# Characters rejected in file names on Windows or Unix
_INVALID_FILENAME_CHARS = frozenset('<>:\\|?*/\'"\x00')


def is_blank(text: str) -> bool:
    """Return True if *text* is empty or whitespace only."""
    return not text.strip()


def is_safe_key(key: str) -> bool:
    """Return True if *key* is non-empty and uses only unreserved URL characters."""
    return bool(_SAFE_KEY_RE.match(key))


def apply_extension(key: str, extension: ImageExtension) -> str:
    """Give *key* the suffix of *extension*.

    If the key already has an extension, everything from the last period
    onward is replaced: ``"my-image.loop.something"`` -> ``"my-image.loop.png"``.
    Otherwise the extension is appended.
    """
    stem, period, _ = key.rpartition(".")
    if not period:
        return extension.add_as_suffix(key)
    return extension.add_as_suffix(stem)


def encode_key(key: str) -> str:
    """Percent-encode *key* for use as a single URL path segment.

    Safe keys come back unchanged.
    """
    return quote(key, safe="")


def hash_email(email: str) -> str:
    """Return the Gravatar-style MD5 hex digest of a stripped, lowercased email."""
    normalized = email.strip().lower().encode("utf-8")
    return hashlib.md5(normalized, usedforsecurity=False).hexdigest()


def is_valid_filename(filename: str) -> bool:
    """Return True if *filename* is non-empty and portable across Windows and Unix."""
    if not filename:
        return False
    return not any(c in _INVALID_FILENAME_CHARS for c in filename)
