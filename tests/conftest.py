"""Shared test fixtures for robohash-client tests."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from robohash_client.protocol.request import RequestConfig
from robohash_client.protocol.types import (
    BackgroundSet,
    GravatarMode,
    ImageExtension,
    ImageSet,
)


def _make_image_bytes(fmt: str = "PNG", mode: str = "RGBA", size: int = 8) -> bytes:
    """Create a small valid image for fake RoboHash responses."""
    color = (100, 150, 200, 255) if mode == "RGBA" else (100, 150, 200)
    img = Image.new(mode, (size, size), color)
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return _make_image_bytes()


@pytest.fixture()
def image_bytes():
    """Factory fixture: ``image_bytes(fmt="JPEG", mode="RGB")``."""
    return _make_image_bytes


@pytest.fixture()
def minimal_config() -> RequestConfig:
    return RequestConfig("minimal")


@pytest.fixture()
def full_config() -> RequestConfig:
    """Every parameter set away from its default."""
    return (
        RequestConfig("2bf1b7a19bcad06a8e894d7373a4cfc7")
        .set_size(500, 500)
        .set_gravatar_mode(GravatarMode.HASHED)
        .add_image_set(ImageSet.HUMANS)
        .set_background_set(BackgroundSet.SPIRAL_AND_PATTERNS)
        .set_image_extension(ImageExtension.JPEG)
        .set_ignore_extension(False)
    )
